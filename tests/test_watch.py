"""Tests for rx_watch()."""

import pytest

from rxsuper import NoObservableReadError, rx_state, rx_watch


class TestRxWatch:
    def test_runs_immediately(self):
        o = rx_state(10)
        log = []
        rx_watch(lambda: log.append(o.value))
        assert log == [10]

    def test_reruns_on_change(self):
        o = rx_state(10)
        log = []
        rx_watch(lambda: log.append(o.value))
        o.value = 20
        o.value = 30
        assert log == [10, 20, 30]

    def test_ignores_unread_cells(self):
        read, unread = rx_state(1), rx_state(1)
        log = []
        rx_watch(lambda: log.append(read.value))
        unread.value = 2
        assert log == [1]

    def test_stop_when_detaches(self):
        loading = rx_state(True)
        log = []
        handle = rx_watch(lambda: log.append(loading.value), stop_when=lambda: not loading.value)
        assert log == [True]

        loading.value = False
        assert log == [True]
        assert handle.disposed
        assert not loading.has_listeners

        loading.value = True
        assert log == [True]

    def test_stop_when_not_yet_satisfied_reruns(self):
        count = rx_state(0)
        log = []
        rx_watch(lambda: log.append(count.value), stop_when=lambda: count.value >= 2)
        count.value = 1
        count.value = 2
        count.value = 3
        assert log == [0, 1]

    def test_dispose_stops(self):
        o = rx_state(10)
        log = []
        handle = rx_watch(lambda: log.append(o.value))
        handle.dispose()
        handle.dispose()
        o.value = 20
        assert log == [10]

    def test_no_reads_fails(self):
        with pytest.raises(NoObservableReadError):
            rx_watch(lambda: None)

    def test_handle_exposes_merge(self):
        a, b = rx_state(1), rx_state(2)
        handle = rx_watch(lambda: (a.value, b.value))
        assert handle.rx.value == [a, b]

    def test_dispose_skips_disposed_first_child(self):
        a, b = rx_state(1), rx_state(1)
        log = []
        handle = rx_watch(lambda: log.append((a.value, b.value)))
        a.dispose()
        handle.dispose()
        b.value = 2
        assert log == [(1, 1)]
        assert not b.has_listeners

    def test_dispose_skips_disposed_later_child(self):
        a, b = rx_state(1), rx_state(1)
        log = []
        handle = rx_watch(lambda: log.append((a.value, b.value)))
        b.dispose()
        handle.dispose()
        assert handle.disposed
        a.value = 2
        assert log == [(1, 1)]
        assert not a.has_listeners

    def test_stop_when_with_disposed_child(self):
        a, b = rx_state(0), rx_state(0)
        log = []
        handle = rx_watch(lambda: log.append((b.value, a.value)), stop_when=lambda: a.value > 0)
        b.dispose()
        a.value = 1
        assert handle.disposed
        assert not a.has_listeners
        assert log == [(0, 0)]

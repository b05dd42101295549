"""Tests for Controller lifecycle."""

from rxsuper import Controller, Registry


class _FrameQueue:
    """Stand-in for a UI's next-frame scheduler."""

    def __init__(self):
        self.pending = []

    def __call__(self, fn):
        self.pending.append(fn)

    def flush(self):
        pending, self.pending = self.pending, []
        for fn in pending:
            fn()


class _Recording(Controller):
    def __init__(self):
        self.events = []

    def on_enable(self):
        self.events.append("enable")

    def on_alive(self):
        self.events.append("alive")

    def on_disable(self):
        self.events.append("disable")
        super().on_disable()


class TestLifecycle:
    def test_starts_disabled(self):
        assert not _Recording().alive

    def test_enable_twice_runs_hook_once(self):
        c = _Recording()
        c.enable()
        c.enable()
        assert c.alive
        assert c.events.count("enable") == 1

    def test_disable_twice_runs_hook_once(self):
        c = _Recording()
        c.enable()
        c.disable()
        c.disable()
        assert not c.alive
        assert c.events.count("disable") == 1

    def test_disable_before_enable_is_noop(self):
        c = _Recording()
        c.disable()
        assert c.events == []

    def test_on_alive_runs_immediately_without_scheduler(self):
        c = _Recording()
        c.enable()
        assert c.events == ["enable", "alive"]

    def test_alive_flag_set_after_on_enable(self):
        seen = []

        class _Probe(Controller):
            def on_enable(self):
                seen.append(self.alive)

        _Probe().enable()
        assert seen == [False]

    def test_alive_flag_cleared_before_on_disable(self):
        seen = []

        class _Probe(Controller):
            def on_disable(self):
                seen.append(self.alive)

        p = _Probe()
        p.enable()
        p.disable()
        assert seen == [False]

    def test_str_is_type_name(self):
        assert str(_Recording()) == "_Recording"


class TestNextFrame:
    def test_on_alive_deferred_to_next_frame(self, registry):
        frames = _FrameQueue()
        registry.scheduler = frames
        c = _Recording()
        c.enable()
        assert c.events == ["enable"]
        frames.flush()
        assert c.events == ["enable", "alive"]

    def test_disable_cancels_pending_on_alive(self, registry):
        # Redesigned: a fast enable/disable cycle no longer fires on_alive late.
        frames = _FrameQueue()
        registry.scheduler = frames
        c = _Recording()
        c.enable()
        c.disable()
        frames.flush()
        assert c.events == ["enable", "disable"]

    def test_reenable_schedules_fresh_on_alive(self, registry):
        frames = _FrameQueue()
        registry.scheduler = frames
        c = _Recording()
        c.enable()
        c.disable()
        c.enable()
        frames.flush()
        assert c.events == ["enable", "disable", "enable", "alive"]

    def test_uses_bound_registry_scheduler(self):
        frames = _FrameQueue()
        bound = Registry(scheduler=frames)
        bound.activate()
        c = bound.init(_Recording(), "_Recording")
        assert c.events == ["enable"]
        frames.flush()
        assert c.events == ["enable", "alive"]


class TestRegistryUnlink:
    def test_disable_unregisters_by_type_name(self, registry):
        registry.activate(auto_dispose=True)
        c = registry.init(_Recording(), "_Recording")
        c.disable()
        assert "_Recording" not in registry

    def test_disable_keeps_entry_when_auto_dispose_off(self, registry):
        registry.activate(auto_dispose=False)
        c = registry.init(_Recording(), "_Recording")
        c.disable()
        assert not c.alive
        assert registry.of("_Recording") is c
        assert c.alive  # fetched again -> re-enabled

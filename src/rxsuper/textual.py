"""Textual integration for rxsuper. Opt-in — requires textual.

Textual coupling is isolated in this module; the core stays UI-agnostic.
Guards (pause, not-running, NoMatches, cross-thread marshal) are enforced
here, not at callsites.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from rxsuper._tracking import tracking
from rxsuper.injection import current_registry
from rxsuper.watch import WatchHandle

logger = logging.getLogger("rxsuper.textual")

# Module-owned pause state, keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def activate(app, *, test_mode=False, auto_dispose=True, mocks=None, registry=None):
    """Activate a registry for the lifetime of ``app``.

    Controllers' ``on_alive`` hooks run after the next refresh of ``app``.
    The registry is deactivated (every entry torn down) on exit.

    Usage:
        class MyApp(App):
            def run_with_registry(self):
                with stx.activate(self):
                    self.run()
    """
    registry = registry if registry is not None else current_registry()
    previous = registry.scheduler
    registry.scheduler = app.call_after_refresh
    registry.activate(test_mode=test_mode, auto_dispose=auto_dispose, mocks=mocks)
    try:
        yield registry
    finally:
        registry.deactivate()
        registry.scheduler = previous


@contextmanager
def pause(app):
    """Suspend guarded callbacks during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def _guard(app, fn):
    _main = threading.get_ident()

    def _safe():
        try:
            fn()
        except NoMatches:
            logger.debug("Widget query failed during update; skipped", exc_info=True)

    def _guarded():
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe)
        else:
            _safe()

    return _guarded


def bind(app, rx, effect):
    """Call ``effect(rx.value)`` whenever ``rx`` changes. Returns a disposer."""
    listener = _guard(app, lambda: effect(rx.value))
    rx.add_listener(listener)

    def _dispose():
        if rx.alive:
            rx.remove_listener(listener)

    return _dispose


def super_x(app, fn) -> WatchHandle:
    """Run ``fn`` now, then again whenever an observable it read changes.

    The first run is unguarded: it must read observables to be tracked.
    """
    with tracking() as session:
        fn()
    listener = _guard(app, fn)
    session.rx.add_listener(listener)
    return WatchHandle(session.rx, listener)


def use_controller(controller, registry=None):
    """Get-or-create ``controller`` under its type name and enable it.

    Call ``.disable()`` on the returned controller when the widget unmounts.
    """
    registry = registry if registry is not None else current_registry()
    ctrl = registry.init(controller, type(controller).__name__)
    ctrl.enable()
    return ctrl

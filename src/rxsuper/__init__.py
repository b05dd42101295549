"""rxsuper: implicit-tracking reactive state and a lifecycle-aware singleton registry."""

from importlib.metadata import version as _version

__version__ = _version("rxsuper")

from rxsuper._tracking import (
    DependencyTracker,
    current_tracker,
    listen,
    listened_rx,
    tracking,
    use_tracker,
)
from rxsuper.errors import (
    RxSuperError,
    DisposedAccessError,
    NotActivatedError,
    NotFoundError,
    NoObservableReadError,
    UnsettableCompositeError,
)
from rxsuper.observable import Rx, RxT, RxNotifier, rx_state
from rxsuper.merged import RxMerge
from rxsuper.watch import rx_watch, WatchHandle
from rxsuper.controller import Controller
from rxsuper.injection import Registry, current_registry, use_registry
from rxsuper.interface import Super, SuperInterface
from rxsuper.model import SuperModel
# textual NOT auto-imported — opt-in only

__all__ = [
    "DependencyTracker",
    "current_tracker",
    "listen",
    "listened_rx",
    "tracking",
    "use_tracker",
    "RxSuperError",
    "DisposedAccessError",
    "NotActivatedError",
    "NotFoundError",
    "NoObservableReadError",
    "UnsettableCompositeError",
    "Rx",
    "RxT",
    "RxNotifier",
    "rx_state",
    "RxMerge",
    "rx_watch",
    "WatchHandle",
    "Controller",
    "Registry",
    "current_registry",
    "use_registry",
    "Super",
    "SuperInterface",
    "SuperModel",
]

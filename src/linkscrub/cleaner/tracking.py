"""Tracking parameter set and per-call removal policy.

The TrackingParameterSet is configuration owned by the caller: built once
from the built-in table, optionally extended (typically at startup), then
handed to every URLCleaner that should share it. Names can be added but
never removed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from linkscrub.cleaner.params import TRACKING_PARAMS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    names: tuple[str, ...]
    lookup: frozenset[str]

    @classmethod
    def of(cls, names: Iterable[str]) -> _Snapshot:
        ordered = tuple(dict.fromkeys(names))
        return cls(names=ordered, lookup=frozenset(ordered))


class TrackingParameterSet:
    """Ordered, grow-only set of tracking parameter names.

    Copy-on-write: extend() builds a fresh immutable snapshot under a lock
    and publishes it with a single reference assignment. Readers never
    lock and always see either the old or the new snapshot in full.
    """

    def __init__(self, names: Iterable[str] | None = None):
        """Initialize TrackingParameterSet.

        Args:
            names: Initial names (defaults to the built-in table)
        """
        self._lock = threading.Lock()
        self._snapshot = _Snapshot.of(TRACKING_PARAMS if names is None else names)

    @classmethod
    def empty(cls) -> TrackingParameterSet:
        return cls(names=())

    def extend(self, names: Iterable[str]) -> int:
        """Union new names into the set.

        Args:
            names: Parameter names to add; duplicates collapse

        Returns:
            Number of names that were actually new
        """
        incoming = [name for name in names if name]
        with self._lock:
            current = self._snapshot
            added = [name for name in dict.fromkeys(incoming) if name not in current.lookup]
            if added:
                self._snapshot = _Snapshot.of(current.names + tuple(added))

        if added:
            logger.debug(f"Added {len(added)} tracking parameters: {', '.join(added)}")
        return len(added)

    def names(self) -> list[str]:
        """Snapshot of all names in insertion order."""
        return list(self._snapshot.names)

    def lookup(self) -> frozenset[str]:
        """Immutable view for membership tests."""
        return self._snapshot.lookup

    def __contains__(self, name: object) -> bool:
        return name in self._snapshot.lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._snapshot.names)

    def __len__(self) -> int:
        return len(self._snapshot.names)

    def __repr__(self) -> str:
        return f"TrackingParameterSet({len(self)} names)"


@dataclass(frozen=True)
class RemovalPolicy:
    """Per-call adjustments to the tracking set.

    custom names are removed in addition to the tracking set; keep names
    are never removed, whatever else lists them.
    """
    custom: tuple[str, ...] = ()
    keep: tuple[str, ...] = ()

    @classmethod
    def of(cls, custom: Iterable[str] | None = None, keep: Iterable[str] | None = None) -> RemovalPolicy:
        return cls(custom=tuple(custom or ()), keep=tuple(keep or ()))

    def effective(self, params: TrackingParameterSet) -> frozenset[str]:
        """(tracking set | custom) - keep, computed fresh on every call."""
        removal = params.lookup()
        if self.custom:
            removal = removal | frozenset(self.custom)
        if self.keep:
            removal = removal - frozenset(self.keep)
        return removal

"""Filesystem adapters: directory scanner, state store and state lock."""

from .scanner import Scanner, build_snapshot
from .state_store import JsonSnapshotSerializer, PersistedRecord, SnapshotSerializer, StateStore
from .state_lock import StateLock

__all__ = [
    "Scanner",
    "build_snapshot",
    "JsonSnapshotSerializer",
    "PersistedRecord",
    "SnapshotSerializer",
    "StateStore",
    "StateLock",
]

"""Domain objects: file records, snapshots, change sets and the error taxonomy."""

from .status import ChangeKind
from .models import ChangeEntry, ChangeSet, DetectorConfig, FileRecord, Snapshot
from .errors import (
    DirectoryUnavailable,
    EntryMetadataFailure,
    FileDetectorError,
    ScanInProgress,
    StateLoadFailure,
    StateSaveFailure,
)
from .formatting import format_bytes, format_size_delta, format_timestamp

__all__ = [
    "ChangeKind",
    "ChangeEntry",
    "ChangeSet",
    "DetectorConfig",
    "FileRecord",
    "Snapshot",
    "FileDetectorError",
    "DirectoryUnavailable",
    "EntryMetadataFailure",
    "ScanInProgress",
    "StateLoadFailure",
    "StateSaveFailure",
    "format_bytes",
    "format_size_delta",
    "format_timestamp",
]

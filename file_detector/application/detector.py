from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Callable, Optional

from file_detector.domain import (
    ChangeEntry,
    ChangeKind,
    ChangeSet,
    DetectorConfig,
    Snapshot,
    StateSaveFailure,
)
from file_detector.infrastructure import StateLock, StateStore, build_snapshot
from file_detector.logging_config import get_logger

from .reporting import ChangeReporter, Reporter

logger = get_logger(__name__)

# SnapshotBuilder: (directory_path) -> snapshot
SnapshotBuilder = Callable[[str], Snapshot]


def diff_snapshots(previous: Snapshot, current: Snapshot) -> ChangeSet:
    """
    Трёхстороннее сравнение снимков по пути.

    Единственный признак изменения - modified_at: файл с тем же
    modified_at считается неизменным даже при другом размере.
    """
    changes = ChangeSet()

    for path, record in current.items():
        old = previous.get(path)
        if old is None:
            changes.created.append(ChangeEntry(ChangeKind.CREATED, path, current=record))
        elif old.modified_at != record.modified_at:
            changes.modified.append(ChangeEntry(ChangeKind.MODIFIED, path, current=record, previous=old))

    for path, old in previous.items():
        if path not in current:
            changes.deleted.append(ChangeEntry(ChangeKind.DELETED, path, previous=old))

    return changes


@dataclass
class ChangeDetector:
    """Load previous state, scan, diff, report and persist the fresh snapshot."""

    config: DetectorConfig
    store: Optional[StateStore] = None
    builder: SnapshotBuilder = build_snapshot
    reporter: Reporter = field(default_factory=ChangeReporter)

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = StateStore(self.config.state_file)

    def __call__(self) -> ChangeSet:
        """
        Один полный цикл детектирования.

        Raises:
            DirectoryUnavailable: папка недоступна, state-файл не трогаем
            ScanInProgress: state-файл заблокирован другим процессом
        """
        logger.info(f"🔍 Scanning for file changes in: {self.config.monitored_folder}")

        lock = StateLock(self.config.lock_file) if self.config.use_lock else nullcontext()
        with lock:
            previous = self.store.load()
            current = self.builder(self.config.monitored_folder)

            changes = diff_snapshots(previous, current)
            self.reporter(changes)

            try:
                self.store.save(current)
            except StateSaveFailure as e:
                # Результат текущего прогона остаётся верным, следующий увидит дрейф
                logger.error(f"❌ {e}")

        return changes


def detect_changes(directory_path: str, state_path: str, use_lock: bool = True) -> ChangeSet:
    """Сравнивает папку directory_path с состоянием из state_path и обновляет его."""
    config = DetectorConfig(monitored_folder=directory_path, state_file=state_path, use_lock=use_lock)
    return ChangeDetector(config)()

"""
File Detector - детектор изменений в отслеживаемой папке.

=== НАЗНАЧЕНИЕ ===
Разовый скан, который:
1. Загружает снимок папки с прошлого прогона (state-файл)
2. Снимает новый снимок (один уровень, только обычные файлы)
3. Находит созданные, изменённые и удалённые файлы
4. Пишет изменения в лог и атомарно сохраняет новый снимок

=== ПРИЗНАК ИЗМЕНЕНИЯ ===
Только время модификации (mtime). Содержимое не хэшируется:
перезапись с тем же mtime изменением не считается.

=== КОМПОНЕНТЫ ===
- Scanner / build_snapshot - снимок папки
- StateStore - чтение и запись state-файла
- StateLock - защита state-файла от параллельных сканов
- ChangeDetector / detect_changes - полный цикл детектирования
- ChangeReporter - вывод изменений в лог

=== ЗАПУСК ===
    file-detector --folder /app/monitored-folder --state-file /app/state/file-state.json
"""

from .domain import (
    ChangeEntry,
    ChangeKind,
    ChangeSet,
    DetectorConfig,
    DirectoryUnavailable,
    EntryMetadataFailure,
    FileDetectorError,
    FileRecord,
    ScanInProgress,
    Snapshot,
    StateLoadFailure,
    StateSaveFailure,
    format_bytes,
)
from .infrastructure import JsonSnapshotSerializer, Scanner, StateLock, StateStore, build_snapshot
from .application import ChangeDetector, ChangeReporter, detect_changes, diff_snapshots

__version__ = "1.0.0"

__all__ = [
    "ChangeEntry",
    "ChangeKind",
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
    "JsonSnapshotSerializer",
    "Scanner",
    "StateLock",
    "StateStore",
    "build_snapshot",
    "ChangeDetector",
    "ChangeReporter",
    "detect_changes",
    "diff_snapshots",
]

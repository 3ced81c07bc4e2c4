"""
Иерархия ошибок детектора изменений.

=== ПОЛИТИКА ===
- DirectoryUnavailable - пробрасывается вызывающему (скан невозможен)
- ScanInProgress - пробрасывается (state-файл занят другим процессом)
- StateLoadFailure - гасится в StateStore.load() → пустой снимок
- StateSaveFailure - гасится в ChangeDetector → ChangeSet всё равно возвращается
- EntryMetadataFailure - гасится в Scanner → файл пропускается
"""

from typing import Optional


class FileDetectorError(Exception):
    """Базовая ошибка детектора."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"{self.describe} {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    describe = "File detector error for"


class DirectoryUnavailable(FileDetectorError):
    """Отслеживаемая папка отсутствует или недоступна для чтения."""

    describe = "Monitored folder is unavailable:"


class StateLoadFailure(FileDetectorError):
    """State-файл отсутствует, не читается или повреждён."""

    describe = "Failed to load state from"


class StateSaveFailure(FileDetectorError):
    """Не удалось записать state-файл."""

    describe = "Failed to save state to"


class EntryMetadataFailure(FileDetectorError):
    """Не удалось получить метаданные отдельного файла."""

    describe = "Failed to get file info for"


class ScanInProgress(FileDetectorError):
    """State-файл заблокирован другим живым процессом."""

    describe = "Another scan holds the state lock:"

    def __init__(self, path: str, pid: Optional[int] = None):
        self.pid = pid
        super().__init__(path, f"PID {pid}" if pid is not None else None)

import os
import stat
from pathlib import Path
from typing import Optional

from file_detector.domain import (
    DirectoryUnavailable,
    EntryMetadataFailure,
    FileRecord,
    Snapshot,
    format_timestamp,
)

import logging
logger = logging.getLogger(__name__)


class Scanner:
    """Снимок одного уровня папки: только обычные файлы, без рекурсии."""

    def __init__(self, monitored_path: str):
        self.monitored_path = Path(os.path.abspath(monitored_path))

    def scan(self) -> Snapshot:
        """
        Сканирует папку и возвращает снимок {абсолютный путь: FileRecord}.

        Raises:
            DirectoryUnavailable: папки нет, это не папка или её нельзя прочитать
        """
        if not self.monitored_path.is_dir():
            raise DirectoryUnavailable(str(self.monitored_path), "not an existing directory")

        snapshot: Snapshot = {}

        try:
            # os.scandir отдаёт lstat-данные без лишнего обхода симлинков
            with os.scandir(self.monitored_path) as entries:
                for entry in entries:
                    try:
                        record = self._read_entry(entry)
                    except EntryMetadataFailure as e:
                        logger.warning(f"⚠️ {e}")
                        continue

                    if record is not None:
                        snapshot[record.path] = record
        except OSError as e:
            raise DirectoryUnavailable(str(self.monitored_path), e.strerror or str(e)) from e

        logger.debug(f"Scanned {self.monitored_path}: {len(snapshot)} files")
        return snapshot

    def _read_entry(self, entry: os.DirEntry) -> Optional[FileRecord]:
        """Возвращает FileRecord для обычного файла, None для всего остального."""
        path = os.path.join(str(self.monitored_path), entry.name)

        # Байты имени вне UTF-8 приходят суррогатами: в JSON-состояние такой путь не записать
        try:
            path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EntryMetadataFailure(
                path.encode("utf-8", "backslashreplace").decode("utf-8"),
                "file name is not valid UTF-8",
            ) from e

        try:
            stat_info = entry.stat(follow_symlinks=False)
        except OSError as e:
            # Файл удалён между listdir и stat, либо нет прав
            raise EntryMetadataFailure(path, e.strerror or str(e)) from e

        # Папки, симлинки, сокеты, FIFO и устройства пропускаем молча
        if not stat.S_ISREG(stat_info.st_mode):
            return None

        return FileRecord.from_path(
            path,
            size=stat_info.st_size,
            modified_at=format_timestamp(stat_info.st_mtime),
            created_at=format_timestamp(getattr(stat_info, "st_birthtime", None)),
        )


def build_snapshot(directory_path: str) -> Snapshot:
    """Снимок папки directory_path (см. Scanner.scan)."""
    return Scanner(directory_path).scan()

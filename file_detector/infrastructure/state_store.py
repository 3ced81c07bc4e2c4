"""
Хранилище состояния детектора.

=== ФОРМАТ ===
JSON-объект {абсолютный путь: запись}, запись совместима со state-файлами
исходного скрипта мониторинга:

    {
      "/app/monitored-folder/a.txt": {
        "name": "a.txt",
        "size": 10,
        "sizeFormatted": "10 Bytes",
        "modified": "2024-05-01T10:00:00.000Z",
        "created": "2024-05-01T09:59:58.120Z",
        "extension": ".txt"
      }
    }

=== ЗАПИСЬ ===
Снимок пишется во временный файл рядом с state-файлом и атомарно
подменяет его через os.replace(), поэтому после падения процесса
на диске остаётся либо старое, либо новое состояние целиком.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from file_detector.domain import (
    FileRecord,
    Snapshot,
    StateLoadFailure,
    StateSaveFailure,
    format_bytes,
)

import logging
logger = logging.getLogger(__name__)


@runtime_checkable
class SnapshotSerializer(Protocol):
    """Протокол сериализации снимка."""

    def dumps(self, snapshot: Snapshot) -> str:
        """Снимок → текст."""
        ...

    def loads(self, payload: str) -> Snapshot:
        """Текст → снимок. ValueError при битых данных."""
        ...


class PersistedRecord(BaseModel):
    """Запись в state-файле."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    size: int = Field(ge=0)
    size_formatted: Optional[str] = Field(default=None, alias="sizeFormatted")
    modified: str
    created: Optional[str] = None
    extension: str = ""

    @classmethod
    def from_record(cls, record: FileRecord) -> "PersistedRecord":
        return cls(
            name=record.name,
            size=record.size,
            size_formatted=format_bytes(record.size),
            modified=record.modified_at,
            created=record.created_at,
            extension=record.extension,
        )

    def to_record(self, path: str) -> FileRecord:
        return FileRecord(
            path=path,
            name=self.name,
            size=self.size,
            modified_at=self.modified,
            created_at=self.created,
            extension=self.extension,
        )


class JsonSnapshotSerializer:
    """JSON-сериализация через pydantic с отступом 2 пробела."""

    _adapter = TypeAdapter(Dict[str, PersistedRecord])

    def dumps(self, snapshot: Snapshot) -> str:
        records = {path: PersistedRecord.from_record(record) for path, record in snapshot.items()}
        return self._adapter.dump_json(records, indent=2, by_alias=True).decode("utf-8")

    def loads(self, payload: str) -> Snapshot:
        records = self._adapter.validate_json(payload)
        return {path: record.to_record(path) for path, record in records.items()}


class StateStore:
    """Чтение и запись последнего снимка папки."""

    def __init__(self, state_file: str, serializer: Optional[SnapshotSerializer] = None):
        """
        Args:
            state_file: Путь к state-файлу
            serializer: Сериализатор снимка (по умолчанию JSON)
        """
        self.state_file = Path(state_file)
        self.serializer = serializer or JsonSnapshotSerializer()

    def read(self) -> Snapshot:
        """
        Читает снимок из state-файла.

        Raises:
            StateLoadFailure: файла нет, он не читается или содержимое невалидно
        """
        try:
            payload = self.state_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise StateLoadFailure(str(self.state_file), "file does not exist") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StateLoadFailure(str(self.state_file), str(e)) from e

        try:
            return self.serializer.loads(payload)
        except (ValidationError, ValueError) as e:
            raise StateLoadFailure(str(self.state_file), f"malformed state: {e}") from e

    def load(self) -> Snapshot:
        """Читает снимок; при любой ошибке чтения возвращает пустой снимок."""
        try:
            snapshot = self.read()
        except StateLoadFailure as e:
            if isinstance(e.__cause__, FileNotFoundError):
                logger.info(f"📂 No previous state at {self.state_file}, starting fresh")
            else:
                logger.warning(f"⚠️ {e}. Starting fresh")
            return {}

        logger.debug(f"Loaded previous state: {len(snapshot)} files")
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """
        Полностью перезаписывает state-файл снимком.

        Raises:
            StateSaveFailure: не удалось сериализовать снимок, создать папку или записать файл
        """
        try:
            payload = self.serializer.dumps(snapshot)
            self.state_file.parent.mkdir(parents=True, exist_ok=True)

            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self.state_file.name}.", suffix=".tmp", dir=str(self.state_file.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(temp_name, self.state_file)
            finally:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
        except (OSError, ValueError) as e:
            # ValueError покрывает PydanticSerializationError и UnicodeEncodeError
            raise StateSaveFailure(str(self.state_file), str(e)) from e

        logger.debug(f"State saved to {self.state_file}")

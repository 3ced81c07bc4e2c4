from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .formatting import format_bytes
from .status import ChangeKind


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Метаданные одного обычного файла отслеживаемой папки."""

    path: str
    name: str
    size: int
    modified_at: str
    created_at: Optional[str] = None
    extension: str = ""

    @property
    def size_formatted(self) -> str:
        return format_bytes(self.size)

    @classmethod
    def from_path(
        cls,
        path: str,
        size: int,
        modified_at: str,
        created_at: Optional[str] = None,
    ) -> "FileRecord":
        """Собирает запись, выводя name и extension из пути."""
        return cls(
            path=path,
            name=os.path.basename(path),
            size=size,
            modified_at=modified_at,
            created_at=created_at,
            extension=os.path.splitext(path)[1],
        )


# Снимок папки: абсолютный путь → запись
Snapshot = Dict[str, FileRecord]


@dataclass(slots=True, frozen=True)
class ChangeEntry:
    """Одно изменение: current отсутствует у deleted, previous отсутствует у created."""

    kind: ChangeKind
    path: str
    current: Optional[FileRecord] = None
    previous: Optional[FileRecord] = None

    @property
    def record(self) -> FileRecord:
        """Актуальная запись, для удалённых файлов - последняя известная."""
        return self.current if self.current is not None else self.previous

    @property
    def size_delta(self) -> int:
        if self.current is None or self.previous is None:
            return 0
        return self.current.size - self.previous.size


@dataclass
class ChangeSet:
    """Результат одного цикла детектирования."""

    created: List[ChangeEntry] = field(default_factory=list)
    modified: List[ChangeEntry] = field(default_factory=list)
    deleted: List[ChangeEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created) + len(self.modified) + len(self.deleted)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def by_kind(self, kind: ChangeKind) -> List[ChangeEntry]:
        return {
            ChangeKind.CREATED: self.created,
            ChangeKind.MODIFIED: self.modified,
            ChangeKind.DELETED: self.deleted,
        }[kind]

    def paths(self, kind: ChangeKind) -> List[str]:
        return [entry.path for entry in self.by_kind(kind)]

    def as_dict(self) -> dict:
        return {
            "created": self.paths(ChangeKind.CREATED),
            "modified": self.paths(ChangeKind.MODIFIED),
            "deleted": self.paths(ChangeKind.DELETED),
        }


@dataclass(slots=True, frozen=True)
class DetectorConfig:
    """Явная конфигурация детектора: какую папку сканировать и где хранить состояние."""

    monitored_folder: str
    state_file: str
    use_lock: bool = True

    @property
    def lock_file(self) -> str:
        return f"{self.state_file}.lock"

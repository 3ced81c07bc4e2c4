"""
Структурированные записи об изменениях и их вывод в лог.

Записи - обычные dict'ы, пригодные для JSON: их получает логгер
(через extra={"change": ...}) и CLI в режиме --json.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from file_detector.domain import ChangeEntry, ChangeKind, ChangeSet, format_size_delta
from file_detector.logging_config import get_logger

logger = get_logger(__name__)

NO_EXTENSION = "no extension"

# Reporter: (change_set) -> None
Reporter = Callable[[ChangeSet], None]


def build_change_record(entry: ChangeEntry) -> Dict[str, Any]:
    """Структурированная запись об одном изменении."""
    record = entry.record
    extension = record.extension or NO_EXTENSION

    if entry.kind is ChangeKind.CREATED:
        return {
            "event": entry.kind.value,
            "path": entry.path,
            "name": record.name,
            "size": record.size_formatted,
            "size_bytes": record.size,
            "extension": extension,
            "created": record.created_at,
            "modified": record.modified_at,
        }

    if entry.kind is ChangeKind.MODIFIED:
        return {
            "event": entry.kind.value,
            "path": entry.path,
            "name": record.name,
            "size": entry.current.size_formatted,
            "size_bytes": entry.current.size,
            "previous_size": entry.previous.size_formatted,
            "previous_size_bytes": entry.previous.size,
            "size_delta": format_size_delta(entry.size_delta),
            "size_delta_bytes": entry.size_delta,
            "previous_modified": entry.previous.modified_at,
            "current_modified": entry.current.modified_at,
            "extension": extension,
        }

    return {
        "event": entry.kind.value,
        "path": entry.path,
        "name": record.name,
        "last_size": record.size_formatted,
        "last_size_bytes": record.size,
        "last_modified": record.modified_at,
        "extension": extension,
    }


def change_set_to_records(change_set: ChangeSet) -> Dict[str, List[Dict[str, Any]]]:
    """Все записи, сгруппированные по типу изменения."""
    return {
        kind.value: [build_change_record(entry) for entry in change_set.by_kind(kind)]
        for kind in ChangeKind.report_order()
    }


class ChangeReporter:
    """Пишет найденные изменения в лог: заголовок, по строке на файл, итог."""

    TITLES = {
        ChangeKind.CREATED: "📄 NEW FILE CREATED",
        ChangeKind.MODIFIED: "✏️ FILE EDITED",
        ChangeKind.DELETED: "🗑️ FILE DELETED",
    }

    def __call__(self, change_set: ChangeSet) -> None:
        if change_set.is_empty:
            logger.info("📭 No file changes detected")
            return

        logger.info(f"📊 Found {change_set.total} file changes:")

        for kind in ChangeKind.report_order():
            for entry in change_set.by_kind(kind):
                record = build_change_record(entry)
                logger.info(
                    f"{self.TITLES[kind]}: {record['name']} | {self._details(record)}",
                    extra={"change": record},
                )

        logger.info(
            f"✅ Change detection complete. "
            f"Created: {len(change_set.created)}, "
            f"Modified: {len(change_set.modified)}, "
            f"Deleted: {len(change_set.deleted)}"
        )

    @staticmethod
    def _details(record: Dict[str, Any]) -> str:
        if record["event"] == ChangeKind.MODIFIED.value:
            return (
                f"path={record['path']} size={record['previous_size']} -> {record['size']} "
                f"({record['size_delta']}) modified={record['previous_modified']} -> "
                f"{record['current_modified']}"
            )
        if record["event"] == ChangeKind.DELETED.value:
            return f"path={record['path']} last_size={record['last_size']} last_modified={record['last_modified']}"
        return f"path={record['path']} size={record['size']} modified={record['modified']}"

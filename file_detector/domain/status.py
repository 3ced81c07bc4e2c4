from enum import Enum


class ChangeKind(str, Enum):
    """Kinds of changes detected between two snapshots."""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"

    @classmethod
    def report_order(cls) -> tuple["ChangeKind", ...]:
        return (cls.CREATED, cls.MODIFIED, cls.DELETED)

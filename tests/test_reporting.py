"""Тесты записей об изменениях и ChangeReporter."""
import pytest

from file_detector.application import ChangeReporter, build_change_record, change_set_to_records
from file_detector.domain import ChangeEntry, ChangeKind, ChangeSet, FileRecord


@pytest.fixture
def previous():
    return FileRecord.from_path(
        "/data/a.txt", size=10, modified_at="2024-05-01T10:00:00.000Z", created_at="2024-05-01T09:00:00.000Z"
    )


@pytest.fixture
def current():
    return FileRecord.from_path(
        "/data/a.txt", size=20, modified_at="2024-05-01T10:05:00.000Z", created_at="2024-05-01T09:00:00.000Z"
    )


class TestBuildChangeRecord:

    def test_created(self, current):
        entry = ChangeEntry(ChangeKind.CREATED, current.path, current=current)

        assert build_change_record(entry) == {
            "event": "created",
            "path": "/data/a.txt",
            "name": "a.txt",
            "size": "20 Bytes",
            "size_bytes": 20,
            "extension": ".txt",
            "created": "2024-05-01T09:00:00.000Z",
            "modified": "2024-05-01T10:05:00.000Z",
        }

    def test_modified(self, previous, current):
        entry = ChangeEntry(ChangeKind.MODIFIED, current.path, current=current, previous=previous)

        record = build_change_record(entry)

        assert record["event"] == "modified"
        assert record["size"] == "20 Bytes"
        assert record["previous_size"] == "10 Bytes"
        assert record["size_delta"] == "+10 Bytes"
        assert record["size_delta_bytes"] == 10
        assert record["previous_modified"] == "2024-05-01T10:00:00.000Z"
        assert record["current_modified"] == "2024-05-01T10:05:00.000Z"

    def test_deleted(self, previous):
        entry = ChangeEntry(ChangeKind.DELETED, previous.path, previous=previous)

        assert build_change_record(entry) == {
            "event": "deleted",
            "path": "/data/a.txt",
            "name": "a.txt",
            "last_size": "10 Bytes",
            "last_size_bytes": 10,
            "last_modified": "2024-05-01T10:00:00.000Z",
            "extension": ".txt",
        }

    def test_missing_extension_is_labelled(self):
        rec = FileRecord.from_path("/data/Makefile", size=1, modified_at="2024-05-01T10:00:00.000Z")
        entry = ChangeEntry(ChangeKind.CREATED, rec.path, current=rec)

        assert build_change_record(entry)["extension"] == "no extension"


def test_change_set_to_records_groups_by_kind(previous, current):
    changes = ChangeSet(
        modified=[ChangeEntry(ChangeKind.MODIFIED, current.path, current=current, previous=previous)]
    )

    records = change_set_to_records(changes)

    assert list(records) == ["created", "modified", "deleted"]
    assert records["created"] == [] and records["deleted"] == []
    assert records["modified"][0]["size_delta"] == "+10 Bytes"


class TestChangeReporter:

    def test_no_changes(self, caplog):
        with caplog.at_level("INFO", logger="file_detector"):
            ChangeReporter()(ChangeSet())

        assert caplog.messages == ["📭 No file changes detected"]

    def test_logs_each_change_and_summary(self, caplog, previous, current):
        other = FileRecord.from_path("/data/b.bin", size=5, modified_at="2024-05-01T10:00:00.000Z")
        changes = ChangeSet(
            created=[ChangeEntry(ChangeKind.CREATED, other.path, current=other)],
            modified=[ChangeEntry(ChangeKind.MODIFIED, current.path, current=current, previous=previous)],
        )

        with caplog.at_level("INFO", logger="file_detector"):
            ChangeReporter()(changes)

        messages = caplog.messages
        assert messages[0] == "📊 Found 2 file changes:"
        assert messages[1].startswith("📄 NEW FILE CREATED: b.bin")
        assert messages[2].startswith("✏️ FILE EDITED: a.txt")
        assert "(+10 Bytes)" in messages[2]
        assert messages[-1] == "✅ Change detection complete. Created: 1, Modified: 1, Deleted: 0"

    def test_records_attached_to_log_records(self, caplog, previous):
        changes = ChangeSet(deleted=[ChangeEntry(ChangeKind.DELETED, previous.path, previous=previous)])

        with caplog.at_level("INFO", logger="file_detector"):
            ChangeReporter()(changes)

        attached = [r.change for r in caplog.records if hasattr(r, "change")]
        assert attached == [build_change_record(changes.deleted[0])]

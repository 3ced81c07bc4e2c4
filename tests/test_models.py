"""Тесты доменных моделей."""
import pytest

from file_detector.domain import ChangeEntry, ChangeKind, ChangeSet, DetectorConfig, FileRecord


@pytest.fixture
def record():
    """Фикстура FileRecord."""
    return FileRecord.from_path(
        "/data/report.final.pdf",
        size=2048,
        modified_at="2024-05-01T10:00:00.000Z",
        created_at="2024-05-01T09:00:00.000Z",
    )


class TestFileRecord:

    def test_from_path_derives_name_and_extension(self, record):
        assert record.name == "report.final.pdf"
        assert record.extension == ".pdf"

    def test_no_extension(self):
        rec = FileRecord.from_path("/data/Makefile", size=1, modified_at="2024-05-01T10:00:00.000Z")
        assert rec.extension == ""
        assert rec.created_at is None

    def test_dotfile_has_no_extension(self):
        rec = FileRecord.from_path("/data/.env", size=1, modified_at="2024-05-01T10:00:00.000Z")
        assert rec.extension == ""

    def test_size_formatted(self, record):
        assert record.size_formatted == "2 KB"


class TestChangeEntry:

    def test_size_delta_for_modified(self, record):
        newer = FileRecord.from_path(record.path, size=1024, modified_at="2024-05-02T10:00:00.000Z")
        entry = ChangeEntry(ChangeKind.MODIFIED, record.path, current=newer, previous=record)

        assert entry.size_delta == -1024
        assert entry.record is newer

    def test_deleted_uses_last_known_record(self, record):
        entry = ChangeEntry(ChangeKind.DELETED, record.path, previous=record)

        assert entry.record is record
        assert entry.size_delta == 0


class TestChangeSet:

    def test_empty(self):
        changes = ChangeSet()
        assert changes.is_empty
        assert changes.total == 0
        assert changes.as_dict() == {"created": [], "modified": [], "deleted": []}

    def test_by_kind_and_paths(self, record):
        changes = ChangeSet(created=[ChangeEntry(ChangeKind.CREATED, record.path, current=record)])

        assert changes.total == 1
        assert not changes.is_empty
        assert changes.paths(ChangeKind.CREATED) == [record.path]
        assert changes.by_kind(ChangeKind.DELETED) == []


def test_detector_config_lock_file():
    config = DetectorConfig(monitored_folder="/data", state_file="/state/file-state.json")
    assert config.use_lock is True
    assert config.lock_file == "/state/file-state.json.lock"

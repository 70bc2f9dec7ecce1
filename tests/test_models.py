"""Tests for projectlist.lib.models module."""

from projectlist.lib.models import (
    LIFECYCLE_STAGES,
    TERMINAL_STATUSES,
    VALID_STATUSES,
    Project,
    ProjectStatus,
    parse_status,
)


class TestStatusConstants:
    """Test status constants."""

    def test_nine_statuses(self):
        assert len(VALID_STATUSES) == 9
        assert set(LIFECYCLE_STAGES) | set(TERMINAL_STATUSES) == set(VALID_STATUSES)
        assert set(LIFECYCLE_STAGES).isdisjoint(TERMINAL_STATUSES)

    def test_lifecycle_order(self):
        assert LIFECYCLE_STAGES == (
            "conceived", "specified", "planned", "implementing",
            "implemented", "committed", "integrated",
        )

    def test_parse_status(self):
        assert parse_status("on-hold") is ProjectStatus.ON_HOLD
        assert parse_status("bogus") is None
        assert parse_status(None) is None


class TestProject:
    """Test Project dataclass."""

    def test_from_entry_copies_fields(self):
        entry = {
            "id": "0001",
            "title": "Test",
            "status": "specified",
            "files": {"spec": "a.md", "review": None},
            "tags": ["ui"],
            "owner": "alice",
        }
        project = Project.from_entry(entry)
        assert project.files == {"spec": "a.md", "review": None}
        assert project.tags == ["ui"]
        assert project.dependencies is None
        assert project.extra == {"owner": "alice"}
        assert project.files is not entry["files"]

    def test_to_dict_omits_absent_fields(self):
        project = Project(id="0001", title="Test", status="implementing", priority="high")
        assert project.to_dict() == {
            "id": "0001",
            "title": "Test",
            "status": "implementing",
            "priority": "high",
        }

    def test_to_dict_keeps_explicit_nulls_in_files(self):
        project = Project(id="0001", title="T", status="planned", files={"spec": "s.md", "review": None})
        data = project.to_dict()
        assert data["files"] == {"spec": "s.md", "review": None}
        assert "plan" not in data["files"]

    def test_to_dict_keeps_empty_lists(self):
        project = Project(id="0001", title="T", status="planned", dependencies=[])
        assert project.to_dict()["dependencies"] == []


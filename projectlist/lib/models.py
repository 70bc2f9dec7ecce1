"""
Data models for project list entries.

A project list is a markdown document whose ```yaml blocks hold one entry
per project. Entries are parsed into Project records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProjectStatus(Enum):
    """All valid project statuses.

    The first seven are the ordered lifecycle stages; the last two are
    terminal and sit outside the progression.
    """

    # Lifecycle stages
    CONCEIVED = "conceived"
    SPECIFIED = "specified"
    PLANNED = "planned"
    IMPLEMENTING = "implementing"
    IMPLEMENTED = "implemented"
    COMMITTED = "committed"
    INTEGRATED = "integrated"

    # Terminal states
    ABANDONED = "abandoned"
    ON_HOLD = "on-hold"


VALID_STATUSES = tuple(s.value for s in ProjectStatus)

LIFECYCLE_STAGES = (
    ProjectStatus.CONCEIVED.value,
    ProjectStatus.SPECIFIED.value,
    ProjectStatus.PLANNED.value,
    ProjectStatus.IMPLEMENTING.value,
    ProjectStatus.IMPLEMENTED.value,
    ProjectStatus.COMMITTED.value,
    ProjectStatus.INTEGRATED.value,
)

TERMINAL_STATUSES = (
    ProjectStatus.ABANDONED.value,
    ProjectStatus.ON_HOLD.value,
)

# Placeholder id used by the template entry at the top of projectlist.md
TEMPLATE_ID = "NNNN"
EXAMPLE_TAG = "example"

FILE_KEYS = ("spec", "plan", "review")
LIST_KEYS = ("dependencies", "tags", "ticks")


class ProjectNotFound(LookupError):
    """Raised when no project has the requested id."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


def parse_status(status_str: str | None) -> ProjectStatus | None:
    """Parse a status string into ProjectStatus.

    Returns None if status is unknown.
    """
    if status_str is None:
        return None
    for status in ProjectStatus:
        if status.value == status_str:
            return status
    return None


@dataclass
class Project:
    """A validated project entry from projectlist.md.

    Optional fields left as None were absent in the source. Inside
    `files`, a key mapped to None was written as `null` (not yet
    available), while a missing key was never written at all.
    """
    id: str                                    # 0042
    title: str
    status: str                                # one of VALID_STATUSES
    summary: Optional[str] = None
    priority: Optional[str] = None
    release: Optional[str] = None
    notes: Optional[str] = None
    files: Optional[dict[str, Optional[str]]] = None
    dependencies: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    ticks: Optional[list[str]] = None
    extra: dict[str, str] = field(default_factory=dict)  # Unrecognised scalar keys

    @classmethod
    def from_entry(cls, entry: dict) -> "Project":
        """Build a Project from a parsed entry that passed is_valid_project."""
        known = {
            "id", "title", "status", "summary", "priority", "release",
            "notes", "files", "dependencies", "tags", "ticks",
        }
        files = entry.get("files")
        return cls(
            id=entry["id"],
            title=entry["title"],
            status=entry["status"],
            summary=entry.get("summary"),
            priority=entry.get("priority"),
            release=entry.get("release"),
            notes=entry.get("notes"),
            files=dict(files) if files is not None else None,
            dependencies=_copy_list(entry.get("dependencies")),
            tags=_copy_list(entry.get("tags")),
            ticks=_copy_list(entry.get("ticks")),
            extra={k: v for k, v in entry.items() if k not in known},
        )

    def to_dict(self) -> dict:
        """Return the record as a plain dict, omitting absent fields.

        Explicit nulls inside `files` are kept. Extra keys are flattened
        into the top level after the known fields.
        """
        data = {"id": self.id, "title": self.title, "status": self.status}
        for key in ("summary", "priority", "release", "notes"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.files is not None:
            data["files"] = dict(self.files)
        for key in LIST_KEYS:
            value = getattr(self, key)
            if value is not None:
                data[key] = list(value)
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data


def _copy_list(value: list[str] | None) -> list[str] | None:
    return list(value) if value is not None else None

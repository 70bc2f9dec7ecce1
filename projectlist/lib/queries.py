"""Status queries over parsed project lists."""

from projectlist.lib.models import (
    LIFECYCLE_STAGES,
    TERMINAL_STATUSES,
    VALID_STATUSES,
    Project,
    ProjectNotFound,
)

__all__ = [
    "get_stage_index",
    "get_active_projects",
    "get_terminal_projects",
    "group_by_status",
    "count_by_status",
    "find_project",
]


def get_stage_index(status: str) -> int:
    """Return the lifecycle position of status, or -1 if it has none.

    Terminal statuses and unknown strings both give -1.
    """
    if status in LIFECYCLE_STAGES:
        return LIFECYCLE_STAGES.index(status)
    return -1


def get_active_projects(projects: list[Project]) -> list[Project]:
    """Filter to projects that are not abandoned or on hold."""
    return [p for p in projects if p.status not in TERMINAL_STATUSES]


def get_terminal_projects(projects: list[Project]) -> list[Project]:
    """Filter to abandoned and on-hold projects."""
    return [p for p in projects if p.status in TERMINAL_STATUSES]


def group_by_status(projects: list[Project], statuses: list[str]) -> dict[str, list[Project]]:
    """Group projects under each requested status, in the order given.

    Every requested status gets a key, even with no projects. Projects whose
    status was not requested appear in no group.
    """
    return {status: [p for p in projects if p.status == status] for status in statuses}


def count_by_status(projects: list[Project]) -> dict[str, int]:
    """Count projects for each of the nine statuses, zeros included."""
    counts = {status: 0 for status in VALID_STATUSES}
    for p in projects:
        if p.status in counts:
            counts[p.status] += 1
    return counts


def find_project(projects: list[Project], project_id: str) -> Project:
    """Return the first project with the given id.

    Raises:
        ProjectNotFound: if no project matches
    """
    for p in projects:
        if p.id == project_id:
            return p
    raise ProjectNotFound(project_id)

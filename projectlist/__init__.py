"""
projectlist - parse and query codev/projectlist.md.

Extracts project entries from the ```yaml blocks of a project list,
validates them, and offers status queries for dashboards.
"""

from projectlist.lib.models import (
    Project,
    ProjectStatus,
    ProjectNotFound,
    VALID_STATUSES,
    LIFECYCLE_STAGES,
    TERMINAL_STATUSES,
    parse_status,
)
from projectlist.lib.parser import (
    extract_yaml_blocks,
    split_entries,
    parse_project_entry,
    is_valid_project,
    parse_projectlist,
)
from projectlist.lib.html import escape_html
from projectlist.lib.queries import (
    get_stage_index,
    get_active_projects,
    get_terminal_projects,
    group_by_status,
    count_by_status,
    find_project,
)

__all__ = [
    "Project",
    "ProjectStatus",
    "ProjectNotFound",
    "VALID_STATUSES",
    "LIFECYCLE_STAGES",
    "TERMINAL_STATUSES",
    "parse_status",
    "extract_yaml_blocks",
    "split_entries",
    "parse_project_entry",
    "is_valid_project",
    "parse_projectlist",
    "escape_html",
    "get_stage_index",
    "get_active_projects",
    "get_terminal_projects",
    "group_by_status",
    "count_by_status",
    "find_project",
]

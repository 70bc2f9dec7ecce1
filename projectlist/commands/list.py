"""
pl list - List projects grouped by lifecycle stage.
"""

from projectlist.lib.config import DashboardConfig
from projectlist.lib.models import LIFECYCLE_STAGES, TERMINAL_STATUSES, Project
from projectlist.lib.queries import (
    count_by_status,
    get_active_projects,
    get_terminal_projects,
    group_by_status,
)


def _print_group(label: str, projects: list[Project]) -> None:
    print(f"{label} ({len(projects)})")
    print("-" * 60)
    for p in projects:
        title = p.title[:40] + "..." if len(p.title) > 40 else p.title
        priority = f" [{p.priority}]" if p.priority else ""
        print(f"  {p.id}  {title}{priority}")
    print()


def cmd_list(args, config: DashboardConfig, projects: list[Project]) -> int:
    """List active projects by stage, and terminal ones when asked."""
    show_terminal = args.all or config.show_terminal

    active = get_active_projects(projects)
    groups = group_by_status(active, list(LIFECYCLE_STAGES))

    for stage, members in groups.items():
        if members:
            _print_group(stage, members)

    if show_terminal:
        terminal_groups = group_by_status(get_terminal_projects(projects), list(TERMINAL_STATUSES))
        for status, members in terminal_groups.items():
            if members:
                _print_group(status, members)

    if not projects:
        print("Projects: none")
        print()
        print(f"Add entries to the ```yaml blocks in {config.projectlist_path}")
        return 0

    counts = count_by_status(projects)
    terminal_count = sum(counts[s] for s in TERMINAL_STATUSES)
    print(f"{len(active)} active project(s), {terminal_count} abandoned/on-hold")
    return 0

"""
pl show - Show project details.
"""

from projectlist.lib.config import DashboardConfig
from projectlist.lib.models import FILE_KEYS, LIFECYCLE_STAGES, Project, ProjectNotFound
from projectlist.lib.queries import find_project, get_stage_index


def format_stage_progress(project: Project) -> str:
    """Render lifecycle progress, e.g. `[###----] 3/7 planned`."""
    index = get_stage_index(project.status)
    if index < 0:
        return f"[-------] {project.status}"
    done = index + 1
    total = len(LIFECYCLE_STAGES)
    return f"[{'#' * done}{'-' * (total - done)}] {done}/{total} {project.status}"


def cmd_show(args, config: DashboardConfig, projects: list[Project]) -> int:
    """Show all fields of one project."""
    try:
        project = find_project(projects, args.id)
    except ProjectNotFound as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Project: {project.id}")
    print("=" * 60)
    print(f"Title:      {project.title}")
    print(f"Status:     {format_stage_progress(project)}")
    if project.priority:
        print(f"Priority:   {project.priority}")
    if project.release:
        print(f"Release:    {project.release}")
    if project.summary:
        print(f"Summary:    {project.summary}")
    print()

    if project.files is not None:
        print("Files")
        print("-" * 40)
        for key in FILE_KEYS:
            if key not in project.files:
                continue
            path = project.files[key]
            print(f"  {key + ':':<8} {path if path is not None else '(not yet available)'}")
        print()

    for label, values in (
        ("Dependencies", project.dependencies),
        ("Tags", project.tags),
        ("Ticks", project.ticks),
    ):
        if values is not None:
            print(f"{label + ':':<12} {', '.join(values) if values else '(none)'}")

    for key, value in project.extra.items():
        print(f"{key + ':':<12} {value}")

    if project.notes:
        print()
        print("Notes")
        print("-" * 40)
        print(f"  {project.notes}")

    return 0

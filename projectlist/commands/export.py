"""
pl export - Dump validated projects as JSON or YAML.
"""

import json
from pathlib import Path

import yaml

from projectlist.lib.config import DashboardConfig
from projectlist.lib.models import Project
from projectlist.lib.validate import ValidationError, validate_export


def render_projects(projects: list[Project], fmt: str) -> str:
    """Serialize projects in the requested format ("json" or "yaml")."""
    records = [p.to_dict() for p in projects]
    if fmt == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def cmd_export(args, config: DashboardConfig, projects: list[Project]) -> int:
    """Export projects to stdout or --output."""
    fmt = args.format or config.export_format
    target = args.output or "stdout"

    try:
        validate_export([p.to_dict() for p in projects], target)
    except ValidationError as e:
        print(f"ERROR: {e}")
        return 2

    text = render_projects(projects, fmt)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Exported {len(projects)} project(s) to {args.output}")
    else:
        print(text, end="")

    return 0

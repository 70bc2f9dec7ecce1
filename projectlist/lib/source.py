"""Loading project lists from disk for CLI commands."""

import logging
from pathlib import Path

from projectlist.lib.models import Project
from projectlist.lib.parser import parse_projectlist

logger = logging.getLogger(__name__)


def load_projects(path: Path) -> list[Project]:
    """Read a projectlist.md file and parse it.

    Raises:
        FileNotFoundError: if the file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Project list not found: {path}")

    projects = parse_projectlist(path.read_text(encoding="utf-8"))
    logger.debug(f"Loaded {len(projects)} project(s) from {path}")
    return projects

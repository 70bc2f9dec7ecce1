"""
Configuration loader for the pl CLI.

Reads optional settings from projectlist.env in the repository root.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from . import envparse

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "projectlist.env"
DEFAULT_PROJECTLIST_PATH = "codev/projectlist.md"
VALID_EXPORT_FORMATS = ("json", "yaml")
CONFIG_KEYS = ("PROJECTLIST_PATH", "SHOW_TERMINAL", "EXPORT_FORMAT")


@dataclass
class DashboardConfig:
    """Settings from projectlist.env"""
    root: Path
    projectlist_path: Path  # Absolute, resolved against root
    show_terminal: bool  # Include abandoned/on-hold projects in listings
    export_format: str  # "json" or "yaml"


def load_config(root: Path) -> DashboardConfig:
    """Load projectlist.env from root, falling back to defaults.

    A missing file is not an error. A malformed one is.

    Raises:
        ValueError: if projectlist.env exists but cannot be parsed
    """
    config_path = root / CONFIG_FILENAME
    env = envparse.load_env(str(config_path), CONFIG_KEYS) if config_path.exists() else {}

    export_format = env.get("EXPORT_FORMAT", "json").lower()
    if export_format not in VALID_EXPORT_FORMATS:
        logger.warning(
            f"Unknown EXPORT_FORMAT '{export_format}', using 'json'. "
            f"Valid formats: {', '.join(VALID_EXPORT_FORMATS)}"
        )
        export_format = "json"

    return DashboardConfig(
        root=root,
        projectlist_path=root / env.get("PROJECTLIST_PATH", DEFAULT_PROJECTLIST_PATH),
        show_terminal=env.get("SHOW_TERMINAL", "false").lower() == "true",
        export_format=export_format,
    )

"""
Reader for projectlist.env.

The file holds a handful of KEY=value settings for the pl CLI. It is only
ever read by this package, never sourced by a shell, so values are taken
literally: `;`, `|` and `$` are ordinary characters in a path.
"""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_env(text: str, known_keys: tuple[str, ...] | None = None) -> dict[str, str]:
    """
    Parse KEY=value settings text into a dict.

    Blank lines and `#` comments are skipped, as is a leading `export `.
    Values may be wrapped in one pair of matching quotes. When known_keys is
    given, other keys are logged and ignored. A repeated key keeps its last
    value.

    Raises:
        ValueError: if a line has no '=' or the key is not UPPER_SNAKE
    """
    result = {}

    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export '):].lstrip()

        if '=' not in line:
            raise ValueError(f"Line {lineno}: Invalid syntax (no '=')")

        key, _, value = line.partition('=')
        key = key.strip()
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: Invalid key '{key}'")

        if known_keys is not None and key not in known_keys:
            logger.warning(f"Line {lineno}: Ignoring unknown setting {key}")
            continue
        if key in result:
            logger.warning(f"Line {lineno}: {key} set more than once, using the last value")

        result[key] = _strip_quotes(value.strip())

    return result


def load_env(filepath: str, known_keys: tuple[str, ...] | None = None) -> dict[str, str]:
    """
    Read and parse a settings file.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: if a line cannot be parsed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {filepath}")
    return parse_env(path.read_text(encoding="utf-8"), known_keys)

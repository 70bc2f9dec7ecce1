"""
projectlist.md parser.

Extracts project entries from the ```yaml blocks of a project list
document. The blocks use a small YAML-like dialect (flat keys, one nested
`files` object, inline arrays) read line by line without a YAML grammar,
so comments and format drift never break parsing.
"""

import logging
import re
from typing import Iterator

from projectlist.lib.models import (
    EXAMPLE_TAG,
    FILE_KEYS,
    LIST_KEYS,
    TEMPLATE_ID,
    VALID_STATUSES,
    Project,
)

logger = logging.getLogger(__name__)

YAML_BLOCK_RE = re.compile(r'```yaml\n(.*?)```', re.DOTALL)
ENTRY_SPLIT_RE = re.compile(r'\n(?=\s*-\s*id:)')
ENTRY_START_RE = re.compile(r'^\s*-\s*id:')
LINE_RE = re.compile(r'^\s*-?\s*([A-Za-z0-9_]+):\s*(.*)$')
ID_RE = re.compile(r'[0-9]{4}')
ITEM_QUOTE_RE = re.compile(r'^["\']|["\']$')


def extract_yaml_blocks(content: str) -> Iterator[str]:
    """Yield the inner text of every ```yaml fenced block, in order."""
    for match in YAML_BLOCK_RE.finditer(content):
        yield match.group(1)


def split_entries(block: str) -> list[str]:
    """Split a yaml block into one chunk per `- id:` entry.

    Text ahead of the first entry (section comments) is dropped, as is any
    chunk that never mentions `id:`.
    """
    entries = []
    for i, chunk in enumerate(ENTRY_SPLIT_RE.split(block)):
        if not chunk.strip():
            continue
        if 'id:' not in chunk or (i == 0 and not ENTRY_START_RE.match(chunk)):
            logger.debug(f"Dropping non-entry text: {chunk.strip()[:40]!r}")
            continue
        entries.append(chunk)
    return entries


def _unquote(value: str) -> str:
    # A lone quote counts as both ends and unquotes to ''
    if (value.startswith('"') and value.endswith('"')) or \
       (value.startswith("'") and value.endswith("'")):
        return value[1:-1]
    return value


def _parse_inline_list(value: str) -> list[str]:
    """Parse `[a, "b", 'c']`. Anything not bracketed is an empty list."""
    if not (value.startswith('[') and value.endswith(']')):
        return []
    inner = value[1:-1]
    if not inner.strip():
        return []
    return [ITEM_QUOTE_RE.sub('', item.strip()) for item in inner.split(',')]


def parse_project_entry(text: str) -> dict:
    """Parse one entry chunk into a partial project dict.

    Lines that are not `key: value` are skipped. A `null` top-level value
    leaves the key out entirely, but `null` under `files` is kept as None
    so callers can tell "not yet available" from "not listed".
    """
    project: dict = {}

    for line in text.split('\n'):
        match = LINE_RE.match(line)
        if not match:
            continue

        key, raw_value = match.group(1), match.group(2)
        value = _unquote(raw_value.strip())

        if key == 'files':
            project['files'] = {}
            continue

        if key in FILE_KEYS:
            files = project.setdefault('files', {})
            files[key] = None if value == 'null' else value
            continue

        if key in LIST_KEYS:
            project[key] = _parse_inline_list(value)
            continue

        if value != 'null':
            project[key] = value

    return project


def is_valid_project(project: dict) -> bool:
    """Check that a parsed entry is a real, complete project.

    Rejects the NNNN template, non 4-digit ids, unknown statuses, missing
    titles and anything tagged `example`.
    """
    project_id = project.get('id')
    if not project_id or not isinstance(project_id, str):
        return False
    if project_id == TEMPLATE_ID or not ID_RE.fullmatch(project_id):
        return False

    if project.get('status') not in VALID_STATUSES:
        return False

    if not project.get('title'):
        return False

    tags = project.get('tags')
    if tags and EXAMPLE_TAG in tags:
        return False

    return True


def parse_projectlist(content: str) -> list[Project]:
    """Parse projectlist.md content into a list of projects.

    Invalid entries are dropped. Never raises: any unexpected failure
    yields an empty list so a broken document cannot take down the caller.
    """
    projects = []

    try:
        for block in extract_yaml_blocks(content):
            for chunk in split_entries(block):
                entry = parse_project_entry(chunk)
                if not is_valid_project(entry):
                    logger.debug(f"Skipping invalid entry: id={entry.get('id')!r} status={entry.get('status')!r}")
                    continue
                projects.append(Project.from_entry(entry))
    except Exception as e:
        logger.warning(f"Failed to parse project list: {e}")
        return []

    return projects

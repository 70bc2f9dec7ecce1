"""
Schema checks for exported project records.

Every record leaving `pl export` is checked against
schemas/project.schema.json so consumers can rely on its shape.
"""

import json
from pathlib import Path
from typing import Optional

import jsonschema

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "project.schema.json"

_schema: Optional[dict] = None


class ValidationError(Exception):
    """An exported record does not match the project schema."""

    def __init__(self, message: str, project_id: Optional[str] = None, path: Optional[str] = None):
        self.project_id = project_id
        self.path = path
        where = f"project {project_id}" if project_id else "project"
        super().__init__(f"[{where}] {message}" + (f" at {path}" if path else ""))


def _load_schema() -> dict:
    global _schema
    if _schema is None:
        if not SCHEMA_PATH.exists():
            raise ValidationError(f"Schema file not found: {SCHEMA_PATH}")
        _schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return _schema


def validate_project(record: dict) -> None:
    """
    Check one exported record (Project.to_dict() output).

    Raises:
        ValidationError: naming the record id and the offending field
    """
    try:
        jsonschema.validate(instance=record, schema=_load_schema())
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path) if e.absolute_path else "(root)"
        project_id = record.get("id") if isinstance(record, dict) else None
        raise ValidationError(e.message, project_id, path) from None


def validate_export(records: list[dict], target: str) -> None:
    """
    Check every record before it is written to target.

    Raises:
        ValidationError: for the first record that fails, mentioning target
    """
    for record in records:
        try:
            validate_project(record)
        except ValidationError as e:
            raise ValidationError(
                f"Refusing to export to {target}: {e}", e.project_id, e.path
            ) from None

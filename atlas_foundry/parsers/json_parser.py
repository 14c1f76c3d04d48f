from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..exceptions import ParseError, SchemaValidationError
from ..models import ContentEntry
from ..validator.schema_validator import kind_from_filename, validate_entity


def relative_path(file_path: Path, content_root: Path) -> str:
    """Render ``file_path`` relative to the content root, POSIX-style."""
    try:
        return file_path.resolve().relative_to(content_root.resolve()).as_posix()
    except ValueError:
        return file_path.as_posix()


def read_json(file_path: Path, rel_path: str) -> Any:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid UTF-8 in {rel_path}: {exc}", rel_path=rel_path) from exc
    except OSError as exc:
        raise ParseError(f"Cannot read {rel_path}: {exc}", rel_path=rel_path) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in {rel_path}: {exc}", rel_path=rel_path) from exc


def parse_content_file(file_path: str | Path, content_root: str | Path) -> ContentEntry:
    """Read, parse and schema-validate one content document.

    Raises:
        ParseError: The file is not valid JSON.
        SchemaValidationError: The document violates its kind's schema.
        ValueError: The basename is not a known content filename.
    """
    p = Path(file_path)
    rel_path = relative_path(p, Path(content_root))

    kind = kind_from_filename(p.name)
    if kind == "unknown":
        raise ValueError(f"Not a content document: {rel_path}")

    raw = read_json(p, rel_path)
    result = validate_entity(kind, raw)
    if isinstance(result, list):
        raise SchemaValidationError(rel_path, result)

    return ContentEntry(kind=kind, rel_path=rel_path, data=result)

"""
Loading documents and block content from disk.

.html / .htm files go through parse_html(); anything else is read as JSON.
A JSON list is taken as the children of a root node.
"""

import json
from pathlib import Path
from typing import Any, Union

from .exceptions import DocumentLoadError, MalformedNodeError
from .logger import get_module_logger
from .markup import parse_html
from .schemas import AnyNode, coerce_node

logger = get_module_logger("loader")

HTML_SUFFIXES = (".html", ".htm")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentLoadError(f"File not found: {path}", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}", path=str(path)) from e


def _read_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON in {path.name}",
            path=str(path),
            details={"line": e.lineno, "column": e.colno}
        ) from e


def load_document(path: Union[str, Path]) -> AnyNode:
    """
    Load a document tree from a JSON or HTML file.

    Raises:
        DocumentLoadError: file missing or unreadable, invalid JSON, or the
            top-level value is not a document node
    """
    path = Path(path)

    if path.suffix.lower() in HTML_SUFFIXES:
        document = parse_html(_read_text(path))
        logger.info(f"Loaded HTML document {path.name}")
        return document

    raw = _read_json(path)
    if isinstance(raw, list):
        raw = {"type": "root", "children": raw}

    try:
        document = coerce_node(raw)
    except MalformedNodeError as e:
        raise DocumentLoadError(
            f"{path.name} does not contain a document node",
            path=str(path),
            details=e.details
        ) from e

    logger.info(f"Loaded JSON document {path.name}")
    return document


def load_blocks(path: Union[str, Path]) -> dict[str, Any]:
    """Load a block content mapping (JSON object: block id → content)."""
    path = Path(path)
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise DocumentLoadError(
            f"{path.name} must contain a JSON object of block id to content",
            path=str(path)
        )
    logger.info(f"Loaded {len(raw)} block(s) from {path.name}")
    return raw


"""Parse .ktree JSON content into domain models."""

import json
from types import MappingProxyType
from typing import Any

from study_map.errors import InvalidFormatError
from study_map.models.node import Document, TreeNode


def _parse_node(raw: Any, *, where: str, seen_ids: set[str]) -> TreeNode:
    if not isinstance(raw, dict):
        msg = f"{where}: expected an object, got {type(raw).__name__}"
        raise InvalidFormatError(msg)

    node_id = raw.get("id")
    if not isinstance(node_id, str):
        msg = f"{where}: missing or non-string 'id'"
        raise InvalidFormatError(msg)
    if node_id in seen_ids:
        msg = f"{where}: duplicate node id {node_id!r}"
        raise InvalidFormatError(msg)
    seen_ids.add(node_id)

    title = raw.get("title")
    if not isinstance(title, str):
        msg = f"{where}: node {node_id!r} has a missing or non-string 'title'"
        raise InvalidFormatError(msg)

    summary = raw.get("summary")
    if summary is None:
        summary = ""
    elif not isinstance(summary, str):
        msg = f"{where}: node {node_id!r} has a non-string 'summary'"
        raise InvalidFormatError(msg)

    raw_children = raw.get("children")
    if raw_children is None:
        raw_children = []
    elif not isinstance(raw_children, list):
        msg = f"{where}: node {node_id!r} has non-list 'children'"
        raise InvalidFormatError(msg)

    children = tuple(
        _parse_node(child, where=f"{where}.children[{i}]", seen_ids=seen_ids)
        for i, child in enumerate(raw_children)
    )
    return TreeNode(id=node_id, title=title, summary=summary, children=children)


def parse_document_data(data: Any, *, source: str | None = None) -> Document:
    """Parse a decoded .ktree dict into a Document.

    Args:
        data: Raw document data (as from json.loads).
        source: The filename this document came from, if any.

    Returns:
        The immutable Document.

    Raises:
        InvalidFormatError: If the data does not have the expected shape.
    """
    if not isinstance(data, dict):
        msg = f"Expected a JSON object at the top level, got {type(data).__name__}"
        raise InvalidFormatError(msg)
    if "root" not in data:
        msg = "Missing 'root' node"
        raise InvalidFormatError(msg)

    try:
        root = _parse_node(data["root"], where="root", seen_ids=set())
    except RecursionError as e:
        msg = "Document is nested too deeply"
        raise InvalidFormatError(msg) from e

    metadata = {key: value for key, value in data.items() if key != "root"}
    return Document(root=root, metadata=MappingProxyType(metadata), source=source)


def load_document(raw: bytes, *, source: str | None = None) -> Document:
    """Decode UTF-8 JSON bytes and parse them into a Document.

    Raises:
        InvalidFormatError: On decode, JSON or shape failure.
    """
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"Not valid UTF-8: {e}"
        raise InvalidFormatError(msg) from e

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        msg = f"Not valid JSON: {e}"
        raise InvalidFormatError(msg) from e

    return parse_document_data(data, source=source)

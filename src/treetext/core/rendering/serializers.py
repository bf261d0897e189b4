from __future__ import annotations

"""
Structured Tree Serializers.

One-way projections of a parsed TreeNode structure into data notations:
nested JSON, typed array JSON, flat path JSON, YAML, XML, a sorted path
list and a markdown bullet list. Every serializer is independent and
rejects a missing tree with MissingStructureError.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from treetext.domain.constants import (
    JSON_INDENT,
    NESTING_INDENT,
    ROOT_NAME,
    SERIALIZED_ROOT_NAME,
    XML_DECLARATION,
    XML_ESCAPES,
)
from treetext.domain.errors import MissingStructureError
from treetext.domain.tree_models import TreeNode

_TRAILING_SLASH_RX = re.compile(r"/\s*$")

# -----------------------------------------------------------------------------
# JSON FAMILY
# -----------------------------------------------------------------------------

def format_nested_json(structure: Optional[TreeNode]) -> str:
    """
    Format a tree as nested objects keyed by entry name.

    Files map to null. A childless entry written with a trailing slash
    ('assets/') is an empty directory and maps to an empty object. The
    top level holds a single key: the root name.
    """
    _require_structure(structure)
    return _dump_json({structure.name: _build_nested_object(structure)})


def format_array_json(structure: Optional[TreeNode]) -> str:
    """Format a tree as {name, type, children} records."""
    _require_structure(structure)
    return _dump_json(_build_typed_record(structure))


def format_flat_json(structure: Optional[TreeNode]) -> str:
    """
    Format a tree as two flat path lists.

    Output shape: {"files": [{path, type}], "directories": [{path}]},
    both lists in document order and excluding the root.
    """
    _require_structure(structure)

    files: List[Dict[str, str]] = []
    directories: List[Dict[str, str]] = []

    for item in _walk_entries(structure):
        path = item.full_path()
        if item.is_directory:
            directories.append({"path": path})
        else:
            files.append({"path": path, "type": "file"})

    return _dump_json({"files": files, "directories": directories})

# -----------------------------------------------------------------------------
# MARKUP FORMATS
# -----------------------------------------------------------------------------

def format_yaml(structure: Optional[TreeNode]) -> str:
    """
    Format a tree as block-style YAML under a single 'root' key.

    Keys are written verbatim: no quoting, escaping or flow style.
    """
    _require_structure(structure)
    document = {SERIALIZED_ROOT_NAME: _build_nested_object(structure)}
    return _yaml_block(document)


def format_xml(structure: Optional[TreeNode]) -> str:
    """Format a tree as <directory>/<file> elements after an XML declaration."""
    _require_structure(structure)
    return f"{XML_DECLARATION}\n{_xml_elements(structure)}"


def format_dot(structure: Optional[TreeNode]) -> str:
    """List the full path of every entry, sorted, one per line."""
    _require_structure(structure)
    paths = sorted(item.full_path() for item in _walk_entries(structure))
    return "\n".join(paths)


def format_markdown(structure: Optional[TreeNode]) -> str:
    """Format a tree as a nested '* name' list; directories end with '/'."""
    _require_structure(structure)
    return _markdown_list(structure)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

@dataclass
class _JsonFrame:
    """An open JSON container whose members are still being written."""
    entries: Iterator[Tuple[Optional[str], Any]]
    indent: int
    closer: str
    first: bool = True


def _require_structure(structure: Optional[TreeNode]) -> None:
    if structure is None:
        raise MissingStructureError()


def _dump_json(payload: Any) -> str:
    """
    Write a payload of dicts, lists and scalars in json.dumps(indent=2) layout.

    Containers are tracked on an explicit stack so that tree depth is not
    bounded by the interpreter recursion limit. Scalars, empty containers
    and keys are still encoded by the json module.
    """
    chunks: List[str] = []
    stack: List[_JsonFrame] = []
    _open_json_value(payload, 0, chunks, stack)

    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            chunks.append(f"\n{' ' * frame.indent}{frame.closer}")
            continue

        chunks.append("\n" if frame.first else ",\n")
        frame.first = False

        key, value = entry
        chunks.append(" " * (frame.indent + JSON_INDENT))
        if key is not None:
            chunks.append(f"{_json_scalar(key)}: ")
        _open_json_value(value, frame.indent + JSON_INDENT, chunks, stack)

    return "".join(chunks)


def _open_json_value(value: Any, indent: int, chunks: List[str], stack: List[_JsonFrame]) -> None:
    if isinstance(value, dict) and value:
        chunks.append("{")
        stack.append(_JsonFrame(iter(value.items()), indent, "}"))
    elif isinstance(value, list) and value:
        chunks.append("[")
        stack.append(_JsonFrame(((None, item) for item in value), indent, "]"))
    else:
        chunks.append(_json_scalar(value))


def _json_scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _walk_entries(structure: TreeNode) -> List[TreeNode]:
    """Collect every non-root node in document (pre-)order."""
    entries: List[TreeNode] = []
    stack: List[TreeNode] = [structure]
    while stack:
        item = stack.pop()
        if item.parent is not None:
            entries.append(item)
        stack.extend(reversed(item.children))
    return entries


def _is_empty_directory(item: TreeNode) -> bool:
    return not item.children and bool(_TRAILING_SLASH_RX.search(item.name))


def _leaf_value(item: TreeNode) -> Optional[Dict[str, Any]]:
    return {} if _is_empty_directory(item) else None


def _build_nested_object(structure: TreeNode) -> Optional[Dict[str, Any]]:
    if not structure.children:
        return _leaf_value(structure)

    top: Dict[str, Any] = {}
    stack: List[Tuple[TreeNode, Dict[str, Any]]] = [(structure, top)]
    while stack:
        item, container = stack.pop()
        # Duplicate sibling names collapse onto the last occurrence
        for child in item.children:
            if child.children:
                container[child.name] = {}
                stack.append((child, container[child.name]))
            else:
                container[child.name] = _leaf_value(child)
    return top


def _typed_record(item: TreeNode) -> Dict[str, Any]:
    return {
        "name": SERIALIZED_ROOT_NAME if item.name == ROOT_NAME else item.name,
        "type": "directory" if item.is_directory else "file",
    }


def _build_typed_record(structure: TreeNode) -> Dict[str, Any]:
    top = _typed_record(structure)
    stack: List[Tuple[TreeNode, Dict[str, Any]]] = [(structure, top)]
    while stack:
        item, record = stack.pop()
        if not item.is_directory:
            continue
        record["children"] = []
        for child in item.children:
            child_record = _typed_record(child)
            record["children"].append(child_record)
            stack.append((child, child_record))
    return top


def _yaml_block(mapping: Dict[str, Any]) -> str:
    chunks: List[str] = []
    stack: List[Tuple[Iterator[Tuple[str, Any]], int]] = [(iter(mapping.items()), 0)]
    while stack:
        entries, indent = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        key, value = entry
        spaces = " " * indent
        if value is None:
            chunks.append(f"{spaces}{key}: null\n")
        else:
            chunks.append(f"{spaces}{key}:\n")
            stack.append((iter(value.items()), indent + NESTING_INDENT))
    return "".join(chunks)


def _escape_xml(value: str) -> str:
    for raw, entity in XML_ESCAPES:
        value = value.replace(raw, entity)
    return value


def _xml_elements(structure: TreeNode) -> str:
    chunks: List[str] = []
    # (node, indent, closing): closing entries emit the end tag of a directory
    stack: List[Tuple[TreeNode, int, bool]] = [(structure, 0, False)]
    while stack:
        item, indent, closing = stack.pop()
        spaces = " " * indent
        if closing:
            chunks.append(f"{spaces}</directory>\n")
            continue

        name = SERIALIZED_ROOT_NAME if item.name == ROOT_NAME else item.name
        escaped = _escape_xml(name)
        if not item.children:
            chunks.append(f'{spaces}<file name="{escaped}" />\n')
            continue

        chunks.append(f'{spaces}<directory name="{escaped}">\n')
        stack.append((item, indent, True))
        for child in reversed(item.children):
            stack.append((child, indent + NESTING_INDENT, False))
    return "".join(chunks)


def _markdown_list(structure: TreeNode) -> str:
    chunks: List[str] = []
    tops = structure.children if structure.parent is None else [structure]
    stack: List[Tuple[TreeNode, int]] = [(item, 0) for item in reversed(tops)]
    while stack:
        item, indent = stack.pop()
        suffix = "/" if item.is_directory else ""
        chunks.append(f"{' ' * indent}* {item.name}{suffix}\n")
        for child in reversed(item.children):
            stack.append((child, indent + NESTING_INDENT))
    return "".join(chunks)

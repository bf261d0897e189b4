from __future__ import annotations

"""
Indentation Outline Parser.

Translates a block of user-written, indentation-based text into a nested
TreeNode structure. Optional markdown bullets ('- ') are accepted in front
of each entry. Nesting is reconstructed from indentation deltas with an
explicit stack of open ancestors, so arbitrarily deep outlines never touch
the interpreter recursion limit.
"""

import logging
import re
from typing import Any, List

from treetext.domain.constants import MAX_INDENT_STEP, ROOT_INDENT_LEVEL
from treetext.domain.errors import (
    BadIndentationError,
    InvalidInputError,
    ParserInternalError,
)
from treetext.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# Group 1: full prefix to strip. Group 2: leading whitespace (the indent).
_LEADING_WHITESPACE_AND_BULLET_RX = re.compile(r"^((\s*)(?:-\s)?)")
_ONLY_WHITESPACE_RX = re.compile(r"^\s*$")
_LINE_RX = re.compile(r"[^\r\n]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_input(text: Any) -> TreeNode:
    """
    Build a validated tree from an indentation outline.

    Args:
        text: Plain-text outline, one entry per line.

    Returns:
        TreeNode: The synthetic root ('.') holding the top-level entries.

    Raises:
        InvalidInputError: If text is empty or not a string.
        BadIndentationError: If an entry jumps more than two columns deeper
            than its open ancestor, or dedents below the root.
    """
    if not text or not isinstance(text, str):
        raise InvalidInputError()

    items = split_input(text)
    root = TreeNode.create_root()

    path: List[TreeNode] = [root]
    for item in items:
        last_indent = path[-1].indent_level
        if item.indent_level > last_indent + MAX_INDENT_STEP and last_indent != ROOT_INDENT_LEVEL:
            raise BadIndentationError(item.name)

        while path and path[-1].indent_level >= item.indent_level:
            path.pop()

        if not path:
            raise BadIndentationError(item.name)

        parent = path[-1]
        parent.children.append(item)
        item.parent = parent
        path.append(item)

    logger.debug(f"Parsed outline into {len(items)} entries.")
    return root


def split_input(text: str) -> List[TreeNode]:
    """
    Split an outline into flat, un-nested nodes.

    Whitespace-only lines are dropped. Each remaining line loses its
    leading whitespace and optional bullet; the whitespace width becomes
    the node's indent level (every character counts as one column).

    Args:
        text: Plain-text outline.

    Returns:
        List[TreeNode]: One detached node per non-blank line.
    """
    lines = [
        line for line in _LINE_RX.findall(text or "")
        if not _ONLY_WHITESPACE_RX.match(line)
    ]

    nodes: List[TreeNode] = []
    for index, line in enumerate(lines):
        match = _LEADING_WHITESPACE_AND_BULLET_RX.match(line)
        if match is None:
            raise ParserInternalError(index + 1, line)

        nodes.append(TreeNode(
            name=line[match.end(1):],
            indent_level=len(match.group(2)),
        ))

    return nodes

from __future__ import annotations

"""
Tree Renderer.

Converts a parsed TreeNode structure into a line-drawing diagram using
either plain ASCII or UTF-8 box-drawing connectors (├──, └──). The walk
uses an explicit stack instead of recursion so very deep outlines render
without exhausting the call stack.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from treetext.domain.constants import DEFAULT_CHARSET, LINE_STRINGS
from treetext.domain.errors import MissingStructureError, UnknownCharsetError
from treetext.domain.render_models import RenderOptions, coerce_options, normalize_charset
from treetext.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

_TRAILING_SLASH_RX = re.compile(r"/\s*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_tree(
        structure: Optional[TreeNode],
        options: Union[RenderOptions, Mapping[str, Any], None] = None,
) -> str:
    """
    Render a tree as a line-drawing diagram.

    Args:
        structure: Root of the tree to draw.
        options: RenderOptions or an equivalent mapping. Missing fields
                 fall back to the defaults (utf-8, root dot shown).

    Returns:
        str: Newline-joined diagram without a trailing newline.

    Raises:
        MissingStructureError: If structure is None.
        UnknownCharsetError: If the requested charset has no glyph table.
    """
    if structure is None:
        raise MissingStructureError()

    opts = coerce_options(options)
    glyphs = _resolve_glyphs(opts.charset)

    lines: List[str] = []
    stack: List[TreeNode] = [structure]

    while stack:
        item = stack.pop()

        line = _get_line(item, opts, glyphs)
        if line is not None:
            lines.append(line)

        # Reverse push keeps pop order equal to document order
        stack.extend(reversed(item.children))

    logger.debug(f"Rendered {len(lines)} tree lines (charset={opts.charset}).")
    return "\n".join(lines)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _resolve_glyphs(charset: Any) -> Dict[str, str]:
    """Look up the connector table for a charset identifier."""
    key = normalize_charset(charset) or DEFAULT_CHARSET
    glyphs = LINE_STRINGS.get(key) if isinstance(key, str) else None
    if glyphs is None:
        raise UnknownCharsetError(charset)
    return glyphs


def _get_line(
        structure: TreeNode,
        options: RenderOptions,
        glyphs: Dict[str, str],
) -> Optional[str]:
    """
    Build the diagram line for one node.

    Returns None for the root when the root dot is suppressed.
    """
    if structure.parent is None:
        return structure.name if options.root_dot else None

    chunks = [
        glyphs["LAST_CHILD"] if structure.is_last_child() else glyphs["CHILD"],
        _get_name(structure, options),
    ]

    current = structure.parent
    while current is not None and current.parent is not None:
        chunks.insert(0, glyphs["EMPTY"] if current.is_last_child() else glyphs["DIRECTORY"])
        current = current.parent

    line = "".join(chunks)
    # Without the root line every entry loses one level of connector
    return line if options.root_dot else line[len(glyphs["CHILD"]):]


def _get_name(structure: TreeNode, options: RenderOptions) -> str:
    """Apply trailing-slash and full-path decorations to a node name."""
    name_chunks = [structure.name]

    if (
        options.trailing_dir_slash
        and structure.is_directory
        and not _TRAILING_SLASH_RX.search(structure.name)
    ):
        name_chunks.append("/")

    if options.full_path and structure.parent is not None:
        ancestor_path = structure.parent.full_path()
        if ancestor_path:
            name_chunks.insert(0, f"{ancestor_path}/")

    return "".join(name_chunks)

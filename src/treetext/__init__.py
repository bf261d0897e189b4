from __future__ import annotations

"""
treetext: indentation outlines to directory-tree diagrams.

Public entry points are parse_input (text to tree) and format_tree
(tree to text in any supported notation).
"""

from treetext.core.parsing.input_parser import parse_input, split_input
from treetext.core.rendering.dispatcher import format_tree
from treetext.core.rendering.serializers import (
    format_array_json,
    format_dot,
    format_flat_json,
    format_markdown,
    format_nested_json,
    format_xml,
    format_yaml,
)
from treetext.core.rendering.tree_renderer import generate_tree
from treetext.domain.errors import (
    BadIndentationError,
    InvalidInputError,
    MissingStructureError,
    ParserInternalError,
    StructuralAmbiguityError,
    TreeTextError,
    UnknownCharsetError,
    UnknownFormatError,
    UnknownOptionError,
)
from treetext.domain.render_models import FORMAT_IDS, FormatType, RenderOptions
from treetext.domain.tree_models import TreeNode

__version__ = "1.0.0"

__all__ = [
    "parse_input",
    "split_input",
    "format_tree",
    "generate_tree",
    "format_nested_json",
    "format_array_json",
    "format_flat_json",
    "format_yaml",
    "format_xml",
    "format_dot",
    "format_markdown",
    "TreeNode",
    "FormatType",
    "FORMAT_IDS",
    "RenderOptions",
    "TreeTextError",
    "InvalidInputError",
    "ParserInternalError",
    "StructuralAmbiguityError",
    "BadIndentationError",
    "MissingStructureError",
    "UnknownOptionError",
    "UnknownCharsetError",
    "UnknownFormatError",
]

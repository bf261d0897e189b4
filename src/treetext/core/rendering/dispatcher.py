from __future__ import annotations

"""
Format Dispatcher.

Routes a (tree, format, options) request to the line-drawing renderer or
to one of the structured serializers. Unknown formats degrade to the
default line-drawing output unless strict dispatch is requested.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

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
from treetext.domain.constants import CHARSET_ASCII, CHARSET_UTF8
from treetext.domain.errors import MissingStructureError, UnknownFormatError
from treetext.domain.render_models import FormatType, RenderOptions, coerce_options
from treetext.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

_SERIALIZERS: Dict[FormatType, Callable[[TreeNode], str]] = {
    FormatType.JSON_NESTED: format_nested_json,
    FormatType.JSON_ARRAY: format_array_json,
    FormatType.JSON_FLAT: format_flat_json,
    FormatType.YAML: format_yaml,
    FormatType.XML: format_xml,
    FormatType.DOT: format_dot,
    FormatType.MARKDOWN: format_markdown,
}

_LINE_DRAWING_CHARSETS: Dict[FormatType, str] = {
    FormatType.ASCII: CHARSET_ASCII,
    FormatType.UTF8: CHARSET_UTF8,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_tree(
        structure: Optional[TreeNode],
        format_id: Union[str, FormatType, None],
        options: Union[RenderOptions, Mapping[str, Any], None] = None,
        *,
        strict: bool = False,
) -> str:
    """
    Render a tree in the requested notation.

    Args:
        structure: Root of the parsed tree.
        format_id: A FormatType member or its string value.
        options: Line-drawing options; ignored by structured serializers.
        strict: Raise on unknown format ids instead of falling back.

    Returns:
        str: The rendered text.

    Raises:
        MissingStructureError: If structure is None.
        UnknownFormatError: If strict and format_id is not recognized.
        UnknownCharsetError: If the line-drawing path gets a bad charset.
    """
    if structure is None:
        raise MissingStructureError()

    fmt = FormatType.resolve(format_id)

    if fmt is None:
        if strict:
            raise UnknownFormatError(format_id)
        logger.debug(f"Unknown format '{format_id}'. Falling back to line drawing.")
        return generate_tree(structure, options)

    if fmt in _LINE_DRAWING_CHARSETS:
        opts = coerce_options(options)
        return generate_tree(structure, _with_charset(opts, _LINE_DRAWING_CHARSETS[fmt]))

    logger.debug(f"Serializing tree as {fmt.value}.")
    return _SERIALIZERS[fmt](structure)


def _with_charset(options: RenderOptions, charset: str) -> RenderOptions:
    values = options.to_dict()
    values["charset"] = charset
    return RenderOptions(**values)

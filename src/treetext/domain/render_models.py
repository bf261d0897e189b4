from __future__ import annotations

"""
Rendering Request Models.

Defines the closed set of output formats and the immutable option bundle
understood by the line-drawing renderer. Options can be built from plain
mappings using either snake_case keys or the camelCase keys used by
browser front-ends.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from treetext.domain.constants import CHARSET_ALIASES, DEFAULT_CHARSET

# -----------------------------------------------------------------------------
# OUTPUT FORMATS
# -----------------------------------------------------------------------------

class FormatType(str, Enum):
    """Every output notation the dispatcher can produce."""
    ASCII = "ascii"
    UTF8 = "utf-8"
    JSON_NESTED = "json-nested"
    JSON_ARRAY = "json-array"
    JSON_FLAT = "json-flat"
    YAML = "yaml"
    XML = "xml"
    DOT = "dot"
    MARKDOWN = "markdown"

    @classmethod
    def resolve(cls, value: Union[str, "FormatType", None]) -> Optional["FormatType"]:
        """
        Map a raw identifier onto a member, or None when unrecognized.

        Matching is case-insensitive and accepts 'utf8' for 'utf-8'.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = CHARSET_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None


FORMAT_IDS = tuple(member.value for member in FormatType)

# -----------------------------------------------------------------------------
# LINE-DRAWING OPTIONS
# -----------------------------------------------------------------------------

# camelCase spellings accepted alongside the field names
_OPTION_ALIASES: Dict[str, str] = {
    "trailingDirSlash": "trailing_dir_slash",
    "trailing_slash": "trailing_dir_slash",
    "trailingSlash": "trailing_dir_slash",
    "fullPath": "full_path",
    "rootDot": "root_dot",
    "show_root": "root_dot",
}


@dataclass(frozen=True)
class RenderOptions:
    """
    Layout switches for the line-drawing renderer.

    Attributes:
        charset: Glyph set identifier ('ascii' or 'utf-8').
        trailing_dir_slash: Append '/' to directory names.
        full_path: Prefix each name with its ancestor chain.
        root_dot: Emit the root sentinel as the first line.
    """
    charset: str = DEFAULT_CHARSET
    trailing_dir_slash: bool = False
    full_path: bool = False
    root_dot: bool = True

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RenderOptions":
        """
        Build options from a loose mapping, ignoring unknown keys.

        A None value for any key keeps the default for that field.
        """
        if not data:
            return cls()

        values: Dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _OPTION_ALIASES.get(raw_key, raw_key)
            if key in cls.__dataclass_fields__ and value is not None:
                values[key] = value

        if "charset" in values:
            values["charset"] = normalize_charset(values["charset"])
        for flag in ("trailing_dir_slash", "full_path", "root_dot"):
            if flag in values:
                values[flag] = bool(values[flag])

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def normalize_charset(charset: Any) -> Any:
    """Canonicalize charset spellings; unknown values pass through unchanged."""
    if not isinstance(charset, str):
        return charset
    key = charset.strip().lower()
    return CHARSET_ALIASES.get(key, key)


def coerce_options(options: Union[RenderOptions, Mapping[str, Any], None]) -> RenderOptions:
    """Accept either an options instance or a mapping."""
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.from_mapping(options)

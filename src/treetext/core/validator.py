from __future__ import annotations

"""
Configuration Validation Service.

Normalizes rendering configuration coming from the CLI or the persisted
state file. Coerces loosely typed values (strings, 0/1) into booleans,
resolves format and charset spellings, and injects defaults for missing
keys.
"""

import logging
from typing import Any, Dict, List, Tuple

from treetext.domain.config import get_default_config
from treetext.domain.constants import LINE_STRINGS
from treetext.domain.render_models import FormatType, RenderOptions, normalize_charset

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ["trailing_dir_slash", "full_path", "root_dot", "strict_format"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a rendering configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a wrongly typed field.
        ValueError: In strict mode, on an unknown format or charset.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["format"] = _as_format(merged.get("format"), defaults["format"], warnings, strict)
    merged["charset"] = _as_charset(merged.get("charset"), defaults["charset"], warnings, strict)

    return merged, warnings


def to_render_options(config: Dict[str, Any]) -> RenderOptions:
    """Project a validated configuration onto line-drawing options."""
    return RenderOptions.from_mapping(config)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_format(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    fmt = FormatType.resolve(value)
    if fmt is not None:
        return fmt.value

    msg = f"Invalid field 'format': unknown format '{value}'."
    if strict:
        raise ValueError(msg)
    # Kept verbatim: the dispatcher chooses between fallback and strict failure
    warnings.append(f"{msg} Falling back to line drawing.")
    return str(value).strip()


def _as_charset(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    charset = normalize_charset(value)
    if isinstance(charset, str) and charset in LINE_STRINGS:
        return charset

    msg = f"Invalid field 'charset': unknown charset '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the tree sentinels, line-drawing glyph
tables, serializer literals and configuration versioning shared by the
parser, the renderers and the CLI.
"""

from typing import Dict

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE SENTINELS
# -----------------------------------------------------------------------------
ROOT_NAME = "."
ROOT_INDENT_LEVEL = -1

# Largest accepted step between an item and its open ancestor
MAX_INDENT_STEP = 2

# -----------------------------------------------------------------------------
# LINE-DRAWING GLYPHS
# -----------------------------------------------------------------------------
CHARSET_ASCII = "ascii"
CHARSET_UTF8 = "utf-8"
DEFAULT_CHARSET = CHARSET_UTF8

CHARSET_ALIASES: Dict[str, str] = {
    "utf8": CHARSET_UTF8,
}

LINE_STRINGS: Dict[str, Dict[str, str]] = {
    CHARSET_ASCII: {
        "CHILD": "|-- ",
        "LAST_CHILD": "`-- ",
        "DIRECTORY": "|   ",
        "EMPTY": "    ",
    },
    CHARSET_UTF8: {
        "CHILD": "├── ",
        "LAST_CHILD": "└── ",
        "DIRECTORY": "│   ",
        "EMPTY": "    ",
    },
}

# -----------------------------------------------------------------------------
# SERIALIZER LITERALS
# -----------------------------------------------------------------------------
SERIALIZED_ROOT_NAME = "root"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
JSON_INDENT = 2
NESTING_INDENT = 2

# Ordered so that '&' is escaped before the entities that contain it
XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

# -----------------------------------------------------------------------------
# SAMPLE OUTLINE
# -----------------------------------------------------------------------------
SAMPLE_INPUT = "\n".join([
    "my-project",
    "  node_modules",
    "    lodash",
    "      package.json",
    "  src",
    "    components",
    "      Button.js",
    "      Card.js",
    "    App.js",
    "    index.js",
    "  package.json",
    "  README.md",
])

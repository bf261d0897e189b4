from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure raised by the parser, the renderers and the dispatcher
derives from TreeTextError so that callers can trap the whole family
with a single handler. Each concrete class also inherits the closest
builtin exception to stay compatible with generic handlers.
"""


class TreeTextError(Exception):
    """Base class for all treetext failures."""


class InvalidInputError(TreeTextError, ValueError):
    """Raised when the outline source is empty or not a string."""

    def __init__(self, message: str = "Input must be a non-empty string") -> None:
        super().__init__(message)


class ParserInternalError(TreeTextError, RuntimeError):
    """Raised when a line cannot be matched by the indentation pattern."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f'Cannot parse line {line_number}: "{line}". Expected valid indentation.'
        )


class StructuralAmbiguityError(TreeTextError, ValueError):
    """Raised when indentation cannot be resolved to a unique parent."""


class BadIndentationError(StructuralAmbiguityError):
    """
    Raised for an oversized indentation jump or a dedent below the root.

    Attributes:
        item_name: Name of the offending outline entry.
    """

    def __init__(self, item_name: str) -> None:
        self.item_name = item_name
        super().__init__(f"Bad indentation found at item: {item_name}")


class MissingStructureError(TreeTextError, ValueError):
    """Raised when a renderer receives no tree."""

    def __init__(self, message: str = "Structure is required") -> None:
        super().__init__(message)


class UnknownOptionError(TreeTextError, ValueError):
    """Raised for unrecognized option values that cannot degrade gracefully."""


class UnknownCharsetError(UnknownOptionError):
    """Raised when the line-drawing renderer is asked for an unknown glyph set."""

    def __init__(self, charset: object) -> None:
        self.charset = charset
        super().__init__(f"Unknown charset: {charset}")


class UnknownFormatError(UnknownOptionError):
    """Raised by strict dispatch for an unknown format identifier."""

    def __init__(self, format_id: object) -> None:
        self.format_id = format_id
        super().__init__(f"Unknown format: {format_id}")

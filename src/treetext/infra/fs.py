from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the user data directory plus the
read/write helpers used by the CLI to load outlines and persist
renderings. The parsing and rendering core never touches the filesystem.
"""

import os
import sys
from typing import Optional, TextIO

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeText"
UNIX_APP_DIR_NAME = ".treetext"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeText
    - Linux/Mac: ~/.treetext

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str]) -> str:
    """
    Expand environment variables and '~' and return an absolute path.

    Args:
        path: Raw path string.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_text_source(path: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """
    Load outline text from a file, or from stdin when path is empty or '-'.

    Args:
        path: Source file path.
        stdin: Stream to read when no file is given (defaults to sys.stdin).

    Returns:
        str: The full text content.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: On any other read failure.
    """
    if not path or path == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    with open(normalize_path(path), "r", encoding="utf-8") as f:
        return f.read()


def write_text_output(path: str, content: str) -> str:
    """
    Persist rendered text, creating parent directories as needed.

    A single trailing newline is appended.

    Args:
        path: Destination file path.
        content: Rendered text.

    Returns:
        str: The absolute path written.
    """
    target = normalize_path(path)
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(target, "w", encoding="utf-8") as f:
        f.write(content if content.endswith("\n") else content + "\n")
    return target

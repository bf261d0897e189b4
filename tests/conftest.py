from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree fixtures used across parser and renderer tests.
3. Isolation of the logging subsystem and the persisted config file.
"""

import os
import sys
from typing import Any, Dict, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treetext.core.parsing.input_parser import parse_input  # noqa: E402
from treetext.domain.tree_models import TreeNode  # noqa: E402
from treetext.infra.logging import shutdown_logging  # noqa: E402

BASIC_INPUT = "app\n  src\n    index.js\n  package.json"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def tree_shape(node: TreeNode) -> Tuple[str, int, List[Any]]:
    """Reduce a tree to nested tuples so two parses can be compared."""
    return node.name, node.indent_level, [tree_shape(c) for c in node.children]


def build_basic_tree() -> TreeNode:
    """
    Assemble the reference tree by hand, without going through the parser.

    Structure:
    .
      app
        src
          index.js
        package.json
    """
    root = TreeNode.create_root()

    app = TreeNode(name="app", indent_level=0, parent=root)
    root.children.append(app)

    src = TreeNode(name="src", indent_level=2, parent=app)
    app.children.append(src)

    index_js = TreeNode(name="index.js", indent_level=4, parent=src)
    src.children.append(index_js)

    package_json = TreeNode(name="package.json", indent_level=2, parent=app)
    app.children.append(package_json)

    return root


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def basic_tree() -> TreeNode:
    """Return the parsed reference tree (app/src/index.js, app/package.json)."""
    return parse_input(BASIC_INPUT)


@pytest.fixture
def manual_tree() -> TreeNode:
    """Return the reference tree assembled without the parser."""
    return build_basic_tree()


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete rendering configuration dictionary."""
    return {
        "format": "utf-8",
        "charset": "utf-8",
        "trailing_dir_slash": False,
        "full_path": False,
        "root_dot": True,
        "strict_format": False,
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach treetext logging handlers after every test."""
    yield
    shutdown_logging()


@pytest.fixture
def shape_of():
    """Expose tree_shape to tests as a fixture."""
    return tree_shape

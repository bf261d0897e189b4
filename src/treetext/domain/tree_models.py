from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node type produced by the indentation parser and consumed by
every renderer. Directory-vs-file is derived from the child count and is
never stored on the node.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from treetext.domain.constants import ROOT_INDENT_LEVEL, ROOT_NAME

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    Represents one outline entry (file or directory) in the parsed tree.

    Attributes:
        name: Display text taken verbatim from the input line.
        children: Ordered child entries, in document order.
        indent_level: Leading-whitespace width of the source line.
        parent: Back-reference to the enclosing node (None for the root).
    """
    name: str
    children: List["TreeNode"] = field(default_factory=list)
    indent_level: int = 0
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    @classmethod
    def create_root(cls) -> "TreeNode":
        """Build the synthetic 'current directory' root."""
        return cls(name=ROOT_NAME, indent_level=ROOT_INDENT_LEVEL)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_directory(self) -> bool:
        return len(self.children) > 0

    def is_last_child(self) -> bool:
        """
        Check whether this node occupies the final slot of its parent.

        Uses identity so that siblings sharing a name are told apart.
        The root is never last.
        """
        if self.parent is None or not self.parent.children:
            return False
        return self.parent.children[-1] is self

    def ancestors(self) -> Iterator["TreeNode"]:
        """Yield the parent chain upward, starting at the direct parent."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def path_parts(self) -> List[str]:
        """Return names from below the root down to this node (inclusive)."""
        parts: List[str] = []
        current: Optional[TreeNode] = self
        while current is not None and current.parent is not None:
            parts.append(current.name)
            current = current.parent
        parts.reverse()
        return parts

    def full_path(self) -> str:
        return "/".join(self.path_parts())

    def count_nodes(self) -> int:
        """Count this node and all of its descendants."""
        total = 0
        stack: List[TreeNode] = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total

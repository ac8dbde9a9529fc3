"""TreeBuilder: converts the parser's nested-list output into TreeNode trees.

Wire shape:
- a leaf is a bare string
- a labeled branch is a list whose first element is a string label,
  followed by its children
- an unlabeled group is a list whose first element is itself a list (or an
  empty list)

``to_wire`` is the inverse and is what gets serialised back to JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from camxes_postproc.tree.nodes import TreeNode

# Type alias for the parser's nested-list encoding
WireNode = str | list[Any]


@dataclass
class TreeBuilder:
    """Converts a wire-encoded parse tree into a TreeNode tree.

    Example::
        builder = TreeBuilder()
        tree = builder.build(["sumti", ["KOhA", "mi"]])
        # tree: LABELED("sumti") -> LABELED("KOhA") -> LEAF("mi")
    """

    def build(self, value: Any) -> TreeNode:
        """Convert a wire value to a TreeNode tree.

        Args:
            value: A string or a (possibly nested) list of strings.

        Returns:
            The root TreeNode.

        Raises:
            TypeError: If any element is neither a string nor a list.
        """
        if isinstance(value, str):
            return TreeNode.leaf(value)

        if isinstance(value, list):
            if value and isinstance(value[0], str):
                return TreeNode.labeled(
                    value[0], [self.build(child) for child in value[1:]]
                )
            return TreeNode.group([self.build(child) for child in value])

        raise TypeError(f"Unsupported parse tree element type: {type(value)!r}")


def to_wire(node: TreeNode) -> WireNode:
    """Convert a TreeNode tree back to the parser's nested-list encoding."""
    if node.is_leaf:
        return node.text
    children = [to_wire(child) for child in node.children]
    if node.is_labeled:
        return [node.label, *children]
    return children

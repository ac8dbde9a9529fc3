"""Tree subpackage for parse-tree primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in the parse tree
- NodeKind: StrEnum of the three node shapes (LEAF, LABELED, GROUP)
- TreeBuilder: converts the parser's nested lists into a TreeNode tree
- to_wire: converts a TreeNode tree back into nested lists
- is_selmaho: structural test for terminal category names
"""

from camxes_postproc.tree.builder import TreeBuilder, WireNode, to_wire
from camxes_postproc.tree.nodes import NodeKind, TreeNode
from camxes_postproc.tree.selmaho import is_selmaho

__all__ = ["NodeKind", "TreeBuilder", "TreeNode", "WireNode", "is_selmaho", "to_wire"]

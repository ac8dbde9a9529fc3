"""TreeNode dataclass and NodeKind StrEnum for parse-tree representation.

The parser emits nested lists whose shape alone tells a leaf, a labeled
branch and an unlabeled group apart.  These types make that distinction
explicit so the passes never have to sniff the first list slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto


class NodeKind(StrEnum):
    """Enumeration of the three node shapes in a parse tree.

    - LEAF    -> "leaf"    : a terminal text value
    - LABELED -> "labeled" : a branch named after a grammar rule
    - GROUP   -> "group"   : an unlabeled sequence of nodes
    """

    LEAF = auto()
    LABELED = auto()
    GROUP = auto()


@dataclass(slots=True)
class TreeNode:
    """A node in the parse tree.

    Attributes:
        kind:      Which shape this node has (see NodeKind).
        text:      Token text for LEAF nodes; empty for branches.
        label:     Rule or selma'o name for LABELED nodes; empty otherwise.
        children:  Child nodes of LABELED and GROUP nodes.  LEAF nodes keep
                   this empty.
    """

    kind: NodeKind
    text: str = ""
    label: str = ""
    children: list[TreeNode] = field(default_factory=list)

    @classmethod
    def leaf(cls, text: str) -> TreeNode:
        return cls(kind=NodeKind.LEAF, text=text)

    @classmethod
    def labeled(cls, label: str, children: list[TreeNode] | None = None) -> TreeNode:
        return cls(kind=NodeKind.LABELED, label=label, children=list(children or []))

    @classmethod
    def group(cls, children: list[TreeNode] | None = None) -> TreeNode:
        return cls(kind=NodeKind.GROUP, children=list(children or []))

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    def is_labeled(self) -> bool:
        return self.kind is NodeKind.LABELED

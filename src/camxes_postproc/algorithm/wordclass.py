"""Word-class prefixer: turns ``["gismu", "klama"]`` into ``"G:klama"``."""

from __future__ import annotations

from collections.abc import Mapping

from camxes_postproc.tree.nodes import TreeNode

WORD_CLASS_CODES: Mapping[str, str] = {
    "cmene": "C",
    "cmevla": "C",
    "gismu": "G",
    "lujvo": "L",
    "fuhivla": "Z",
}


def is_terminal_pair(node: TreeNode) -> bool:
    """Return True for a labeled node whose only child is a leaf."""
    return (
        node.is_labeled
        and len(node.children) == 1
        and node.children[0].is_leaf
    )


def prefix_wordclass(
    node: TreeNode,
    codes: Mapping[str, str] = WORD_CLASS_CODES,
) -> TreeNode:
    """Collapse every terminal pair into a ``code:text`` leaf.

    The code is looked up in ``codes`` by label; unmapped labels are used
    verbatim (``["KOhA", "mi"]`` becomes ``"KOhA:mi"``).

    Args:
        node: Root of the tree.  It is not modified.
        codes: Label to short code table.

    Returns:
        The rewritten tree.
    """
    if is_terminal_pair(node):
        code = codes.get(node.label, node.label)
        return TreeNode.leaf(f"{code}:{node.children[0].text}")

    if node.is_leaf:
        return node

    children = [prefix_wordclass(child, codes) for child in node.children]
    if node.is_labeled:
        return TreeNode.labeled(node.label, children)
    return TreeNode.group(children)

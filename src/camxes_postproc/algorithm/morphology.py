"""Morphology flattener.

Word-forming nodes (names, root words, compounds, borrowings, whitespace,
two clause introducers) and every selma'o node carry the parser's
letter-by-letter analysis of the word.  ``remove_morphology`` replaces that
analysis with the plain word text: ``["gismu", ["g"], ["i"], ...]`` becomes
``["gismu", "gismu"]``.
"""

from __future__ import annotations

from camxes_postproc.tree.nodes import TreeNode
from camxes_postproc.tree.selmaho import is_selmaho

MORPHOLOGY_LABELS: frozenset[str] = frozenset(
    {"cmevla", "gismu", "lujvo", "fuhivla", "spaces", "ga_clause", "gu_clause"}
)


def is_morphology_node(node: TreeNode) -> bool:
    """Return True if the node's internal structure should be flattened."""
    return node.is_labeled and (
        node.label in MORPHOLOGY_LABELS or is_selmaho(node.label)
    )


def join_leaves(node: TreeNode) -> str:
    """Concatenate, depth first, the text of every leaf under ``node``.

    Labels are not part of the result.
    """
    if node.is_leaf:
        return node.text
    return "".join(join_leaves(child) for child in node.children)


def remove_morphology(node: TreeNode) -> TreeNode:
    """Return a copy of the tree with morphology nodes flattened to text.

    A matching node keeps its label and gets a single leaf holding the
    joined text, or no child at all when that text is empty.  Nothing below
    a matching node is visited.  Other branches are rebuilt with their
    children processed the same way; leaves are returned as is.

    Args:
        node: Root of the tree to flatten.

    Returns:
        The flattened tree.  The input tree is left untouched.
    """
    if node.is_leaf:
        return node

    if is_morphology_node(node):
        text = join_leaves(node)
        return TreeNode.labeled(node.label, [TreeNode.leaf(text)] if text else [])

    children = [remove_morphology(child) for child in node.children]
    if node.is_labeled:
        return TreeNode.labeled(node.label, children)
    return TreeNode.group(children)

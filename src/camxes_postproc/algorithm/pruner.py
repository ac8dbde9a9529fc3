"""Node pruner and the node filter it is driven by.

``prune_unwanted_nodes`` drops every label the filter rejects and collapses
the wrappers this leaves behind, so a parse tree that is dozens of levels
deep comes out only as deep as the retained categories require.

Rules, applied bottom-up:

1. A leaf is kept as is.
2. An empty group is dropped.
3. A ``spaces`` node is dropped, or its content is replaced by ``_`` when
   spaces are retained.
4. Children are pruned; children that prune away are removed.
5. The label is tested with ``is_wanted(label, no_children_left)`` and
   removed when unwanted.
6. What is left is dropped when empty, replaced by its single element when
   exactly one element (child or label) remains, and kept otherwise.
"""

from __future__ import annotations

from collections.abc import Callable

from camxes_postproc.algorithm.config import OutputOptions
from camxes_postproc.tree.nodes import NodeKind, TreeNode
from camxes_postproc.tree.selmaho import is_selmaho

# is_wanted(label, no_children_left) -> keep label?
NodeFilter = Callable[[str, bool], bool]

SPACES_LABEL = "spaces"
SPACE_PLACEHOLDER = "_"

# Bridi structure labels kept (and tagged) when node labels are requested
BRIDI_LABELS: frozenset[str] = frozenset({"prenex", "sentence", "selbri", "sumti"})

# Word classes kept alongside selma'o when morphology has been removed
WORD_CLASS_LABELS: frozenset[str] = frozenset({"cmevla", "gismu", "lujvo", "fuhivla"})


def make_node_filter(options: OutputOptions) -> NodeFilter:
    """Build the label filter for ``prune_unwanted_nodes`` from an option set.

    Selma'o labels are kept according to two rules.  With selma'o retention
    on, a non-empty selma'o node is always kept and an empty one (an elided
    terminator) only when terminators are retained.  With it off, only empty
    selma'o nodes survive, and only when terminators are retained.

    Args:
        options: The resolved option set.

    Returns:
        A predicate ``(label, no_children_left) -> bool``.
    """
    wanted = BRIDI_LABELS if options.with_node_labels else frozenset()
    if options.with_selmaho and not options.with_morphology:
        wanted = wanted | WORD_CLASS_LABELS

    def is_wanted(label: str, no_children_left: bool) -> bool:
        if label in wanted:
            return True
        if not is_selmaho(label):
            return False
        if options.with_selmaho:
            return options.with_terminators or not no_children_left
        return no_children_left and options.with_terminators

    return is_wanted


def prune_unwanted_nodes(
    node: TreeNode,
    is_wanted: NodeFilter,
    with_spaces: bool = False,
) -> TreeNode | None:
    """Prune a tree, removing unwanted labels and collapsing singletons.

    Args:
        node: Root of the tree to prune.  It is not modified.
        is_wanted: Label filter, see ``make_node_filter``.
        with_spaces: Keep ``spaces`` nodes (as ``_``) instead of dropping them.

    Returns:
        The pruned tree, or None when nothing survives.
    """
    if node.is_leaf:
        return node

    if node.kind is NodeKind.GROUP and not node.children:
        return None

    children = node.children
    if node.is_labeled and node.label == SPACES_LABEL:
        if not with_spaces:
            return None
        children = [TreeNode.leaf(SPACE_PLACEHOLDER), *children[1:]]

    survivors: list[TreeNode] = []
    for child in children:
        pruned = prune_unwanted_nodes(child, is_wanted, with_spaces)
        if pruned is not None:
            survivors.append(pruned)

    keep_label = node.is_labeled and is_wanted(
        node.label, not survivors
    )
    count = len(survivors) + (1 if keep_label else 0)

    if count == 0:
        return None
    if count == 1:
        return TreeNode.leaf(node.label) if keep_label else survivors[0]
    if keep_label:
        return TreeNode.labeled(node.label, survivors)
    return TreeNode.group(survivors)

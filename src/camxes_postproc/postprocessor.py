"""Postprocessor: orchestrator wiring the tree passes and the formatting layer.

Pipeline for one run::

    remove_morphology            (unless morphology is retained)
      -> [RAW / CONDENSED]       encode as JSON and stop
      -> prune_unwanted_nodes    (filter built by make_node_filter)
      -> prefix_wordclass        (selma'o retained, morphology removed)
      -> encode as compact JSON  (returned as is when JSON output is asked)
      -> flatten_to_text -> prettify_brackets

Every pass returns a new tree, so a Postprocessor never modifies the tree it
is given and can be reused for any number of trees.
"""

from __future__ import annotations

import logging

from camxes_postproc.algorithm.config import OutputOptions, OutputStyle
from camxes_postproc.algorithm.morphology import remove_morphology
from camxes_postproc.algorithm.pruner import make_node_filter, prune_unwanted_nodes
from camxes_postproc.algorithm.wordclass import prefix_wordclass
from camxes_postproc.formatting import (
    encode_tree,
    flatten_to_text,
    prettify_brackets,
)
from camxes_postproc.tree.nodes import TreeNode

logger = logging.getLogger(__name__)

__all__ = ["Postprocessor"]


class Postprocessor:
    """Runs the postprocessing pipeline for one option set.

    Example::

        from camxes_postproc.algorithm import resolve_mode
        from camxes_postproc.postprocessor import Postprocessor

        pp = Postprocessor(resolve_mode(3))
        pp.render(tree)   # "(KOhA:mi G:klama VAU)"
    """

    def __init__(self, options: OutputOptions | None = None) -> None:
        self._options: OutputOptions = (
            options if options is not None else OutputOptions()
        )
        self._is_wanted = make_node_filter(self._options)

    @property
    def options(self) -> OutputOptions:
        """The option set this postprocessor was built with."""
        return self._options

    # ------------------------------------------------------------------
    # Tree passes
    # ------------------------------------------------------------------

    def strip_morphology(self, tree: TreeNode) -> TreeNode:
        """Flatten morphology nodes unless morphology is retained."""
        if self._options.with_morphology:
            return tree
        return remove_morphology(tree)

    def process(self, tree: TreeNode) -> TreeNode:
        """Prune the tree and prefix word classes as the options require.

        Args:
            tree: A tree that already went through ``strip_morphology``.

        Returns:
            The processed tree.  An empty GROUP stands for a tree that pruned
            away entirely; a lone leaf is wrapped in a GROUP once word
            classes have been prefixed.
        """
        pruned = prune_unwanted_nodes(
            tree, self._is_wanted, with_spaces=self._options.with_spaces
        )
        if pruned is None:
            logger.debug("Tree pruned away entirely")
            return TreeNode.group()

        if self._options.with_selmaho and not self._options.with_morphology:
            pruned = prefix_wordclass(pruned)
            if pruned.is_leaf:
                pruned = TreeNode.group([pruned])
        return pruned

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, tree: TreeNode) -> str:
        """Run the whole pipeline and return the output text.

        Args:
            tree: Root of the parse tree.

        Returns:
            Indented JSON (RAW), one-line JSON (CONDENSED or JSON output),
            or prettified bracketed text.
        """
        options = self._options
        tree = self.strip_morphology(tree)

        if options.style is OutputStyle.RAW:
            return encode_tree(tree, indent=2)
        if options.style is OutputStyle.CONDENSED:
            return encode_tree(tree)

        encoded = encode_tree(self.process(tree))
        if options.with_json:
            return encoded

        text = flatten_to_text(encoded, with_node_labels=options.with_node_labels)
        return prettify_brackets(text)

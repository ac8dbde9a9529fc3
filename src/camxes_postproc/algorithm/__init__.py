"""Algorithm subpackage: option resolution and the tree passes.

Re-exports:
- OutputOptions, OutputStyle, resolve_mode: option set and mode resolver
- remove_morphology, join_leaves: morphology flattener
- prune_unwanted_nodes, make_node_filter: node pruner and its label filter
- prefix_wordclass: word-class prefixer
"""

from camxes_postproc.algorithm.config import OutputOptions, OutputStyle, resolve_mode
from camxes_postproc.algorithm.morphology import join_leaves, remove_morphology
from camxes_postproc.algorithm.pruner import make_node_filter, prune_unwanted_nodes
from camxes_postproc.algorithm.wordclass import prefix_wordclass

__all__ = [
    "OutputOptions",
    "OutputStyle",
    "join_leaves",
    "make_node_filter",
    "prefix_wordclass",
    "prune_unwanted_nodes",
    "remove_morphology",
    "resolve_mode",
]

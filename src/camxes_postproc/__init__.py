"""camxes-postproc - pruning and pretty-printing of camxes parse trees."""

from __future__ import annotations

from camxes_postproc.algorithm.config import OutputOptions, OutputStyle, resolve_mode
from camxes_postproc.api import postprocess, process_tree
from camxes_postproc.postprocessor import Postprocessor
from camxes_postproc.tree.nodes import NodeKind, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "NodeKind",
    "OutputOptions",
    "OutputStyle",
    "Postprocessor",
    "TreeNode",
    "postprocess",
    "process_tree",
    "resolve_mode",
]

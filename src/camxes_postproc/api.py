"""Public API functions for camxes-postproc.

``postprocess`` is the entry point used by parser front ends: it accepts
the parse tree as JSON text, nested lists or a TreeNode, plus a mode, and
returns the text to display.  Each call builds a fresh Postprocessor, so no
state is shared between calls.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from camxes_postproc.algorithm.config import OutputOptions, resolve_mode
from camxes_postproc.postprocessor import Postprocessor
from camxes_postproc.tree.builder import TreeBuilder
from camxes_postproc.tree.nodes import TreeNode

logger = logging.getLogger(__name__)

__all__ = ["ERROR_PREFIX", "postprocess", "process_tree"]

ERROR_PREFIX = "Postprocessor error:"

_STRING_INPUT_HINT = (
    "\n\nThe postprocessor doesn't accept string inputs. "
    "Please check the parse tree produced by the parser hasn't been converted "
    "to a string before being passed to the postprocessor."
)


def _input_type_error(value: Any) -> str:
    message = (
        f"{ERROR_PREFIX} invalid input type for the first argument. "
        f"It should be of type 'list', but the argument given is of type "
        f"'{type(value).__name__}'."
    )
    if isinstance(value, str):
        message += _STRING_INPUT_HINT
    return message


def postprocess(tree_input: Any, mode: Any = 0) -> str:
    """Postprocess a parse tree and return its rendering.

    Args:
        tree_input: The parse tree, either as JSON text, as the parser's
            nested lists, or as a TreeNode.
        mode: Output mode, numeric (0-31) or flag letters; see
            ``resolve_mode``.  Unrecognized values mean level 0.

    Returns:
        The rendered tree, or a diagnostic starting with ``ERROR_PREFIX``
        when ``tree_input`` is not tree shaped.

    Raises:
        TypeError: If the nested lists contain something other than strings
            and lists.
    """
    if isinstance(tree_input, str):
        try:
            tree_input = json.loads(tree_input)
        except json.JSONDecodeError as exc:
            logger.warning("Parse tree is not valid JSON: %s", exc)
            return _input_type_error(tree_input)

    if isinstance(tree_input, TreeNode):
        tree = tree_input
    elif isinstance(tree_input, list):
        tree = TreeBuilder().build(tree_input)
    else:
        logger.warning("Rejected parse tree of type %s", type(tree_input).__name__)
        return _input_type_error(tree_input)

    return Postprocessor(resolve_mode(mode)).render(tree)


def process_tree(tree: TreeNode, options: OutputOptions | None = None) -> TreeNode:
    """Run the tree passes only and return the processed tree.

    Args:
        tree: Root of the parse tree.  It is not modified.
        options: Option set; defaults to ``OutputOptions()``.

    Returns:
        The morphology-stripped (unless retained), pruned and prefixed tree.
    """
    postprocessor = Postprocessor(options)
    return postprocessor.process(postprocessor.strip_morphology(tree))

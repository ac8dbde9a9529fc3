"""Serialisation and text rendering of postprocessed trees.

The prettified rendering is produced from the compact JSON text rather
than from the tree: quotes and commas are stripped, whitespace and bridi
labels are rewritten, and finally every bracket pair is replaced by a glyph
chosen from its nesting depth.

Bracket cycle, by depth::

    0 ( )   1 [ ]   2 { }   3 < >   4 (¹ ¹)   5 [ ]   ...   8 (² ²)

A superscript tier numeral marks each return to ``(`` after the first, so
deep nesting stays readable.
"""

from __future__ import annotations

import json
import re

from camxes_postproc.tree.builder import to_wire
from camxes_postproc.tree.nodes import TreeNode

OPEN_BRACKETS = "([{<"
CLOSE_BRACKETS = ")]}>"

_SUPERSCRIPT_DIGITS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")

# "spaces" or "initial_spaces" as a whole token between delimiters
_SPACES_TOKEN = re.compile(r"([ \[\],])(?:initial_)?spaces(?=[ \[\],])")

# Bridi structure tags, applied to the opening bracket of the labeled node
NODE_LABEL_TAGS: tuple[tuple[str, str], ...] = (
    ("[prenex ", "[PRENEX: "),
    ("[sentence ", "[BRIDI: "),
    ("[selbri ", "[SELBRI: "),
    ("[sumti ", "[SUMTI: "),
)


def encode_tree(node: TreeNode, indent: int | None = None) -> str:
    """Serialise a tree to JSON.

    Args:
        node: Root of the tree.
        indent: Indentation width; None gives the compact one-line form.

    Returns:
        The JSON text.  Non-ASCII characters are written as is.
    """
    if indent is None:
        return json.dumps(to_wire(node), ensure_ascii=False, separators=(",", ":"))
    return json.dumps(to_wire(node), ensure_ascii=False, indent=indent)


def flatten_to_text(encoded: str, with_node_labels: bool = False) -> str:
    """Strip JSON syntax from compact tree text and rewrite special labels.

    Args:
        encoded: Compact JSON produced by ``encode_tree``.
        with_node_labels: Replace bridi structure labels with their tags.

    Returns:
        Space-separated bracketed text, brackets not yet prettified.
    """
    text = encoded.replace('"', "").replace(",", " ")
    text = _SPACES_TOKEN.sub(r"\1_", text)
    if with_node_labels:
        for label, tag in NODE_LABEL_TAGS:
            text = text.replace(label, tag)
    return text


def tier_numeral(depth: int) -> str:
    """Return the superscript tier numeral for a nesting depth, or ``""``."""
    if depth and not depth % len(OPEN_BRACKETS):
        return str(depth // len(OPEN_BRACKETS)).translate(_SUPERSCRIPT_DIGITS)
    return ""


def prettify_brackets(text: str) -> str:
    """Replace square brackets with depth-cycled glyphs and tier numerals.

    Args:
        text: Text containing balanced ``[`` and ``]``.

    Returns:
        The text with each bracket replaced.  An opening glyph is followed
        by its tier numeral and a closing glyph is preceded by it.
    """
    parts: list[str] = []
    depth = 0
    for char in text:
        if char == "[":
            glyph = OPEN_BRACKETS[depth % len(OPEN_BRACKETS)]
            parts.append(glyph + tier_numeral(depth))
            depth += 1
        elif char == "]":
            depth -= 1
            glyph = CLOSE_BRACKETS[depth % len(CLOSE_BRACKETS)]
            parts.append(tier_numeral(depth) + glyph)
        else:
            parts.append(char)
    return "".join(parts)

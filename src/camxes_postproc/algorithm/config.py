"""OutputOptions, OutputStyle and the mode resolver.

OutputOptions is a frozen (immutable) dataclass holding the six switches
that drive one postprocessing run.  OutputStyle selects between the two
untouched JSON renderings and the prettified text rendering.

``resolve_mode`` maps the caller's mode (numeric bit flags or a string of
letter flags) onto an OutputOptions.  It is pure, so both resolution paths
are memoised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from cachetools import LRUCache, cached

logger = logging.getLogger(__name__)

SPACES_BIT = 8
MORPHOLOGY_BIT = 16


class OutputStyle(StrEnum):
    """How the postprocessed tree is rendered.

    - RAW:        Indented JSON of the (morphology-stripped) tree, level 0.
    - CONDENSED:  One-line JSON of the (morphology-stripped) tree, level 1.
    - PRETTIFIED: Pruned tree rendered as bracketed text, levels 2-7.
    """

    RAW = auto()
    CONDENSED = auto()
    PRETTIFIED = auto()


@dataclass(frozen=True, slots=True)
class OutputOptions:
    """Immutable option set for one postprocessing run.

    Attributes:
        with_spaces: Keep whitespace nodes, rendered as ``_``.
        with_morphology: Keep the letter-level structure of words.
        with_node_labels: Keep prenex/sentence/selbri/sumti nodes and tag them.
        with_selmaho: Keep terminal category labels.
        with_terminators: Keep elided clause terminators (label-only nodes).
        with_json: Return the processed tree as JSON instead of text.
        style: Rendering style (see OutputStyle).
    """

    with_spaces: bool = False
    with_morphology: bool = False
    with_node_labels: bool = False
    with_selmaho: bool = False
    with_terminators: bool = False
    with_json: bool = False
    style: OutputStyle = OutputStyle.PRETTIFIED


def resolve_mode(mode: Any) -> OutputOptions:
    """Return the OutputOptions selected by ``mode``.

    Args:
        mode: Either a string of flag letters (``S`` spaces, ``M``
            morphology, ``N`` node labels, ``C`` selma'o, ``T`` terminators,
            ``J`` JSON, ``R`` raw) or a number in 0-31 where bit 8 keeps
            spaces, bit 16 keeps morphology and ``mode % 8`` is the
            verbosity level.  Anything else resolves to level 0.

    Returns:
        A frozen OutputOptions.
    """
    if isinstance(mode, str):
        return _resolve_flags(mode)

    # bool MUST be rejected before the int check: bool subclasses int
    if isinstance(mode, bool):
        logger.debug("Boolean mode %r treated as level 0", mode)
        return _resolve_level(0)

    if isinstance(mode, float) and mode.is_integer():
        mode = int(mode)

    if not isinstance(mode, int) or mode < 0:
        logger.debug("Unrecognized mode %r treated as level 0", mode)
        return _resolve_level(0)

    return _resolve_level(mode)


@cached(cache=LRUCache(maxsize=64))
def _resolve_flags(flags: str) -> OutputOptions:
    return OutputOptions(
        with_spaces="S" in flags,
        with_morphology="M" in flags,
        with_node_labels="N" in flags,
        with_selmaho="C" in flags,
        with_terminators="T" in flags,
        with_json="J" in flags,
        style=OutputStyle.CONDENSED if "R" in flags else OutputStyle.PRETTIFIED,
    )


@cached(cache=LRUCache(maxsize=64))
def _resolve_level(mode: int) -> OutputOptions:
    level = mode % 8
    if level == 0:
        style = OutputStyle.RAW
    elif level == 1:
        style = OutputStyle.CONDENSED
    else:
        style = OutputStyle.PRETTIFIED
    return OutputOptions(
        with_spaces=bool(mode & SPACES_BIT),
        with_morphology=bool(mode & MORPHOLOGY_BIT),
        with_node_labels=level in (4, 7),
        with_selmaho=level not in (2, 5),
        with_terminators=level < 5,
        with_json=False,
        style=style,
    )

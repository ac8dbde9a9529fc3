"""Shared parse trees for the test suite.

MI_KLAMA is a cut-down camxes parse of "mi klama": letters sit in their own
labeled nodes, the pronoun is followed by a whitespace node and the bridi
ends with an elided VAU terminator.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from camxes_postproc.tree.builder import TreeBuilder
from camxes_postproc.tree.nodes import TreeNode

MI_KLAMA: list[Any] = [
    "text",
    [
        "sentence",
        ["sumti", ["KOhA_clause", ["KOhA", ["m", "m"], ["i", "i"]], ["spaces", " "]]],
        [
            "selbri",
            [
                "BRIVLA_clause",
                ["gismu", ["k", "k"], ["l", "l"], ["a", "a"], ["m", "m"], ["a", "a"]],
            ],
        ],
        ["VAU"],
    ],
]

# MI_KLAMA after the morphology flattener
MI_KLAMA_FLAT: list[Any] = [
    "text",
    [
        "sentence",
        ["sumti", ["KOhA_clause", ["KOhA", "mi"], ["spaces", " "]]],
        ["selbri", ["BRIVLA_clause", ["gismu", "klama"]]],
        ["VAU"],
    ],
]


@pytest.fixture
def mi_klama_wire() -> list[Any]:
    """A fresh copy of the MI_KLAMA wire tree (safe to mutate)."""
    return copy.deepcopy(MI_KLAMA)


@pytest.fixture
def mi_klama() -> TreeNode:
    """MI_KLAMA as a TreeNode tree."""
    return TreeBuilder().build(MI_KLAMA)


@pytest.fixture
def mi_klama_flat() -> TreeNode:
    """MI_KLAMA_FLAT as a TreeNode tree."""
    return TreeBuilder().build(MI_KLAMA_FLAT)


@pytest.fixture
def mi_klama_flat_wire() -> list[Any]:
    """A fresh copy of the MI_KLAMA_FLAT wire tree."""
    return copy.deepcopy(MI_KLAMA_FLAT)

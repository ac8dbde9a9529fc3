"""Tests for the Postprocessor orchestrator."""

from __future__ import annotations

from typing import Any

from camxes_postproc.algorithm.config import OutputOptions, OutputStyle
from camxes_postproc.postprocessor import Postprocessor
from camxes_postproc.tree.builder import TreeBuilder, to_wire
from camxes_postproc.tree.nodes import TreeNode


class TestConstruction:
    """Tests for Postprocessor construction."""

    def test_default_options(self) -> None:
        assert Postprocessor().options == OutputOptions()

    def test_options_kept(self) -> None:
        options = OutputOptions(with_selmaho=True)
        assert Postprocessor(options).options is options


class TestPasses:
    """Tests for strip_morphology and process."""

    def test_strip_morphology(
        self, mi_klama: TreeNode, mi_klama_flat_wire: list[Any]
    ) -> None:
        assert to_wire(Postprocessor().strip_morphology(mi_klama)) == mi_klama_flat_wire

    def test_morphology_retained(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(with_morphology=True))
        assert pp.strip_morphology(mi_klama) is mi_klama

    def test_tree_pruned_away_becomes_empty_group(self) -> None:
        tree = TreeBuilder().build(["text", ["spaces", " "], ["VAU"]])
        assert Postprocessor().process(tree) == TreeNode.group()

    def test_lone_prefixed_leaf_wrapped(self) -> None:
        tree = TreeBuilder().build(["KOhA", "mi"])
        result = Postprocessor(OutputOptions(with_selmaho=True)).process(tree)
        assert result == TreeNode.group([TreeNode.leaf("KOhA:mi")])

    def test_lone_leaf_not_wrapped_without_selmaho(self) -> None:
        tree = TreeBuilder().build(["KOhA", "mi"])
        assert Postprocessor().process(tree) == TreeNode.leaf("mi")

    def test_no_prefix_with_morphology(self) -> None:
        tree = TreeBuilder().build(["sumti", ["KOhA", "mi"], ["KOhA", "do"]])
        options = OutputOptions(with_selmaho=True, with_morphology=True)
        assert to_wire(Postprocessor(options).process(tree)) == [
            ["KOhA", "mi"],
            ["KOhA", "do"],
        ]


class TestRender:
    """Tests for render."""

    def test_raw(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(style=OutputStyle.RAW))
        assert pp.render(mi_klama).startswith('[\n  "text",')

    def test_condensed(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(style=OutputStyle.CONDENSED))
        assert pp.render(mi_klama).startswith('["text",["sentence",')

    def test_json_output(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(with_json=True, with_terminators=True))
        assert pp.render(mi_klama) == '["mi","klama","VAU"]'

    def test_prettified(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(with_selmaho=True))
        assert pp.render(mi_klama) == "(KOhA:mi G:klama)"

    def test_reusable(self, mi_klama: TreeNode) -> None:
        pp = Postprocessor(OutputOptions(with_selmaho=True))
        assert pp.render(mi_klama) == pp.render(mi_klama)

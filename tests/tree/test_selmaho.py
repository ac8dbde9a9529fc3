"""Tests for the selma'o classifier."""

from __future__ import annotations

from typing import Any

import pytest

from camxes_postproc.tree.selmaho import is_selmaho


class TestAccepted:
    """Names built from lead consonant, vowel cores and h-groups."""

    @pytest.mark.parametrize(
        "name",
        ["KOhA", "PA", "ZAhO", "BAI", "NAI", "GIhA", "FAhA", "LAhE", "LOhU",
         "CEhE", "VAU", "KU", "UI", "IA", "Y", "BY", "A", "AI", "COI", "DOI",
         "ZOI", "JOI", "BU", "ZIhE", "NIhO"],
    )
    def test_selmaho_names(self, name: str) -> None:
        assert is_selmaho(name)

    def test_unlisted_but_well_formed_name(self) -> None:
        """Recognition is structural: an invented name is accepted."""
        assert is_selmaho("ZAhOhAIhU")


class TestRejected:
    """Anything that does not match the whole pattern."""

    @pytest.mark.parametrize(
        "name",
        ["XYZ", "AhX", "", "koha", "KOh", "hA", "KOHA", "gismu", "KOhA_clause",
         "QA", "KKA", "KOhAh", "AAA", " KOhA", "KOhA "],
    )
    def test_malformed_names(self, name: str) -> None:
        assert not is_selmaho(name)

    @pytest.mark.parametrize("value", [None, 5, ["KOhA"]])
    def test_non_strings(self, value: Any) -> None:
        assert not is_selmaho(value)

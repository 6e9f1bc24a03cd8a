"""Tests for Jaccard similarity."""

from __future__ import annotations

import pytest

from ubicity.domain.similarity import jaccard_similarity


class TestJaccardSimilarity:
    def test_both_empty(self) -> None:
        score = jaccard_similarity([], [])
        assert score == 0.0
        assert isinstance(score, float)

    def test_identical(self) -> None:
        assert jaccard_similarity(["a"], ["a"]) == 1.0

    def test_partial_overlap(self) -> None:
        assert jaccard_similarity(["a", "b"], ["b", "c"]) == pytest.approx(1 / 3)

    def test_disjoint(self) -> None:
        assert jaccard_similarity(["a"], ["b"]) == 0.0

    def test_one_side_empty(self) -> None:
        assert jaccard_similarity(["a", "b"], []) == 0.0

    def test_duplicates_ignored(self) -> None:
        assert jaccard_similarity(["a", "a", "b"], ["b", "b"]) == 0.5

    def test_case_sensitive(self) -> None:
        assert jaccard_similarity(["Math"], ["math"]) == 0.0

    def test_accepts_sets(self) -> None:
        assert jaccard_similarity({"a", "b"}, {"a", "b"}) == 1.0

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ([], []),
            (["a"], []),
            (["a", "b"], ["b", "c"]),
            (["x", "y", "z"], ["y"]),
            (["a", "a"], ["a", "b", "c", "d"]),
        ],
    )
    def test_commutative(self, a: list[str], b: list[str]) -> None:
        assert jaccard_similarity(a, b) == jaccard_similarity(b, a)

    def test_range(self) -> None:
        score = jaccard_similarity(["a", "b", "c"], ["c", "d"])
        assert 0.0 <= score <= 1.0

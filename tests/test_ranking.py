"""Unit tests for cosine similarity and candidate ranking."""

import math

import pytest

from ragchat.errors import ContractViolation
from ragchat.rag.models import Candidate, Document
from ragchat.rag.ranking import EPSILON, cosine_similarity, rank_candidates


def _candidate(doc_id):
    return Candidate(document=Document(doc_id, f"{doc_id} text"), snippet=f"{doc_id} text")


class TestCosineSimilarity:
    """Tests for cosine_similarity."""

    def test_identical_vectors(self):
        assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0, abs=1e-6)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_opposite_vectors(self):
        assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0, abs=1e-6)

    def test_symmetric(self):
        a = [0.3, -1.2, 4.5, 0.0]
        b = [2.0, 0.1, -0.7, 9.9]
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_zero_vector_does_not_divide_by_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0

    def test_epsilon_in_denominator(self):
        a = [3.0, 4.0]
        b = [4.0, 3.0]
        expected = 24.0 / (5.0 * 5.0 + EPSILON)
        assert cosine_similarity(a, b) == pytest.approx(expected, rel=0, abs=1e-15)

    def test_scale_invariant(self):
        a = [1.0, 2.0, 2.0]
        assert cosine_similarity(a, [x * 10 for x in a]) == pytest.approx(1.0, abs=1e-6)

    def test_dimension_mismatch_fails(self):
        with pytest.raises(ContractViolation):
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])


class TestRankCandidates:
    """Tests for rank_candidates."""

    def test_descending_order(self):
        pairs = [
            (_candidate("low"), [0.0, 1.0]),
            (_candidate("high"), [1.0, 0.0]),
            (_candidate("mid"), [1.0, 1.0]),
        ]
        ranked = rank_candidates([1.0, 0.0], pairs)
        assert [r.doc_id for r in ranked] == ["high", "mid", "low"]
        sims = [r.similarity for r in ranked]
        assert sims == sorted(sims, reverse=True)

    def test_ties_keep_input_order(self):
        pairs = [(_candidate(name), [1.0, 0.0]) for name in ["first", "second", "third"]]
        pairs.insert(1, (_candidate("best"), [1.0, 0.001]))
        ranked = rank_candidates([1.0, 0.001], pairs)
        assert [r.doc_id for r in ranked] == ["best", "first", "second", "third"]

    def test_mismatched_snippet_embedding_fails(self):
        pairs = [(_candidate("a"), [1.0, 0.0]), (_candidate("b"), [1.0])]
        with pytest.raises(ContractViolation):
            rank_candidates([1.0, 0.0], pairs)

    def test_empty(self):
        assert rank_candidates([1.0], []) == []

    def test_percent_is_clamped_for_display(self):
        ranked = rank_candidates([1.0, 0.0], [(_candidate("opposite"), [-1.0, 0.0])])
        assert ranked[0].similarity < 0
        assert ranked[0].percent == 0.0
        assert not math.isnan(ranked[0].percent)

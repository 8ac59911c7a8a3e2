"""Cosine-similarity ranking of candidates against the query embedding."""

import math
from typing import List, Sequence, Tuple

from ragchat.errors import ContractViolation
from .models import Candidate, RankedCandidate

# Keeps the denominator non-zero for zero-magnitude vectors
EPSILON = 1e-8


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """dot(a, b) / (|a| * |b| + EPSILON). The result is not clamped."""
    if len(a) != len(b):
        raise ContractViolation(
            f"Embedding dimension mismatch: {len(a)} != {len(b)}"
        )
    dot = sum(x * y for x, y in zip(a, b))
    a_mag = math.sqrt(sum(x * x for x in a))
    b_mag = math.sqrt(sum(y * y for y in b))
    return dot / (a_mag * b_mag + EPSILON)


def rank_candidates(query_embedding: Sequence[float],
                    pairs: Sequence[Tuple[Candidate, Sequence[float]]]) -> List[RankedCandidate]:
    """Score each (candidate, embedding) pair and sort by descending similarity.

    The sort is stable, so equal scores keep their input order.
    """
    ranked = [
        RankedCandidate(candidate=candidate, similarity=cosine_similarity(query_embedding, embedding))
        for candidate, embedding in pairs
    ]
    ranked.sort(key=lambda r: r.similarity, reverse=True)
    return ranked

"""Gene-overlap similarity scoring, ranking and filtering.

The similarity of a candidate to a target is the fraction of the target's
genes that the candidate also carries::

    similarity = |distinct target gene names found on candidate|
                 / |target gene names|

The denominator is always the target's gene count, so a candidate reaches
1.0 only when its genes are a superset of the target's.  A target without
genes scores every candidate 0.0.

Ranking sorts ascending (stable) and then reverses the list.  Equal scores
therefore come out in reverse fetch order; this matches the reports the
tool has always produced and is kept on purpose.
"""

from __future__ import annotations

from collections.abc import Iterable

from curatorator.models.artist import Artist, ScoredArtist


def similarity(target: Artist, candidate: Artist) -> float:
    """Score *candidate* against *target* by shared gene names."""
    target_names = target.gene_names
    if not target_names:
        return 0.0

    candidate_names = set(candidate.gene_names)
    # dict.fromkeys dedupes while keeping the target's gene order.
    shared = [name for name in dict.fromkeys(target_names) if name in candidate_names]
    return len(shared) / len(target_names)


def score_all(target: Artist, candidates: Iterable[Artist]) -> list[ScoredArtist]:
    """Pair every candidate with its similarity to *target*, keeping input order."""
    return [
        ScoredArtist(artist=candidate, similarity=similarity(target, candidate))
        for candidate in candidates
    ]


def rank_descending(scored: Iterable[ScoredArtist]) -> list[ScoredArtist]:
    """Order scored artists from most to least similar."""
    ranked = sorted(scored, key=lambda s: s.similarity)
    ranked.reverse()
    return ranked


def filter_by_minimum_similarity(
    scored: Iterable[ScoredArtist], threshold: float
) -> list[ScoredArtist]:
    """Keep scored artists whose similarity is at least *threshold*."""
    return [s for s in scored if s.similarity >= threshold]

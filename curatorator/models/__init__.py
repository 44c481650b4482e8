"""Pydantic domain models for Curatorator."""

from curatorator.models.artist import Artist, Gene, GeneCount, ScoredArtist

__all__ = ["Artist", "Gene", "GeneCount", "ScoredArtist"]

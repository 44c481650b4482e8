"""Report services: enrichment, discovery, similarity scoring and rendering."""

from curatorator.services.artist_enrichment import ArtistEnrichmentService
from curatorator.services.gene_similarity import (
    filter_by_minimum_similarity,
    rank_descending,
    score_all,
    similarity,
)
from curatorator.services.report_renderer import ReportRenderer, gene_frequency, top_genes
from curatorator.services.similarity_discovery import SimilarityDiscoveryService

__all__ = [
    "ArtistEnrichmentService",
    "ReportRenderer",
    "SimilarityDiscoveryService",
    "filter_by_minimum_similarity",
    "gene_frequency",
    "rank_descending",
    "score_all",
    "similarity",
    "top_genes",
]

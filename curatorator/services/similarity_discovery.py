"""Discovery of contemporaneous artists similar to a target artist.

Steps, strictly sequential except for one fan-out:

    1. Make sure the target has genes (enrich it if ``genes is None``).
    2. Fetch up to ``similar_count`` similar artists via the ``artists``
       relation (``similar_to_artist_id`` + ``similarity_type``).
    3. Attach genes to every candidate at once.  All lookups are issued
       together; the first failure aborts discovery and the other results
       are discarded.
    4. Score every candidate against the target and rank them.
"""

from __future__ import annotations

from curatorator.interfaces.resource_fetcher import IResourceFetcher
from curatorator.models.artist import Artist, ScoredArtist
from curatorator.providers.hal.embedded import embedded_items
from curatorator.services.artist_enrichment import ArtistEnrichmentService
from curatorator.services.gene_similarity import rank_descending, score_all
from curatorator.utils.concurrency import gather_all
from curatorator.utils.logging import get_logger

_DEFAULT_SIMILAR_COUNT = 100
_DEFAULT_SIMILARITY_TYPE = "contemporary"


class SimilarityDiscoveryService:
    """Finds, enriches and ranks artists similar to a target artist."""

    def __init__(
        self,
        fetcher: IResourceFetcher,
        enrichment: ArtistEnrichmentService,
        similar_count: int = _DEFAULT_SIMILAR_COUNT,
        similarity_type: str = _DEFAULT_SIMILARITY_TYPE,
    ) -> None:
        self._fetcher = fetcher
        self._enrichment = enrichment
        self._similar_count = similar_count
        self._similarity_type = similarity_type
        self._logger = get_logger(__name__)

    async def fetch_similar_artists(self, artist_id: str) -> list[Artist]:
        """Fetch the candidate list for *artist_id* (no genes attached)."""
        resource = await self._fetcher.fetch(
            "artists",
            {
                "similar_to_artist_id": artist_id,
                "similarity_type": self._similarity_type,
                "size": self._similar_count,
            },
        )
        items = embedded_items(resource, "artists", self._fetcher.get_provider_name())
        return [Artist.from_resource(item) for item in items]

    async def discover_similar(self, target: Artist) -> list[ScoredArtist]:
        """Return the artists similar to *target*, most similar first.

        Parameters
        ----------
        target:
            The artist to compare against.  Its genes are fetched here if
            they have not been fetched yet; callers that also need the
            enriched target should enrich it before calling.

        Returns
        -------
        list[ScoredArtist]
            The candidates in descending similarity order.

        Raises
        ------
        FetchError
            If the candidate list cannot be fetched.
        EnrichmentError
            If genes cannot be fetched for the target or any candidate.
        """
        if target.genes is None:
            target = await self._enrichment.attach_genes(target)

        candidates = await self.fetch_similar_artists(target.id)
        self._logger.info(
            "similar_artists_fetched",
            artist_id=target.id,
            candidate_count=len(candidates),
        )

        enriched = await gather_all(
            [self._enrichment.attach_genes(candidate) for candidate in candidates]
        )

        ranked = rank_descending(score_all(target, enriched))
        self._logger.info(
            "similar_artists_ranked",
            artist_id=target.id,
            candidate_count=len(ranked),
            top_similarity=ranked[0].similarity if ranked else None,
        )
        return ranked

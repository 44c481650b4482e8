"""Orchestrator for the three-phase similar-artists report.

ARCHITECTURE NOTE:
    The pipeline coordinates the services in a fixed sequence, handing each
    phase's full result to the next:

        ENRICH   - fetch the target artist and its genes
        DISCOVER - fetch, enrich, score and rank similar artists
        RENDER   - build the HTML document

    Nothing is recovered.  Any FetchError or EnrichmentError raised by a
    phase propagates out of :meth:`ReportPipeline.run` and no document is
    produced.
"""

from __future__ import annotations

import structlog

from curatorator.services.artist_enrichment import ArtistEnrichmentService
from curatorator.services.report_renderer import ReportRenderer
from curatorator.services.similarity_discovery import SimilarityDiscoveryService
from curatorator.utils.logging import get_logger


class ReportPipeline:
    """Runs enrichment, discovery and rendering for one artist.

    All service dependencies are injected at construction time.
    """

    def __init__(
        self,
        enrichment: ArtistEnrichmentService,
        discovery: SimilarityDiscoveryService,
        renderer: ReportRenderer,
    ) -> None:
        self._enrichment = enrichment
        self._discovery = discovery
        self._renderer = renderer
        self._logger: structlog.BoundLogger = get_logger(__name__)

    async def run(self, artist_id: str) -> str:
        """Produce the HTML report for *artist_id*.

        Raises
        ------
        FetchError
            If any catalog resource cannot be fetched.
        EnrichmentError
            If genes cannot be fetched for the target or a candidate.
        """
        self._logger.info("pipeline_phase", phase="ENRICH", artist_id=artist_id)
        target = await self._enrichment.enrich_artist(artist_id)

        self._logger.info("pipeline_phase", phase="DISCOVER", artist_id=artist_id)
        ranked = await self._discovery.discover_similar(target)

        self._logger.info("pipeline_phase", phase="RENDER", artist_id=artist_id)
        return self._renderer.render_document(target, ranked)

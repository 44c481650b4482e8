"""Artist enrichment: fetch an artist and attach its genes.

Every artist that takes part in similarity scoring goes through
:meth:`ArtistEnrichmentService.attach_genes` first.  Genes are requested
with one oversized page (``gene_page_size``, default 100) and never
paginated, so an artist with more genes than that is silently truncated.
"""

from __future__ import annotations

from curatorator.interfaces.resource_fetcher import IResourceFetcher
from curatorator.models.artist import Artist, Gene
from curatorator.providers.hal.embedded import embedded_items
from curatorator.utils.errors import EnrichmentError, FetchError
from curatorator.utils.logging import get_logger

_DEFAULT_GENE_PAGE_SIZE = 100


class ArtistEnrichmentService:
    """Builds gene-enriched :class:`Artist` records from the catalog API."""

    def __init__(
        self,
        fetcher: IResourceFetcher,
        gene_page_size: int = _DEFAULT_GENE_PAGE_SIZE,
    ) -> None:
        self._fetcher = fetcher
        self._gene_page_size = gene_page_size
        self._logger = get_logger(__name__)

    async def fetch_artist(self, artist_id: str) -> Artist:
        """Fetch the bare artist resource (no genes).

        Raises
        ------
        FetchError
            If the artist resource cannot be retrieved.
        """
        resource = await self._fetcher.fetch("artist", {"id": artist_id})
        return Artist.from_resource(resource)

    async def fetch_genes(self, artist_id: str) -> list[Gene]:
        """Fetch up to ``gene_page_size`` genes for *artist_id*."""
        resource = await self._fetcher.fetch(
            "genes",
            {"artist_id": artist_id, "size": self._gene_page_size},
        )
        items = embedded_items(resource, "genes", self._fetcher.get_provider_name())
        return [Gene.from_resource(item) for item in items]

    async def attach_genes(self, artist: Artist) -> Artist:
        """Return a copy of *artist* with its ``genes`` populated.

        Raises
        ------
        EnrichmentError
            If the gene lookup fails for any reason.  The message is the
            generic "Couldn't get genes"; the original error is chained.
        """
        try:
            genes = await self.fetch_genes(artist.id)
        except FetchError as exc:
            self._logger.error("genes_fetch_failed", artist_id=artist.id, error=str(exc))
            raise EnrichmentError(provider_name=exc.provider_name) from exc

        self._logger.debug("genes_attached", artist_id=artist.id, gene_count=len(genes))
        return artist.model_copy(update={"genes": genes})

    async def enrich_artist(self, artist_id: str) -> Artist:
        """Fetch the artist identified by *artist_id* and attach its genes."""
        artist = await self.fetch_artist(artist_id)
        enriched = await self.attach_genes(artist)
        self._logger.info(
            "artist_enriched",
            artist_id=artist_id,
            name=enriched.name,
            gene_count=len(enriched.genes or []),
        )
        return enriched

"""Core domain entities for the Curatorator report pipeline.

Defines Pydantic v2 models for artists, genes, scored candidates and theme
counts.  All models use frozen config: enrichment and scoring never mutate a
fetched record, they produce new objects.

Key relationships:
    - Artist carries an ordered list of Gene objects once enriched
      (``None`` until genes have been fetched).
    - ScoredArtist pairs an Artist with its similarity to one target artist.
      The score is context-dependent, so it lives on the pair, not the Artist.
    - GeneCount is one row of the "Show Themes" table.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Gene(BaseModel):
    """A curatorial/thematic tag the catalog associates with an artist.

    Treated as an opaque tag: similarity compares genes by ``name``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> Gene:
        """Build a Gene from an embedded HAL ``genes`` item."""
        return cls(id=str(resource.get("id", "")), name=resource.get("name", ""))


class Artist(BaseModel):
    """An artist as returned by the catalog API.

    ``permalink`` and ``thumbnail`` come from the resource's ``_links``
    section.  ``genes`` is ``None`` until the artist has been enriched.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    birthday: str | None = None         # Free text, e.g. "1928" or "c. 1530"
    hometown: str | None = None
    location: str | None = None
    nationality: str | None = None
    permalink: str = ""                 # artsy.net page for the artist
    thumbnail: str | None = None        # Image URL, absent for some artists
    genes: list[Gene] | None = None

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> Artist:
        """Build an Artist from a HAL artist resource.

        Empty strings in optional fields are normalised to ``None`` so the
        renderer can test presence with a plain truthiness check.
        """
        links = resource.get("_links") or {}
        return cls(
            id=str(resource.get("id", "")),
            name=resource.get("name", ""),
            birthday=resource.get("birthday") or None,
            hometown=resource.get("hometown") or None,
            location=resource.get("location") or None,
            nationality=resource.get("nationality") or None,
            permalink=(links.get("permalink") or {}).get("href", ""),
            thumbnail=(links.get("thumbnail") or {}).get("href") or None,
        )

    @property
    def gene_names(self) -> list[str]:
        """Names of this artist's genes in fetch order (empty if not enriched)."""
        return [gene.name for gene in self.genes or []]


class ScoredArtist(BaseModel):
    """A candidate artist paired with its similarity to a target artist."""

    model_config = ConfigDict(frozen=True)

    artist: Artist
    similarity: float = Field(ge=0.0, le=1.0)


class GeneCount(BaseModel):
    """How many artists in a collection carry a given gene."""

    model_config = ConfigDict(frozen=True)

    gene: str
    count: int

"""Shared pytest fixtures for the Curatorator test suite."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from curatorator.interfaces.resource_fetcher import IResourceFetcher
from curatorator.models.artist import Artist, Gene
from curatorator.utils.errors import FetchError
from curatorator.utils.logging import configure_logging

API_ROOT = "https://api.test/api"


@pytest.fixture(autouse=True)
def _fresh_logging() -> None:
    """Re-point structlog at the current stderr before every test.

    The CLI tests reconfigure logging while capsys owns stderr; later tests
    must not write to that closed stream.
    """
    configure_logging(log_level="INFO")


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_artist() -> Callable[..., Artist]:
    """Factory for Artist models; ``genes`` is a list of gene names."""

    def _make(
        artist_id: str,
        name: str | None = None,
        genes: list[str] | None = None,
        **fields: Any,
    ) -> Artist:
        gene_models = None
        if genes is not None:
            gene_models = [Gene(id=g.lower().replace(" ", "-"), name=g) for g in genes]
        return Artist(
            id=artist_id,
            name=name or artist_id.title(),
            permalink=fields.pop("permalink", f"https://www.artsy.net/artist/{artist_id}"),
            genes=gene_models,
            **fields,
        )

    return _make


def artist_resource(
    artist_id: str,
    name: str,
    thumbnail: str | None = None,
    **fields: Any,
) -> dict[str, Any]:
    """A HAL artist resource shaped like the Artsy API's."""
    links: dict[str, Any] = {
        "self": {"href": f"{API_ROOT}/artists/{artist_id}"},
        "permalink": {"href": f"https://www.artsy.net/artist/{artist_id}"},
    }
    if thumbnail:
        links["thumbnail"] = {"href": thumbnail}
    return {"id": artist_id, "name": name, "_links": links, **fields}


def genes_resource(names: list[str]) -> dict[str, Any]:
    """A HAL genes collection resource."""
    return {
        "total_count": None,
        "_embedded": {
            "genes": [{"id": n.lower().replace(" ", "-"), "name": n} for n in names],
        },
    }


def artists_resource(artists: list[dict[str, Any]]) -> dict[str, Any]:
    """A HAL artists collection resource."""
    return {"_embedded": {"artists": artists}}


# ---------------------------------------------------------------------------
# Fake catalog behind IResourceFetcher
# ---------------------------------------------------------------------------


class FakeCatalog:
    """In-memory stand-in for the catalog, answering ``fetch(relation, params)``.

    ``failing_genes`` lists artist ids whose gene lookup raises FetchError.
    """

    def __init__(self) -> None:
        self.artists: dict[str, dict[str, Any]] = {}
        self.genes: dict[str, list[str]] = {}
        self.similar: dict[str, list[str]] = {}
        self.failing_genes: set[str] = set()

    def add_artist(self, artist_id: str, name: str, genes: list[str], **fields: Any) -> None:
        self.artists[artist_id] = artist_resource(artist_id, name, **fields)
        self.genes[artist_id] = genes

    async def fetch(self, relation: str, params: dict[str, Any]) -> dict[str, Any]:
        if relation == "artist":
            if params["id"] not in self.artists:
                raise FetchError(f"artist {params['id']} not found", provider_name="fake")
            return self.artists[params["id"]]
        if relation == "genes":
            artist_id = params["artist_id"]
            if artist_id in self.failing_genes:
                raise FetchError("HTTP 500", provider_name="fake")
            return genes_resource(self.genes.get(artist_id, []))
        if relation == "artists":
            ids = self.similar.get(params["similar_to_artist_id"], [])
            return artists_resource([self.artists[i] for i in ids[: int(params["size"])]])
        raise FetchError(f"Relation '{relation}' not found", provider_name="fake")


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def mock_fetcher(fake_catalog: FakeCatalog) -> IResourceFetcher:
    """Mock IResourceFetcher whose fetch() is served by ``fake_catalog``."""
    mock = MagicMock(spec=IResourceFetcher)
    mock.get_provider_name.return_value = "fake"
    mock.fetch = AsyncMock(side_effect=fake_catalog.fetch)
    return mock


# ---------------------------------------------------------------------------
# Fake HAL API over httpx.MockTransport
# ---------------------------------------------------------------------------


def hal_root() -> dict[str, Any]:
    """Root resource advertising the artist, artists and genes relations."""
    return {
        "_links": {
            "artist": {"href": f"{API_ROOT}/artists/{{id}}", "templated": True},
            "artists": {
                "href": f"{API_ROOT}/artists{{?similar_to_artist_id,similarity_type,size}}",
                "templated": True,
            },
            "genes": {"href": f"{API_ROOT}/genes{{?artist_id,size}}", "templated": True},
            "self": {"href": API_ROOT},
        }
    }


def catalog_transport(catalog: FakeCatalog, requests: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """MockTransport serving ``catalog`` through HAL URLs rooted at API_ROOT."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        path = request.url.path
        params = request.url.params

        if path == "/api":
            return httpx.Response(200, json=hal_root())
        if path.startswith("/api/artists/"):
            artist_id = path.rsplit("/", 1)[-1]
            if artist_id not in catalog.artists:
                return httpx.Response(404, json={"type": "error", "message": "Artist Not Found"})
            return httpx.Response(200, json=catalog.artists[artist_id])
        if path == "/api/artists":
            ids = catalog.similar.get(params["similar_to_artist_id"], [])[: int(params["size"])]
            return httpx.Response(200, json=artists_resource([catalog.artists[i] for i in ids]))
        if path == "/api/genes":
            artist_id = params["artist_id"]
            if artist_id in catalog.failing_genes:
                return httpx.Response(500, json={"type": "error"})
            return httpx.Response(200, json=genes_resource(catalog.genes.get(artist_id, [])))
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def test_config() -> dict[str, Any]:
    """Resolved configuration pointing at the fake API root."""
    return {
        "report": {
            "artist_id": "warhol",
            "similar_count": 100,
            "similarity_type": "contemporary",
            "gene_page_size": 100,
            "min_similarity": 0.1,
            "min_theme_count": 10,
            "title": "Curatorator",
        },
        "api": {
            "root": API_ROOT,
            "xapp_token": "test-token",
            "accept": "application/vnd.artsy-v2+json",
            "timeout": 5.0,
        },
        "logging": {"level": "INFO", "json": False},
    }

"""Unit tests for HALResourceFetcher over httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from curatorator.providers.hal.embedded import embedded_items
from curatorator.providers.hal.hal_fetcher import HALResourceFetcher
from curatorator.utils.errors import FetchError
from tests.conftest import API_ROOT, catalog_transport


def _fetcher(transport: httpx.MockTransport, token: str = "test-token") -> HALResourceFetcher:
    client = httpx.AsyncClient(transport=transport)
    return HALResourceFetcher(http_client=client, api_root=API_ROOT, xapp_token=token)


@pytest.fixture()
def catalog(fake_catalog):
    fake_catalog.add_artist("warhol", "Andy Warhol", ["Pop Art"])
    fake_catalog.add_artist("haring", "Keith Haring", ["Pop Art", "Graffiti"])
    fake_catalog.similar["warhol"] = ["haring"]
    return fake_catalog


# ======================================================================
# Relation navigation
# ======================================================================


class TestFetch:
    @pytest.mark.asyncio
    async def test_fetches_root_then_expanded_relation(self, catalog) -> None:
        requests: list[httpx.Request] = []
        fetcher = _fetcher(catalog_transport(catalog, requests))

        resource = await fetcher.fetch("artist", {"id": "warhol"})

        assert resource["name"] == "Andy Warhol"
        assert [str(r.url) for r in requests] == [
            API_ROOT,
            f"{API_ROOT}/artists/warhol",
        ]

    @pytest.mark.asyncio
    async def test_query_template_expansion(self, catalog) -> None:
        requests: list[httpx.Request] = []
        fetcher = _fetcher(catalog_transport(catalog, requests))

        resource = await fetcher.fetch(
            "artists",
            {"similar_to_artist_id": "warhol", "similarity_type": "contemporary", "size": 100},
        )

        assert [a["id"] for a in embedded_items(resource, "artists")] == ["haring"]
        params = requests[-1].url.params
        assert params["similar_to_artist_id"] == "warhol"
        assert params["similarity_type"] == "contemporary"
        assert params["size"] == "100"

    @pytest.mark.asyncio
    async def test_unset_template_variables_are_dropped(self, catalog) -> None:
        requests: list[httpx.Request] = []
        fetcher = _fetcher(catalog_transport(catalog, requests))

        await fetcher.fetch("genes", {"artist_id": "warhol"})

        assert "size" not in requests[-1].url.params
        assert requests[-1].url.params["artist_id"] == "warhol"

    @pytest.mark.asyncio
    async def test_every_request_carries_api_headers(self, catalog) -> None:
        requests: list[httpx.Request] = []
        fetcher = _fetcher(catalog_transport(catalog, requests), token="secret-token")

        await fetcher.fetch("genes", {"artist_id": "warhol", "size": 100})

        assert len(requests) == 2
        for request in requests:
            assert request.headers["X-Xapp-Token"] == "secret-token"
            assert request.headers["Accept"] == "application/vnd.artsy-v2+json"

    @pytest.mark.asyncio
    async def test_non_templated_link_used_verbatim(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path == "/api":
                return httpx.Response(
                    200, json={"_links": {"status": {"href": f"{API_ROOT}/status"}}}
                )
            return httpx.Response(200, json={"ping": True})

        fetcher = _fetcher(httpx.MockTransport(handler))
        resource = await fetcher.fetch("status", {"ignored": "x"})

        assert resource == {"ping": True}
        assert str(requests[-1].url) == f"{API_ROOT}/status"

    def test_provider_name(self, catalog) -> None:
        assert _fetcher(catalog_transport(catalog)).get_provider_name() == "artsy"


# ======================================================================
# Failures
# ======================================================================


class TestFetchFailures:
    @pytest.mark.asyncio
    async def test_unknown_relation(self, catalog) -> None:
        fetcher = _fetcher(catalog_transport(catalog))
        with pytest.raises(FetchError, match="Relation 'shows' not found"):
            await fetcher.fetch("shows", {})

    @pytest.mark.asyncio
    async def test_http_error_status(self, catalog) -> None:
        fetcher = _fetcher(catalog_transport(catalog))
        with pytest.raises(FetchError, match="HTTP 404") as exc_info:
            await fetcher.fetch("artist", {"id": "nobody"})
        assert exc_info.value.provider_name == "artsy"
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_server_error_on_genes(self, catalog) -> None:
        catalog.failing_genes.add("warhol")
        fetcher = _fetcher(catalog_transport(catalog))
        with pytest.raises(FetchError, match="HTTP 500"):
            await fetcher.fetch("genes", {"artist_id": "warhol", "size": 100})

    @pytest.mark.asyncio
    async def test_root_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = _fetcher(httpx.MockTransport(handler))
        with pytest.raises(FetchError, match="failed"):
            await fetcher.fetch("artist", {"id": "warhol"})

    @pytest.mark.asyncio
    async def test_unauthorized_token(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"type": "auth_error", "message": "Unauthorized"})

        fetcher = _fetcher(httpx.MockTransport(handler), token="")
        with pytest.raises(FetchError, match="HTTP 401"):
            await fetcher.fetch("artist", {"id": "warhol"})

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        fetcher = _fetcher(httpx.MockTransport(handler))
        with pytest.raises(FetchError, match="did not return JSON"):
            await fetcher.fetch("artist", {"id": "warhol"})

    @pytest.mark.asyncio
    async def test_non_object_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["not", "a", "resource"])

        fetcher = _fetcher(httpx.MockTransport(handler))
        with pytest.raises(FetchError, match="non-object"):
            await fetcher.fetch("artist", {"id": "warhol"})


# ======================================================================
# embedded_items
# ======================================================================


class TestEmbeddedItems:
    def test_returns_collection(self) -> None:
        resource = {"_embedded": {"genes": [{"id": "pop-art", "name": "Pop Art"}]}}
        assert embedded_items(resource, "genes") == [{"id": "pop-art", "name": "Pop Art"}]

    def test_empty_collection(self) -> None:
        assert embedded_items({"_embedded": {"artists": []}}, "artists") == []

    def test_missing_section(self) -> None:
        with pytest.raises(FetchError, match="no embedded 'genes'") as exc_info:
            embedded_items({"_links": {}}, "genes", provider_name="artsy")
        assert exc_info.value.provider_name == "artsy"

    def test_wrong_key(self) -> None:
        with pytest.raises(FetchError):
            embedded_items({"_embedded": {"artists": []}}, "genes")

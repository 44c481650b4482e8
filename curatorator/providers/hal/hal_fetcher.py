"""HAL+JSON resource fetcher for the Artsy API.

Implements :class:`IResourceFetcher` by navigating the API the hypermedia
way: every fetch starts at the API root, looks up the named relation in its
``_links`` section, expands the relation's RFC 6570 URI template with the
caller's parameters and GETs the result.  No paths are hardcoded.

Every request carries the static ``X-Xapp-Token`` header and the
``application/vnd.artsy-v2+json`` accept header.  There is no caching of
the root resource and no retry; any failure raises :class:`FetchError`.
"""

from __future__ import annotations

from typing import Any

import httpx
import uritemplate

from curatorator.interfaces.resource_fetcher import IResourceFetcher
from curatorator.utils.errors import FetchError
from curatorator.utils.logging import get_logger

_PROVIDER_NAME = "artsy"
_TOKEN_HEADER = "X-Xapp-Token"


class HALResourceFetcher(IResourceFetcher):
    """Follows named relations from a HAL API root.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` for testability and connection pooling.
    api_root:
        URL of the API root resource, e.g. ``https://api.artsy.net/api``.
    xapp_token:
        Static API token sent with every request.
    accept:
        Media type requested via the ``Accept`` header.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_root: str,
        xapp_token: str,
        accept: str = "application/vnd.artsy-v2+json",
    ) -> None:
        self._http = http_client
        self._api_root = api_root
        self._headers = {
            _TOKEN_HEADER: xapp_token,
            "Accept": accept,
        }
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _get_json(self, url: str) -> dict[str, Any]:
        """GET *url* with the API headers and decode the JSON body."""
        try:
            response = await self._http.get(url, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._logger.error(
                "hal_fetch_http_error",
                url=url,
                status=exc.response.status_code,
            )
            raise FetchError(
                message=f"GET {url} returned HTTP {exc.response.status_code}",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPError as exc:
            self._logger.error("hal_fetch_failed", url=url, error=str(exc))
            raise FetchError(
                message=f"GET {url} failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise FetchError(
                message=f"GET {url} did not return JSON",
                provider_name=self.get_provider_name(),
            ) from exc

        if not isinstance(body, dict):
            raise FetchError(
                message=f"GET {url} returned a non-object resource",
                provider_name=self.get_provider_name(),
            )
        return body

    def _resolve_link(self, root: dict[str, Any], relation: str, params: dict[str, Any]) -> str:
        """Find *relation* in the root's ``_links`` and expand its template."""
        link = (root.get("_links") or {}).get(relation)
        if not isinstance(link, dict) or "href" not in link:
            raise FetchError(
                message=f"Relation '{relation}' not found at {self._api_root}",
                provider_name=self.get_provider_name(),
            )

        href = link["href"]
        if not link.get("templated", False):
            return href
        # uritemplate drops unset variables and percent-encodes values.
        return uritemplate.expand(href, {k: str(v) for k, v in params.items()})

    # ------------------------------------------------------------------
    # IResourceFetcher implementation
    # ------------------------------------------------------------------

    async def fetch(self, relation: str, params: dict[str, Any]) -> dict[str, Any]:
        """Follow *relation* from the API root and return the resource."""
        root = await self._get_json(self._api_root)
        url = self._resolve_link(root, relation, params)
        resource = await self._get_json(url)

        self._logger.debug("hal_fetch_complete", relation=relation, url=url)
        return resource

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

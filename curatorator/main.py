"""Curatorator composition root.

Wires the HAL fetcher, services and renderer into a :class:`ReportPipeline`
from explicit settings.  Nothing here is a module-level singleton: the API
token and root URL are passed into the fetcher's constructor, so tests can
point the whole pipeline at a fake endpoint.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from curatorator.config.loader import load_config
from curatorator.config.settings import Settings
from curatorator.pipeline.report_pipeline import ReportPipeline
from curatorator.providers.hal.hal_fetcher import HALResourceFetcher
from curatorator.services.artist_enrichment import ArtistEnrichmentService
from curatorator.services.report_renderer import ReportRenderer
from curatorator.services.similarity_discovery import SimilarityDiscoveryService
from curatorator.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


def build_pipeline(
    config: dict[str, Any] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Construct every component needed for a report run.

    Parameters
    ----------
    config:
        Resolved configuration (see :func:`load_config`).  Loaded from
        ``config/config.yaml`` and the environment when omitted.
    http_client:
        Shared HTTP client.  A new one is created when omitted; the caller
        owns closing it either way (``components["http_client"]``).

    Returns
    -------
    dict[str, Any]
        Flat dict of named components, including ``"pipeline"``.
    """
    if config is None:
        config = load_config(settings=Settings())

    api = config["api"]
    report = config["report"]

    if http_client is None:
        http_client = httpx.AsyncClient(timeout=api.get("timeout", 30.0))

    fetcher = HALResourceFetcher(
        http_client=http_client,
        api_root=api["root"],
        xapp_token=api["xapp_token"],
        accept=api["accept"],
    )
    enrichment = ArtistEnrichmentService(
        fetcher=fetcher,
        gene_page_size=report["gene_page_size"],
    )
    discovery = SimilarityDiscoveryService(
        fetcher=fetcher,
        enrichment=enrichment,
        similar_count=report["similar_count"],
        similarity_type=report["similarity_type"],
    )
    renderer = ReportRenderer(
        title=report["title"],
        min_similarity=report["min_similarity"],
        min_theme_count=report["min_theme_count"],
    )
    pipeline = ReportPipeline(
        enrichment=enrichment,
        discovery=discovery,
        renderer=renderer,
    )

    return {
        "http_client": http_client,
        "fetcher": fetcher,
        "enrichment": enrichment,
        "discovery": discovery,
        "renderer": renderer,
        "pipeline": pipeline,
    }


async def run_report(
    artist_id: str | None = None,
    config: dict[str, Any] | None = None,
) -> str:
    """Build the pipeline, run it for one artist and return the HTML.

    ``artist_id`` defaults to ``report.artist_id`` from the config.
    The shared HTTP client is closed before returning, also on failure.
    """
    if config is None:
        config = load_config(settings=Settings())

    components = build_pipeline(config)
    target_id = artist_id or config["report"]["artist_id"]

    _logger.info("report_started", artist_id=target_id, api_root=config["api"]["root"])
    try:
        return await components["pipeline"].run(target_id)
    finally:
        await components["http_client"].aclose()

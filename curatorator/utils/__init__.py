"""Utility modules for Curatorator.

Available utility modules (all re-exported here for convenience):

- **errors** -- Domain-specific exception hierarchy rooted at CuratoratorError;
  fetch and enrichment failures each raise their own subclass.
- **concurrency** -- asyncio fan-out helper with first-error-wins semantics,
  used to fetch genes for every similar artist at once.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Async concurrency helpers ---------------------------------------------
from curatorator.utils.concurrency import gather_all

# -- Domain exception hierarchy --------------------------------------------
from curatorator.utils.errors import (
    ConfigurationError,
    CuratoratorError,
    EnrichmentError,
    FetchError,
)

# -- Structured logging setup ----------------------------------------------
from curatorator.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "CuratoratorError",
    "EnrichmentError",
    "FetchError",
    "configure_logging",
    "gather_all",
    "get_logger",
]

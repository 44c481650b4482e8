"""Public interface definitions for external services.

The catalog API is reached exclusively through :class:`IResourceFetcher`.
The concrete HAL adapter lives in ``curatorator/providers/hal/`` and is
wired up in ``curatorator/main.py``; tests inject ``MagicMock(spec=...)``
doubles instead.
"""

from curatorator.interfaces.resource_fetcher import IResourceFetcher

__all__ = ["IResourceFetcher"]

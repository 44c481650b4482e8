"""Hypermedia (HAL+JSON) provider implementations."""

from curatorator.providers.hal.hal_fetcher import HALResourceFetcher

__all__ = ["HALResourceFetcher"]

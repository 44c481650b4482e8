"""Helpers for reading HAL ``_embedded`` collections."""

from __future__ import annotations

from typing import Any

from curatorator.utils.errors import FetchError


def embedded_items(resource: dict[str, Any], key: str, provider_name: str | None = None) -> list[dict[str, Any]]:
    """Return ``resource["_embedded"][key]`` or raise :class:`FetchError`.

    Collection resources (``artists``, ``genes``) wrap their members in an
    ``_embedded`` section.  A missing section means the API answered with
    something other than the expected collection.
    """
    embedded = resource.get("_embedded")
    if not isinstance(embedded, dict) or not isinstance(embedded.get(key), list):
        raise FetchError(
            message=f"Resource has no embedded '{key}' collection",
            provider_name=provider_name,
        )
    return embedded[key]

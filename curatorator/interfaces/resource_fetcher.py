"""Abstract base class for hypermedia resource fetchers.

Defines the contract the services use to reach the catalog API: follow one
named relation from the API root, substituting template parameters, and
return the decoded resource.  Services never build URLs themselves, so a
test double only has to answer ``fetch(relation, params)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IResourceFetcher(ABC):
    """Contract for following named hypermedia relations.

    Implementations attach whatever headers the API requires (token,
    content negotiation) and raise
    :class:`~curatorator.utils.errors.FetchError` on any failure.
    """

    @abstractmethod
    async def fetch(self, relation: str, params: dict[str, Any]) -> dict[str, Any]:
        """Follow *relation* from the API root and return the resource body.

        Parameters
        ----------
        relation:
            Name of the link relation in the root resource, e.g.
            ``"artist"``, ``"artists"`` or ``"genes"``.
        params:
            Values substituted into the relation's URI template.

        Returns
        -------
        dict[str, Any]
            The decoded JSON resource.

        Raises
        ------
        curatorator.utils.errors.FetchError
            On network failure, non-2xx response or unknown relation.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this fetcher, e.g. ``"artsy"``."""

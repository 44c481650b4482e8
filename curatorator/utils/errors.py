"""Custom exception hierarchy for Curatorator.

All application exceptions inherit from :class:`CuratoratorError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "artsy") caused the failure.

The hierarchy follows the report pipeline:

    CuratoratorError  (base -- catch-all for any curatorator error)
    +-- FetchError          (network / HTTP / relation-resolution failure)
    +-- EnrichmentError     (gene lookup failed for an artist)
    +-- ConfigurationError  (startup / malformed config)

Every error is fatal to a report run.  Nothing in the pipeline retries or
recovers; the CLI catches :class:`CuratoratorError` once, logs it and exits.
"""


class CuratoratorError(Exception):
    """Base exception for all Curatorator errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which external service triggered the
    error.  The ``__str__`` method prefixes the provider name in brackets
    for structured log output, e.g. ``[artsy] Relation 'genes' not found``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Upstream API errors
# ---------------------------------------------------------------------------

class FetchError(CuratoratorError):
    """Raised when a hypermedia resource cannot be fetched.

    Covers network failures, non-2xx responses, undecodable bodies and
    relations missing from the API root.
    """

    def __init__(
        self,
        message: str = "Resource fetch failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class EnrichmentError(CuratoratorError):
    """Raised when an artist's genes cannot be retrieved.

    The message is deliberately generic; the underlying fetch failure is
    available as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Couldn't get genes",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(CuratoratorError):
    """Raised when configuration is invalid at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)

"""Error types shared across the health feed pipeline."""

from enum import Enum


class HealthFeedError(Exception):
    """Base class for pipeline errors."""

    status_code = 500


class UpstreamFetchError(HealthFeedError):
    """The news source failed or returned a non-ok status."""

    status_code = 502


class GenerationErrorKind(str, Enum):
    """Why a text generation call failed."""

    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    UPSTREAM = "upstream"
    EMPTY_RESPONSE = "empty_response"


class GenerationError(HealthFeedError):
    """The text generation capability failed, timed out or was throttled."""

    def __init__(
        self,
        message: str,
        kind: GenerationErrorKind = GenerationErrorKind.UPSTREAM,
    ) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def rate_limited(self) -> bool:
        """True when the provider reported quota or rate limit exhaustion."""
        return self.kind == GenerationErrorKind.RATE_LIMITED


class SummaryParseError(HealthFeedError):
    """Generated text did not contain a decodable summary payload."""


class NotFoundError(HealthFeedError):
    """Article id is not part of the current cache generation."""

    status_code = 404


class ConflictError(HealthFeedError):
    """A batch enrichment run is already in progress."""

    status_code = 409

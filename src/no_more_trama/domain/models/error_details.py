"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

_REASONS_BY_STATUS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorDetails":
        """Build error details with a human readable reason for an HTTP status."""
        reason = _REASONS_BY_STATUS.get(status_code, f"HTTP {status_code}")
        return cls(status_code=status_code, reason=reason)

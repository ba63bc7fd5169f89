"""Response and connection models captured by the transport probe."""

from pydantic import BaseModel, Field


class ResponseSummary(BaseModel):
    """Status, headers and optional body of the measured response.

    Headers keep wire order; a repeated header name yields one pair per
    occurrence.
    """

    status: int = Field(description="HTTP status code")
    headers: list[tuple[str, str]] = Field(
        default_factory=list, description="(name, value) pairs in wire order"
    )
    body: bytes | None = Field(default=None, description="Raw response body")


class ConnectionInfo(BaseModel):
    """Socket endpoints of the connection that carried the request."""

    remote_address: str | None = None
    local_address: str | None = None

    @property
    def is_known(self) -> bool:
        """Return True when both endpoints were reported by the transport."""
        return bool(self.remote_address and self.local_address)

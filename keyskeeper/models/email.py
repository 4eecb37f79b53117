from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class OutboundEmail(BaseModel):
    """A composed notification ready to hand to the provider."""

    from_address: str = Field(serialization_alias="from")
    to: list[str]
    subject: str
    html: str
    reply_to: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Resend ``POST /emails`` request body."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProviderError(BaseModel):
    """Error reported by the provider, or by the transport talking to it."""

    name: str
    message: str
    status_code: int | None = None


class SendResult(BaseModel):
    """Outcome of a single send attempt. Exactly one of data/error is set."""

    data: dict[str, Any] | None = None
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

"""Resend transactional email API wrapper.

A single ``POST /emails`` per send, no retries. Provider-side failures
(non-2xx, timeout, unreachable host) come back as a ``SendResult`` with an
error instead of raising, so callers can tell a rejected email apart from a
bug in their own code.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from fastapi import Request
from loguru import logger

from keyskeeper.config import Settings
from keyskeeper.models.email import OutboundEmail, ProviderError, SendResult


class EmailGateway:
    """Async client for the Resend send API.

    Build one per process and share it::

        gateway = EmailGateway.from_settings(settings)
        result = await gateway.send(email)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> EmailGateway:
        return cls(
            api_key=settings.resend_api_key,
            base_url=settings.resend_base_url,
            timeout=settings.email_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, email: OutboundEmail) -> SendResult:
        """Submit one email to Resend and wait for its acknowledgement."""
        logger.info("Sending '{}' to {} via Resend", email.subject, ", ".join(email.to))

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._build_headers(),
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                # httpx limits each phase; wait_for caps the whole call
                resp = await asyncio.wait_for(
                    client.post("/emails", json=email.to_payload()),
                    timeout=self._timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning("Resend call timed out after {}s", self._timeout)
            return SendResult(
                error=ProviderError(name="timeout", message=f"No response within {self._timeout}s: {e!r}")
            )
        except httpx.TransportError as e:
            logger.warning("Could not reach Resend: {}", e)
            return SendResult(error=ProviderError(name="transport_error", message=str(e) or repr(e)))

        if resp.is_success:
            data = _json_or_none(resp)
            logger.info("Resend accepted email (id={})", (data or {}).get("id"))
            return SendResult(data=data or {})

        return SendResult(error=_provider_error(resp))


def _json_or_none(resp: httpx.Response) -> dict[str, Any] | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _provider_error(resp: httpx.Response) -> ProviderError:
    """Build a ProviderError from a Resend error body ``{statusCode, name, message}``."""
    body = _json_or_none(resp) or {}
    return ProviderError(
        name=str(body.get("name") or "http_error"),
        message=str(body.get("message") or resp.text[:500]),
        status_code=resp.status_code,
    )


def get_email_gateway(request: Request) -> EmailGateway:
    """FastAPI dependency returning the gateway built at startup."""
    return request.app.state.email_gateway

"""Abstract base for text-generation provider adapters."""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..contracts import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, Provider, ProviderCallError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a creative copywriter for an Indian streetwear brand called Intru. "
    "Write compelling, edgy product descriptions that appeal to young adults. "
    "Keep it authentic and casual."
)


@dataclass(frozen=True)
class ProviderCall:
    """One outbound HTTP request in the provider's own wire format."""

    url: str
    json: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


class ProviderAdapter(abc.ABC):
    """Contract that every provider adapter must implement.

    Subclasses only describe the wire format: how to shape the request
    (``build_call``) and where the generated text lives in the response
    (``extract_text``). Transport and error normalization are shared.
    """

    provider: Provider
    label: str = "Provider"

    def __init__(
        self,
        api_key: str,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @abc.abstractmethod
    def build_call(self, prompt: str, *, max_tokens: int, temperature: float) -> ProviderCall:
        """Translate a normalized prompt into this provider's request."""

    @abc.abstractmethod
    def extract_text(self, body: Any) -> str:
        """Return generated text from a success body, or ``""`` when absent."""

    async def call(
        self,
        prompt: str,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Send *prompt* and return the generated text.

        Raises ``ProviderCallError`` on transport failure, timeout or a
        non-success status. Never retries.
        """
        outbound = self.build_call(
            prompt,
            max_tokens=max_tokens if max_tokens is not None else DEFAULT_MAX_TOKENS,
            temperature=temperature if temperature is not None else DEFAULT_TEMPERATURE,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds, transport=self._transport) as client:
                resp = await client.post(
                    outbound.url,
                    headers={"Content-Type": "application/json", **outbound.headers},
                    params=outbound.params or None,
                    json=outbound.json,
                )
        except httpx.TimeoutException as exc:
            raise ProviderCallError(
                f"{self.label} API request timed out after {self._timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            # str(exc) may embed the request URL, which carries the key for some providers.
            raise ProviderCallError(
                f"{self.label} API request failed: {type(exc).__name__}"
            ) from exc

        if not resp.is_success:
            raise ProviderCallError(self._error_message(resp), status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError:
            logger.warning("%s returned a non-JSON success body", self.label)
            return ""
        return self.extract_text(body)

    def _error_message(self, resp: httpx.Response) -> str:
        try:
            message = resp.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            message = None
        if isinstance(message, str) and message:
            return message
        return f"{self.label} API error: {resp.status_code}"

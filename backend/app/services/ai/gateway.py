"""Text-generation gateway: one entry point over every configured provider."""

from __future__ import annotations

import logging
import time
from functools import lru_cache

import httpx

from app.core.config import get_settings

from .contracts import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    GenerationError,
    GenerationErrorKind,
    GenerationOk,
    GenerationRequest,
    GenerationResult,
    Provider,
    ProviderCallError,
)
from .providers import ADAPTERS, ProviderAdapter, ensure_complete
from .registry import ProviderRegistry, parse_provider

logger = logging.getLogger(__name__)

PRODUCT_DESCRIPTION_INSTRUCTIONS = """Create a description that:
- Highlights the product's unique features and style
- Explains the fit and comfort
- Mentions quality and materials (assume heavyweight cotton, oversized fit)
- Appeals to Indian youth culture and streetwear enthusiasts
- Is 2-3 paragraphs long
- Uses casual, authentic language

Write only the description, no additional commentary."""


def build_product_description_prompt(name: str, category: str | None = None) -> str:
    """Render the fixed product-description prompt for *name* / *category*."""
    lines = [
        "Generate a compelling product description for a streetwear item:",
        f"Product Name: {name.strip()}",
    ]
    if category and category.strip():
        lines.append(f"Category: {category.strip()}")
    return "\n".join(lines) + "\n\n" + PRODUCT_DESCRIPTION_INSTRUCTIONS


class GenerationGateway:
    """Validate provider availability, dispatch to its adapter, wrap the outcome.

    Every call returns a ``GenerationOk`` or ``GenerationError``; nothing
    raises past ``generate``.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        *,
        timeout_seconds: float = 30.0,
        adapters: dict[Provider, type[ProviderAdapter]] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        table = dict(ADAPTERS if adapters is None else adapters)
        ensure_complete(table)
        self._registry = registry
        self._adapters = table
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def is_configured(self, provider: Provider | str) -> bool:
        return self._registry.is_configured(provider)

    def configured_providers(self) -> frozenset[Provider]:
        return self._registry.configured_providers()

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        provider = parse_provider(str(request.provider))
        if provider is None:
            return GenerationError(
                kind=GenerationErrorKind.UNSUPPORTED_PROVIDER,
                message=f"Unsupported model: {request.provider}",
                provider=str(request.provider),
            )

        if not self._registry.is_configured(provider):
            key = self._registry.config_key(provider)
            return GenerationError(
                kind=GenerationErrorKind.PROVIDER_NOT_CONFIGURED,
                message=f"{provider.value.capitalize()} API key not configured. Please set {key} environment variable.",
                provider=provider.value,
                config_key=key,
            )

        if not request.prompt or not request.prompt.strip():
            return GenerationError(
                kind=GenerationErrorKind.GENERATION_FAILED,
                message="Prompt must not be empty",
                provider=provider.value,
            )

        try:
            return await self._dispatch(provider, request)
        except Exception as exc:
            logger.exception("Unexpected AI generation failure (%s)", provider.value)
            return GenerationError(
                kind=GenerationErrorKind.INTERNAL_ERROR,
                message=f"Internal error: {type(exc).__name__}",
                provider=provider.value,
            )

    async def _dispatch(self, provider: Provider, request: GenerationRequest) -> GenerationResult:
        adapter = self._adapters[provider](
            self._registry.credential(provider),
            timeout_seconds=self._timeout_seconds,
            transport=self._transport,
        )

        t0 = time.monotonic()
        try:
            text = await adapter.call(
                request.prompt,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
            )
        except ProviderCallError as exc:
            logger.warning("AI generation failed (%s): %s", provider.value, exc.message)
            return GenerationError(
                kind=GenerationErrorKind.GENERATION_FAILED,
                message=exc.message or f"{provider.value} generation failed",
                provider=provider.value,
            )

        elapsed = (time.monotonic() - t0) * 1000
        logger.info("AI generation ok (%s) chars=%d latency_ms=%.2f", provider.value, len(text), elapsed)
        return GenerationOk(text=text, provider=provider)

    async def generate_product_description(
        self,
        name: str,
        category: str | None = None,
        provider: Provider | str = Provider.GEMINI,
    ) -> GenerationResult:
        if not name or not name.strip():
            return GenerationError(
                kind=GenerationErrorKind.GENERATION_FAILED,
                message="Product name must not be empty",
                provider=str(provider),
            )

        return await self.generate(
            GenerationRequest(
                provider=str(provider),
                prompt=build_product_description_prompt(name, category),
                max_tokens=DEFAULT_MAX_TOKENS,
                temperature=DEFAULT_TEMPERATURE,
            )
        )


@lru_cache
def get_gateway() -> GenerationGateway:
    """Process-wide gateway built from cached settings."""
    settings = get_settings()
    return GenerationGateway(
        ProviderRegistry.from_settings(settings),
        timeout_seconds=settings.ai_timeout_seconds,
    )

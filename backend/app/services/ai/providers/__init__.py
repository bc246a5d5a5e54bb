"""Adapter lookup table: one adapter class per provider tag."""

from __future__ import annotations

from ..contracts import Provider
from .base import SYSTEM_PROMPT, ProviderAdapter, ProviderCall
from .gemini import GeminiProvider
from .grok import GrokProvider

__all__ = [
    "ADAPTERS",
    "GeminiProvider",
    "GrokProvider",
    "ProviderAdapter",
    "ProviderCall",
    "SYSTEM_PROMPT",
    "ensure_complete",
]

ADAPTERS: dict[Provider, type[ProviderAdapter]] = {
    Provider.GROK: GrokProvider,
    Provider.GEMINI: GeminiProvider,
}


def ensure_complete(table: dict[Provider, type[ProviderAdapter]]) -> None:
    """Fail fast when a provider tag has no adapter registered."""
    missing = [p.value for p in Provider if p not in table]
    if missing:
        raise RuntimeError(f"No adapter registered for provider(s): {', '.join(missing)}")

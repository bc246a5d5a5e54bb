"""Provider registry: which providers have credentials in this process."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from app.core.config import Settings

from .contracts import Provider

logger = logging.getLogger(__name__)

# Environment variable that carries each provider's credential.
CONFIG_KEYS: Mapping[Provider, str] = MappingProxyType(
    {
        Provider.GROK: "GROK_API_KEY",
        Provider.GEMINI: "GEMINI_API_KEY",
    }
)


def parse_provider(value: str) -> Provider | None:
    """Return the ``Provider`` for *value*, or ``None`` when unknown."""
    try:
        return Provider(value)
    except ValueError:
        return None


class ProviderRegistry:
    """Read-only view of provider credentials.

    Built once from configuration; there is no way to change it afterwards.
    A missing or blank credential simply marks the provider as unavailable.
    """

    def __init__(self, credentials: Mapping[Provider | str, str | None]) -> None:
        resolved: dict[Provider, str] = {}
        for key, secret in credentials.items():
            provider = parse_provider(str(key))
            if provider is None:
                logger.warning("Ignoring credential for unknown provider %r", key)
                continue
            resolved[provider] = (secret or "").strip()
        self._credentials: Mapping[Provider, str] = MappingProxyType(resolved)

    @classmethod
    def from_settings(cls, settings: Settings) -> ProviderRegistry:
        return cls(
            {
                Provider.GROK: settings.grok_api_key,
                Provider.GEMINI: settings.gemini_api_key,
            }
        )

    def is_configured(self, provider: Provider | str) -> bool:
        resolved = parse_provider(str(provider))
        if resolved is None:
            return False
        return bool(self._credentials.get(resolved))

    def configured_providers(self) -> frozenset[Provider]:
        return frozenset(p for p, secret in self._credentials.items() if secret)

    def credential(self, provider: Provider) -> str:
        return self._credentials.get(provider, "")

    @staticmethod
    def config_key(provider: Provider) -> str:
        return CONFIG_KEYS[provider]

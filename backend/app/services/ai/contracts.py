"""Generation contracts: provider tags, request and the result envelope."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class Provider(StrEnum):
    GROK = "grok"
    GEMINI = "gemini"


class GenerationErrorKind(StrEnum):
    UNSUPPORTED_PROVIDER = "unsupported_provider"
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    GENERATION_FAILED = "generation_failed"
    INTERNAL_ERROR = "internal_error"


DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.8


@dataclass(frozen=True)
class GenerationRequest:
    """Normalized request handed to the gateway.

    ``provider`` stays a plain string so unknown identifiers reach the
    gateway and come back as ``UNSUPPORTED_PROVIDER``.
    """

    provider: str
    prompt: str
    max_tokens: int | None = None
    temperature: float | None = None


@dataclass(frozen=True)
class GenerationOk:
    text: str
    provider: Provider
    ok: Literal[True] = True


@dataclass(frozen=True)
class GenerationError:
    kind: GenerationErrorKind
    message: str
    provider: str
    config_key: str | None = None
    ok: Literal[False] = False


GenerationResult = GenerationOk | GenerationError


class ProviderCallError(Exception):
    """Raised by an adapter when the provider call did not succeed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

"""xAI Grok provider (OpenAI-compatible chat completions)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from ..contracts import Provider
from .base import SYSTEM_PROMPT, ProviderAdapter, ProviderCall

GROK_URL = "https://api.x.ai/v1/chat/completions"
GROK_MODEL = "grok-beta"


class _Message(BaseModel):
    content: str | None = None


class _Choice(BaseModel):
    message: _Message | None = None


class GrokResponse(BaseModel):
    choices: list[_Choice] = []


class GrokProvider(ProviderAdapter):
    provider = Provider.GROK
    label = "Grok"

    def build_call(self, prompt: str, *, max_tokens: int, temperature: float) -> ProviderCall:
        return ProviderCall(
            url=GROK_URL,
            headers={"Authorization": f"Bearer {self._api_key}"},
            json={
                "model": GROK_MODEL,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                "max_tokens": max_tokens,
                "temperature": temperature,
            },
        )

    def extract_text(self, body: Any) -> str:
        try:
            data = GrokResponse.model_validate(body)
        except ValidationError:
            return ""
        if not data.choices or data.choices[0].message is None:
            return ""
        return data.choices[0].message.content or ""

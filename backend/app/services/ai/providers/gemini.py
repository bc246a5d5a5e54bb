"""Google Gemini provider (generateContent)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from ..contracts import Provider
from .base import SYSTEM_PROMPT, ProviderAdapter, ProviderCall

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"


class _Part(BaseModel):
    text: str | None = None


class _Content(BaseModel):
    parts: list[_Part] = []


class _Candidate(BaseModel):
    content: _Content | None = None


class GeminiResponse(BaseModel):
    candidates: list[_Candidate] = []


class GeminiProvider(ProviderAdapter):
    provider = Provider.GEMINI
    label = "Gemini"

    def build_call(self, prompt: str, *, max_tokens: int, temperature: float) -> ProviderCall:
        # No system role on this endpoint: the framing rides in front of the prompt.
        return ProviderCall(
            url=GEMINI_URL,
            params={"key": self._api_key},
            json={
                "contents": [{"parts": [{"text": f"{SYSTEM_PROMPT}\n\n{prompt}"}]}],
                "generationConfig": {
                    "maxOutputTokens": max_tokens,
                    "temperature": temperature,
                },
            },
        )

    def extract_text(self, body: Any) -> str:
        try:
            data = GeminiResponse.model_validate(body)
        except ValidationError:
            return ""
        if not data.candidates:
            return ""
        content = data.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text or ""

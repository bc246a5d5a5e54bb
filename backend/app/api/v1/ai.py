"""AI admin endpoints: product copy generation and provider status."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.core.auth import require_admin
from app.services.ai.contracts import GenerationError, GenerationErrorKind, GenerationRequest, Provider
from app.services.ai.gateway import GenerationGateway, get_gateway
from app.services.ai.registry import CONFIG_KEYS

router = APIRouter()

MODEL_INFO: dict[Provider, dict[str, str]] = {
    Provider.GROK: {
        "name": "Grok",
        "provider": "xAI",
        "description": "xAI's Grok model - fast and creative",
    },
    Provider.GEMINI: {
        "name": "Gemini Pro",
        "provider": "Google",
        "description": "Google's Gemini Pro - versatile and powerful",
    },
}

REQUIRED_FIELDS = {
    "model": "AI model to use (grok or gemini)",
    "productName": "Product name for automatic description generation",
    "category": "Optional product category",
    "prompt": "Or provide a custom prompt for free-form generation",
}


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    model: str | None = None
    prompt: str | None = Field(default=None, max_length=8000)
    product_name: str | None = Field(default=None, alias="productName", max_length=200)
    category: str | None = Field(default=None, max_length=100)


class GenerateResponse(BaseModel):
    success: bool
    text: str
    model: str
    timestamp: str


def _configured_models(gateway: GenerationGateway) -> list[str]:
    configured = gateway.configured_providers()
    return [p.value for p in Provider if p in configured]


def _error_response(result: GenerationError, gateway: GenerationGateway) -> JSONResponse:
    if result.kind == GenerationErrorKind.UNSUPPORTED_PROVIDER:
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Invalid model: {result.provider}. Supported models: "
                + ", ".join(p.value for p in Provider),
                "configuredModels": _configured_models(gateway),
            },
        )
    if result.kind == GenerationErrorKind.PROVIDER_NOT_CONFIGURED:
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Model {result.provider} is not configured. "
                "Please set the required API key environment variable.",
                "requiredEnvVar": result.config_key,
                "configuredModels": _configured_models(gateway),
            },
        )
    return JSONResponse(
        status_code=500,
        content={"error": result.message or "AI generation failed", "model": result.provider},
    )


@router.post(
    "/admin/ai/generate",
    response_model=GenerateResponse,
    summary="Generate product copy with the selected AI model",
    dependencies=[Depends(require_admin)],
)
async def generate_endpoint(
    body: GenerateRequest,
    gateway: GenerationGateway = Depends(get_gateway),
):
    prompt = (body.prompt or "").strip()
    product_name = (body.product_name or "").strip()

    if not body.model or (not prompt and not product_name):
        return JSONResponse(
            status_code=400,
            content={
                "error": "Missing required fields. Provide either productName or custom prompt, and select a model.",
                "requiredFields": REQUIRED_FIELDS,
            },
        )

    if prompt:
        result = await gateway.generate(GenerationRequest(provider=body.model, prompt=prompt))
    else:
        result = await gateway.generate_product_description(product_name, body.category, body.model)

    if not result.ok:
        return _error_response(result, gateway)

    return GenerateResponse(
        success=True,
        text=result.text,
        model=result.provider.value,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get(
    "/admin/ai/generate",
    summary="List AI models and their configuration status",
    dependencies=[Depends(require_admin)],
)
async def generate_status_endpoint(gateway: GenerationGateway = Depends(get_gateway)):
    models = {}
    for provider in Provider:
        models[provider.value] = {
            **MODEL_INFO[provider],
            "configured": gateway.is_configured(provider),
            "envVar": CONFIG_KEYS[provider],
        }
    return {
        "availableModels": [p.value for p in Provider],
        "configuredModels": _configured_models(gateway),
        "models": models,
    }

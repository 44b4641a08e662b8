"""OpenAI-style chat completion route backed by the Cloudflare AI Gateway."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gateway_adapter.core.config import load_config
from gateway_adapter.core.exceptions import ModelNotConfiguredError, ProviderError
from gateway_adapter.providers.base import CompletionRequest, CompletionResult, ProviderAdapter
from gateway_adapter.providers.cloudflare_gateway import CloudflareGatewayProvider

router = APIRouter(prefix="/v1")


CHAT_COMPLETION_EXAMPLES = {
    "anthropic": {
        "summary": "Anthropic through the gateway",
        "value": {
            "model": "anthropic/claude-sonnet-4.5",
            "messages": [
                {"role": "system", "content": "You are a helpful assistant."},
                {"role": "user", "content": "Summarize this request in one sentence."},
            ],
            "temperature": 0.2,
        },
    },
    "workers-ai": {
        "summary": "Workers AI model",
        "value": {
            "model": "workersai/@cf/meta/llama-3.1-8b-instruct",
            "messages": [{"role": "user", "content": "Say hello."}],
            "max_tokens": 64,
        },
    },
}


@lru_cache(maxsize=1)
def get_provider() -> ProviderAdapter:
    return CloudflareGatewayProvider(load_config())


@router.post(
    "/chat/completions",
    response_model=CompletionResult,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "examples": CHAT_COMPLETION_EXAMPLES,
                }
            }
        }
    },
)
async def create_chat_completion(
    payload: CompletionRequest,
    provider: Annotated[ProviderAdapter, Depends(get_provider)],
) -> CompletionResult:
    try:
        return await provider.complete(payload)
    except ModelNotConfiguredError as exc:
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "message": str(exc),
                    "type": "invalid_request_error",
                    "code": "model_required",
                }
            },
        )
    except ProviderError as exc:
        return JSONResponse(
            status_code=502,
            content={
                "error": {
                    "message": f"Provider '{exc.provider_id}' failed: {exc.message}",
                    "type": "provider_error",
                    "code": exc.code,
                    "status_code": exc.status_code,
                }
            },
        )

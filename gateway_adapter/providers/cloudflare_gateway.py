"""Cloudflare AI Gateway provider adapter."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gateway_adapter.core.config import GatewayConfig
from gateway_adapter.core.exceptions import ModelNotConfiguredError, ProviderError

from .base import CompletionRequest, CompletionResult, ProviderAdapter, Usage
from .model_names import normalize_model
from .utils import build_error_log

logger = logging.getLogger("gateway.providers.cloudflare")


class CloudflareGatewayProvider(ProviderAdapter):
    provider_id = "cloudflare-gateway"

    def __init__(self, config: GatewayConfig) -> None:
        super().__init__(config)
        self._url = config.chat_completions_url

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        model = self._resolve_model(request)
        payload = self._build_payload(request, model)
        data = await self._post_chat(payload)

        return CompletionResult(
            content=data["choices"][0]["message"]["content"],
            usage=Usage.model_validate(data["usage"]),
        )

    def _resolve_model(self, request: CompletionRequest) -> str:
        model = request.model or self._config.model
        if not model:
            raise ModelNotConfiguredError()
        return normalize_model(model)

    def _build_payload(self, request: CompletionRequest, model: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model,
            "messages": request.messages,
        }
        for field in ("temperature", "max_tokens"):
            value = getattr(request, field)
            if value is not None:
                payload[field] = value
        return payload

    async def _post_chat(self, payload: dict[str, Any]) -> dict[str, Any]:
        headers = {
            "cf-aig-authorization": f"Bearer {self._config.token}",
            "Content-Type": "application/json",
        }
        model = payload["model"]
        logger.info(
            "Gateway request",
            extra={"event": "gateway_request", "provider_id": self.provider_id, "model": model},
        )

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(self._url, json=payload, headers=headers)
        except httpx.RequestError as exc:
            logger.warning(
                "Gateway request failed",
                extra=build_error_log(
                    provider_id=self.provider_id, model=model, message=str(exc)
                ),
            )
            raise ProviderError(self.provider_id, message="Gateway request failed") from exc

        if not response.is_success:
            body = response.text
            message = f"Gateway returned HTTP {response.status_code}"
            logger.warning(
                "Gateway error response",
                extra=build_error_log(
                    provider_id=self.provider_id,
                    model=model,
                    message=message,
                    status_code=response.status_code,
                    response_body=body,
                ),
            )
            raise ProviderError(
                self.provider_id,
                message=message,
                status_code=response.status_code,
                body=body,
            )

        logger.info(
            "Gateway response",
            extra={
                "event": "gateway_response",
                "provider_id": self.provider_id,
                "model": model,
                "status_code": response.status_code,
            },
        )
        return response.json()

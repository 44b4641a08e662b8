"""Provider adapter interfaces."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from gateway_adapter.core.config import GatewayConfig


class CompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str | None = None
    messages: list[dict[str, Any]]
    temperature: float | None = None
    max_tokens: int | None = None


class Usage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class CompletionResult(BaseModel):
    content: str
    usage: Usage


class ProviderAdapter:
    """Abstract provider adapter."""

    provider_id: str

    def __init__(self, config: GatewayConfig) -> None:
        self._config = config

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        raise NotImplementedError

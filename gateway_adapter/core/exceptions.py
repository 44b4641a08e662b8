"""Custom exception types."""

from __future__ import annotations


class ProviderError(Exception):
    """Raised when the gateway call does not produce a successful response."""

    code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider_id: str,
        message: str = "Provider error",
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.provider_id = provider_id
        self.message = message
        self.status_code = status_code
        self.body = body


class ModelNotConfiguredError(ValueError):
    """Raised when a request names no model and no default model is configured."""

    def __init__(self) -> None:
        super().__init__("No model given and no default model configured")

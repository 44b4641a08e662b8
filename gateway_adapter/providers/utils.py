"""Helper utilities for provider adapters."""

from __future__ import annotations

from typing import Any


def build_error_log(
    *,
    provider_id: str,
    model: str,
    message: str,
    status_code: int | None = None,
    response_body: str | None = None,
) -> dict[str, Any]:
    """Assemble the ``extra`` payload logged when a gateway call fails."""

    payload: dict[str, Any] = {
        "event": "gateway_error",
        "provider_id": provider_id,
        "model": model,
        "error_message": message,
    }
    if status_code is not None:
        payload["status_code"] = status_code
    if response_body:
        payload["response_body"] = response_body[:2000]
    return payload


__all__ = ["build_error_log"]

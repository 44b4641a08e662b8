"""Gateway configuration loading utilities."""

from __future__ import annotations

import os
import pathlib
from functools import lru_cache
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field

# Relative to the working directory the service is started from.
DEFAULT_CONFIG_PATH = pathlib.Path("config") / "gateway.yaml"
DEFAULT_BASE_URL = "https://gateway.ai.cloudflare.com/v1"

_ENV_OVERRIDES = {
    "account_id": "CLOUDFLARE_ACCOUNT_ID",
    "gateway_id": "CLOUDFLARE_GATEWAY_ID",
    "token": "CLOUDFLARE_AIG_TOKEN",
    "model": "GATEWAY_DEFAULT_MODEL",
}


class GatewayConfig(BaseModel):
    """Connection settings for a single Cloudflare AI Gateway."""

    model_config = ConfigDict(frozen=True)

    account_id: str
    gateway_id: str
    token: str = Field(repr=False)
    model: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None

    @property
    def chat_completions_url(self) -> str:
        base = self.base_url.rstrip("/")
        return f"{base}/{self.account_id}/{self.gateway_id}/compat/chat/completions"


def _config_path() -> pathlib.Path:
    configured = os.getenv("GATEWAY_CONFIG")
    path = pathlib.Path(configured) if configured else DEFAULT_CONFIG_PATH
    if not path.is_absolute():
        path = pathlib.Path.cwd() / path
    return path


@lru_cache(maxsize=1)
def load_config(path: pathlib.Path | None = None) -> GatewayConfig:
    """Load gateway configuration from YAML, letting the environment override it."""
    config_path = path or _config_path()
    raw: Dict[str, Any] = {}
    if config_path.exists():
        raw = yaml.safe_load(config_path.read_text()) or {}

    for field, env_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            raw[field] = value
    return GatewayConfig(**raw)

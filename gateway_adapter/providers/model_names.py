"""Model identifier canonicalization for the Cloudflare AI Gateway /compat endpoint."""

from __future__ import annotations

import re

# Caller-facing vendor prefix -> prefix the gateway routes on.
VENDOR_ALIASES: dict[str, str] = {
    "xai": "grok",
    "workersai": "workers-ai",
    "google": "google-ai-studio",
    "gemini": "google-ai-studio",
    "perplexity": "perplexity-ai",
    "vertex": "google-vertex-ai",
    "bedrock": "aws-bedrock",
}

# Vendors whose model ids use hyphens where callers commonly write version dots.
HYPHENATED_VERSION_VENDORS: frozenset[str] = frozenset({"anthropic"})

_VERSION_DOT = re.compile(r"(?<=\d)\.(?=\d)")


def normalize_model(model: str) -> str:
    """Rewrite ``<vendor>/<model>`` into the form the gateway expects.

    Only the leading segment is treated as the vendor; anything after the
    first slash (including nested ``@cf/...`` paths) is kept as-is apart
    from the version-dot rewrite for vendors that need it.
    """

    prefix, sep, rest = model.partition("/")
    if not sep:
        return model

    vendor = VENDOR_ALIASES.get(prefix, prefix)
    if vendor in HYPHENATED_VERSION_VENDORS:
        rest = _VERSION_DOT.sub("-", rest)
    return f"{vendor}/{rest}"


__all__ = ["HYPHENATED_VERSION_VENDORS", "VENDOR_ALIASES", "normalize_model"]

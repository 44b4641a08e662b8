import pytest

from gateway_adapter.providers.model_names import normalize_model


@pytest.mark.parametrize(
    ("model", "expected"),
    [
        ("google/gemini-2.5-pro", "google-ai-studio/gemini-2.5-pro"),
        ("xai/grok-4.1-fast-reasoning", "grok/grok-4.1-fast-reasoning"),
        ("workersai/@cf/meta/llama-3.1-8b-instruct", "workers-ai/@cf/meta/llama-3.1-8b-instruct"),
        ("anthropic/claude-sonnet-4.5", "anthropic/claude-sonnet-4-5"),
        ("openai/gpt-4o-mini", "openai/gpt-4o-mini"),
    ],
)
def test_normalize_model(model, expected):
    assert normalize_model(model) == expected


def test_identifier_without_vendor_passes_through():
    assert normalize_model("gpt-4.1") == "gpt-4.1"


def test_only_leading_prefix_is_aliased():
    assert normalize_model("workersai/@cf/google/gemma-3-12b-it") == (
        "workers-ai/@cf/google/gemma-3-12b-it"
    )


def test_anthropic_keeps_non_numeric_dots():
    assert normalize_model("anthropic/claude.v2-3.7.1") == "anthropic/claude.v2-3-7-1"


def test_version_dots_kept_for_other_vendors():
    assert normalize_model("openai/gpt-4.1-mini") == "openai/gpt-4.1-mini"


@pytest.mark.parametrize(
    "model",
    [
        "google/gemini-2.5-pro",
        "xai/grok-4.1-fast-reasoning",
        "workersai/@cf/meta/llama-3.1-8b-instruct",
        "anthropic/claude-sonnet-4.5",
        "google-ai-studio/gemini-2.5-flash",
        "mistral",
    ],
)
def test_normalization_is_idempotent(model):
    once = normalize_model(model)
    assert normalize_model(once) == once

"""Unit tests for `content_providers.openrouter.chat_helpers`."""
from __future__ import annotations

import pytest

from content_providers.base.models import FinishReason
from content_providers.openrouter.chat_helpers import map_finish_reason, normalize_response
from content_providers.openrouter.wire import OpenRouterResponse

from content_providers.tests.openrouter.helpers import completion_payload


@pytest.mark.parametrize(
    ("reason", "expected"),
    [
        ("stop", FinishReason.STOP),
        ("length", FinishReason.MAX_TOKENS),
        ("content_filter", FinishReason.SAFETY),
        ("function_call", FinishReason.STOP),
        ("tool_calls", FinishReason.OTHER),
        ("", FinishReason.OTHER),
        (None, FinishReason.OTHER),
    ],
)
def test_map_finish_reason(reason, expected):
    assert map_finish_reason(reason) is expected  # nosec B101


def test_first_choice_becomes_single_model_candidate():
    body = completion_payload(usage={"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15})
    body["choices"].append({"message": {"role": "assistant", "content": "ignored"}, "finish_reason": "length"})
    result = normalize_response(OpenRouterResponse.model_validate(body))

    assert result.candidates is not None and len(result.candidates) == 1  # nosec B101
    candidate = result.candidates[0]
    assert candidate.index == 0  # nosec B101
    assert candidate.content.role == "model"  # nosec B101
    assert candidate.content.parts[0].to_dict() == {"text": "Hello, world!"}  # nosec B101
    assert candidate.finish_reason is FinishReason.STOP  # nosec B101
    assert result.text == "Hello, world!"  # nosec B101


def test_usage_copied_verbatim():
    body = completion_payload(usage={"prompt_tokens": 7, "completion_tokens": 100, "total_tokens": 1})
    usage = normalize_response(OpenRouterResponse.model_validate(body)).usage_metadata
    assert usage is not None  # nosec B101
    assert (usage.prompt_token_count, usage.candidates_token_count, usage.total_token_count) == (7, 100, 1)  # nosec B101


def test_missing_usage_leaves_metadata_unset():
    result = normalize_response(OpenRouterResponse.model_validate(completion_payload()))
    assert result.usage_metadata is None  # nosec B101
    assert "usageMetadata" not in result.to_dict()  # nosec B101


@pytest.mark.parametrize("choices", [[], None])
def test_empty_choices_yield_no_candidates(choices):
    body = {"id": "gen-1"}
    if choices is not None:
        body["choices"] = choices
    result = normalize_response(OpenRouterResponse.model_validate(body))
    assert result.candidates is None  # nosec B101
    assert result.text is None  # nosec B101


def test_null_message_content_becomes_empty_text():
    body = completion_payload(content=None, finish_reason="content_filter")
    candidate = normalize_response(OpenRouterResponse.model_validate(body)).candidates[0]
    assert candidate.content.parts[0].text == ""  # nosec B101
    assert candidate.finish_reason is FinishReason.SAFETY  # nosec B101

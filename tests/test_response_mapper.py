"""Tests for mapping OpenAI wire responses to the unified format."""

import pytest

from llm_transformer.transformers.openai.response import map_response, map_stream_chunk

TOP_LEVEL_FIELDS = {"id", "choices", "created", "model", "object", "usage"}


def test_response_without_usage():
    response = map_response({
        "id": "1",
        "choices": [{"message": {"role": "assistant", "content": "hello"}}],
        "created": 1,
        "model": "gpt-4",
        "object": "chat.completion",
    })

    assert response == {
        "id": "1",
        "choices": [
            {
                "finish_reason": None,
                "index": 0,
                "message": {"content": "hello", "role": "assistant"},
            }
        ],
        "created": 1,
        "model": "gpt-4",
        "object": "chat.completion",
        "usage": {"completion_tokens": None, "prompt_tokens": None, "total_tokens": None},
    }
    assert "tool_calls" not in response["choices"][0]["message"]


class TestMapResponseIsTotal:
    """map_response never raises and always returns the full shape."""

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "not json",
            [],
            {},
            {"choices": None},
            {"choices": []},
            {"choices": [None]},
            {"choices": [{"message": "oops"}]},
            {"choices": [{"message": {"tool_calls": "bad"}}]},
            {"choices": [{"message": {"tool_calls": [None, {"function": None}]}}]},
            {"usage": "bad"},
            {"error": {"message": "rate limited"}},
        ],
    )
    def test_malformed_input_still_yields_full_shape(self, raw):
        response = map_response(raw)

        assert set(response) == TOP_LEVEL_FIELDS
        choice = response["choices"][0]
        assert choice["index"] == 0
        assert choice["message"]["role"] == "assistant"
        assert set(response["usage"]) == {"completion_tokens", "prompt_tokens", "total_tokens"}

    def test_defaults_for_empty_choice(self):
        response = map_response({"choices": [{}]})
        assert response["choices"][0] == {
            "finish_reason": None,
            "index": 0,
            "message": {"content": None, "role": "assistant"},
        }

    def test_empty_string_content_becomes_none(self):
        response = map_response({"choices": [{"message": {"content": ""}}]})
        assert response["choices"][0]["message"]["content"] is None


class TestMapResponseFields:
    """Tests for field mapping on well-formed responses."""

    def test_full_response(self):
        response = map_response({
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o",
            "system_fingerprint": "fp_1",
            "choices": [{
                "index": 0,
                "finish_reason": "tool_calls",
                "logprobs": None,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [{
                        "id": "call_1",
                        "type": "function",
                        "function": {"name": "lookup", "arguments": "{\"q\":\"x\"}"},
                    }],
                },
            }],
            "usage": {"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19},
        })

        assert response["id"] == "chatcmpl-1"
        assert response["choices"][0]["finish_reason"] == "tool_calls"
        assert response["choices"][0]["message"]["tool_calls"] == [{
            "id": "call_1",
            "type": "function",
            "function": {"name": "lookup", "arguments": "{\"q\":\"x\"}"},
        }]
        assert response["usage"] == {"completion_tokens": 7, "prompt_tokens": 12, "total_tokens": 19}
        assert "system_fingerprint" not in response

    def test_tool_call_arguments_default_to_empty_object(self):
        response = map_response({
            "choices": [{"message": {"tool_calls": [{"id": "c", "type": "function", "function": {"name": "f"}}]}}],
        })
        assert response["choices"][0]["message"]["tool_calls"][0]["function"]["arguments"] == "{}"

    def test_empty_tool_calls_are_omitted(self):
        response = map_response({"choices": [{"message": {"content": "x", "tool_calls": []}}]})
        assert "tool_calls" not in response["choices"][0]["message"]

    def test_only_first_choice_is_used(self):
        response = map_response({
            "choices": [
                {"index": 0, "message": {"content": "first"}},
                {"index": 1, "message": {"content": "second"}},
            ],
        })
        assert len(response["choices"]) == 1
        assert response["choices"][0]["message"]["content"] == "first"

    def test_partial_usage_is_not_defaulted(self):
        response = map_response({"usage": {"prompt_tokens": 3}})
        assert response["usage"] == {"completion_tokens": None, "prompt_tokens": 3, "total_tokens": None}


class TestMapStreamChunk:
    """Tests for mapping one stream chunk."""

    def test_content_delta(self):
        chunk = map_stream_chunk({
            "id": "1",
            "object": "chat.completion.chunk",
            "created": 1,
            "model": "gpt-4",
            "choices": [{"index": 0, "delta": {"content": "a"}}],
        })

        assert chunk == {
            "id": "1",
            "object": "chat.completion.chunk",
            "created": 1,
            "model": "gpt-4",
            "choices": [{"index": 0, "delta": {"content": "a"}, "finish_reason": None}],
        }

    def test_absent_delta_fields_stay_absent(self):
        chunk = map_stream_chunk({"choices": [{"delta": {}, "finish_reason": "stop"}]})
        assert chunk["choices"][0] == {"index": 0, "delta": {}, "finish_reason": "stop"}
        assert "id" not in chunk
        assert "usage" not in chunk

    def test_explicit_null_content_is_kept(self):
        chunk = map_stream_chunk({"choices": [{"delta": {"role": "assistant", "content": None}}]})
        assert chunk["choices"][0]["delta"] == {"role": "assistant", "content": None}

    def test_tool_call_deltas_keep_index(self):
        chunk = map_stream_chunk({
            "choices": [{
                "delta": {
                    "tool_calls": [
                        {"index": 0, "id": "call_1", "type": "function", "function": {"name": "lookup", "arguments": ""}},
                        {"index": 1, "function": {"arguments": "{\"q\":"}},
                        {"index": 2},
                    ]
                }
            }],
        })

        assert chunk["choices"][0]["delta"]["tool_calls"] == [
            {"index": 0, "id": "call_1", "type": "function", "function": {"name": "lookup", "arguments": ""}},
            {"index": 1, "function": {"arguments": "{\"q\":"}},
            {"index": 2, "function": {"arguments": ""}},
        ]

    def test_usage_on_terminal_chunk(self):
        chunk = map_stream_chunk({
            "choices": [],
            "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7, "extra": 1},
        })
        assert chunk["usage"] == {"completion_tokens": 2, "prompt_tokens": 5, "total_tokens": 7}
        assert chunk["choices"] == [{"index": 0, "delta": {}, "finish_reason": None}]

    def test_empty_usage_maps_to_null_fields(self):
        chunk = map_stream_chunk({"id": "1", "choices": [], "usage": {}})
        assert chunk["usage"] == {"completion_tokens": None, "prompt_tokens": None, "total_tokens": None}

    def test_null_usage_is_omitted(self):
        chunk = map_stream_chunk({"choices": [{"delta": {"content": "x"}}], "usage": None})
        assert "usage" not in chunk

"""OpenAI chat completions response -> unified response.

Both mappers are total: any input shape produces a well-formed result.
Missing fields fall back to explicit defaults and usage figures are copied
without defaulting. Only the first choice is consulted.
"""

from __future__ import annotations

from typing import Any, Mapping

from ...types import UnifiedResponse, UnifiedStreamChunk, Usage

_PASSTHROUGH_FIELDS = ("id", "object", "created", "model")


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _first_choice(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    choices = payload.get("choices")
    if isinstance(choices, list) and choices:
        return _as_mapping(choices[0])
    return {}


def map_usage(usage: Any) -> Usage:
    usage = _as_mapping(usage)
    return {
        "completion_tokens": usage.get("completion_tokens"),
        "prompt_tokens": usage.get("prompt_tokens"),
        "total_tokens": usage.get("total_tokens"),
    }


def _map_tool_calls(raw_tool_calls: Any) -> list[dict[str, Any]]:
    if not isinstance(raw_tool_calls, list):
        return []
    tool_calls = []
    for tool_call in raw_tool_calls:
        tool_call = _as_mapping(tool_call)
        function = _as_mapping(tool_call.get("function"))
        tool_calls.append({
            "id": tool_call.get("id"),
            "type": tool_call.get("type"),
            "function": {
                "name": function.get("name"),
                # Already a JSON string on the wire; never re-encode it
                "arguments": function.get("arguments") or "{}",
            },
        })
    return tool_calls


def map_response(raw: Any) -> UnifiedResponse:
    """Map a complete wire response to the unified response shape."""
    payload = _as_mapping(raw)
    choice = _first_choice(payload)
    message = _as_mapping(choice.get("message"))

    unified_message: dict[str, Any] = {
        "content": message.get("content") or None,
        "role": message.get("role") or "assistant",
    }
    tool_calls = _map_tool_calls(message.get("tool_calls"))
    if tool_calls:
        unified_message["tool_calls"] = tool_calls

    return {
        "id": payload.get("id"),
        "choices": [
            {
                "finish_reason": choice.get("finish_reason") or None,
                "index": choice.get("index") or 0,
                "message": unified_message,
            }
        ],
        "created": payload.get("created"),
        "model": payload.get("model"),
        "object": payload.get("object"),
        "usage": map_usage(payload.get("usage")),
    }


def _map_stream_tool_call(tool_call: Any) -> dict[str, Any]:
    tool_call = _as_mapping(tool_call)
    mapped: dict[str, Any] = {}
    # index lets the caller merge argument fragments across frames
    for key in ("index", "id", "type"):
        if key in tool_call:
            mapped[key] = tool_call[key]
    function = _as_mapping(tool_call.get("function"))
    mapped_function: dict[str, Any] = {}
    if "name" in function:
        mapped_function["name"] = function["name"]
    mapped_function["arguments"] = function.get("arguments") or ""
    mapped["function"] = mapped_function
    return mapped


def map_stream_chunk(chunk: Any) -> UnifiedStreamChunk:
    """Map one parsed stream chunk to a unified stream chunk.

    Delta fields are copied only when the provider sent them.
    """
    payload = _as_mapping(chunk)
    choice = _first_choice(payload)
    delta = _as_mapping(choice.get("delta"))

    mapped: dict[str, Any] = {
        key: payload[key] for key in _PASSTHROUGH_FIELDS if key in payload
    }

    unified_delta: dict[str, Any] = {}
    for key in ("role", "content"):
        if key in delta:
            unified_delta[key] = delta[key]
    raw_tool_calls = delta.get("tool_calls")
    if isinstance(raw_tool_calls, list):
        unified_delta["tool_calls"] = [
            _map_stream_tool_call(tool_call) for tool_call in raw_tool_calls
        ]

    mapped["choices"] = [
        {
            "index": choice.get("index") or 0,
            "delta": unified_delta,
            "finish_reason": choice.get("finish_reason") or None,
        }
    ]
    if payload.get("usage") is not None:
        mapped["usage"] = map_usage(payload["usage"])
    return mapped

"""Unified request -> OpenAI chat completions request.

Maps the unified chat request into the wire body and the transport settings
(URL and headers) needed to reach the provider. Pure: no I/O, inputs are
left untouched.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Callable, Mapping, NamedTuple

import httpx

from ...core.provider import ProviderConfig
from ...types import Role

logger = logging.getLogger("llm-transformer")

IdFactory = Callable[[], str]


class RequestConfig(NamedTuple):
    """Transport settings for a mapped request."""

    url: httpx.URL
    headers: dict[str, str]


class TransformedRequest(NamedTuple):
    """Wire body plus transport settings; unpacks as ``body, config``."""

    body: dict[str, Any]
    config: RequestConfig


def generate_tool_call_id() -> str:
    """Return an opaque, pseudo-unique tool call id."""
    return f"call_{uuid.uuid4().hex[:13]}"


def serialize_arguments(arguments: Any) -> str:
    """Return tool call arguments as a JSON string.

    Strings are assumed to be JSON already and pass through verbatim.
    """
    if isinstance(arguments, str):
        return arguments
    if arguments is None:
        arguments = {}
    return json.dumps(arguments, ensure_ascii=False, separators=(",", ":"))


def _convert_content_part(part: Any) -> Any:
    if not isinstance(part, Mapping):
        return part
    part_type = part.get("type")
    if part_type == "text":
        return {"type": "text", "text": part.get("text")}
    if part_type == "image_url":
        image_url = part.get("image_url")
        url = image_url.get("url") if isinstance(image_url, Mapping) else None
        return {"type": "image_url", "image_url": {"url": url}}
    # Unknown part types are forwarded unchanged
    return part


def convert_content(content: Any) -> list[Any]:
    """Normalize message content into a list of wire content parts."""
    if isinstance(content, str):
        return [{"type": "text", "text": content}]
    if isinstance(content, list):
        return [_convert_content_part(part) for part in content]
    return []


def convert_tool_call(tool_call: Mapping[str, Any], id_factory: IdFactory) -> dict[str, Any]:
    function = tool_call.get("function")
    if not isinstance(function, Mapping):
        function = {}
    return {
        "id": tool_call.get("id") or id_factory(),
        "type": "function",
        "function": {
            "name": function.get("name"),
            "arguments": serialize_arguments(function.get("arguments")),
        },
    }


def convert_message(message: Mapping[str, Any], id_factory: IdFactory) -> dict[str, Any]:
    """Convert one unified message to its wire form."""
    wire_message: dict[str, Any] = {"role": Role.parse(message.get("role")).value}

    content = convert_content(message.get("content"))
    if content:
        wire_message["content"] = content

    tool_calls = message.get("tool_calls")
    if isinstance(tool_calls, list):
        wire_message["tool_calls"] = [
            convert_tool_call(tool_call, id_factory)
            for tool_call in tool_calls
            if isinstance(tool_call, Mapping)
        ]

    if message.get("tool_call_id"):
        wire_message["tool_call_id"] = message["tool_call_id"]
    if message.get("name"):
        wire_message["name"] = message["name"]

    return wire_message


def convert_tool(tool: Mapping[str, Any]) -> dict[str, Any]:
    function = tool.get("function")
    if not isinstance(function, Mapping):
        function = {}
    wire_function = {
        key: function[key]
        for key in ("name", "description", "parameters")
        if key in function
    }
    wire_tool: dict[str, Any] = {}
    if "type" in tool:
        wire_tool["type"] = tool["type"]
    wire_tool["function"] = wire_function
    return wire_tool


def map_request(
    request: Mapping[str, Any],
    provider: ProviderConfig,
    id_factory: IdFactory = generate_tool_call_id,
) -> TransformedRequest:
    """Map a unified chat request to the wire body and transport config.

    Args:
        request: The unified chat request.
        provider: Provider to send the request to.
        id_factory: Produces ids for tool calls that arrive without one.

    Returns:
        ``TransformedRequest(body, config)``.
    """
    messages = [
        convert_message(message, id_factory)
        for message in request.get("messages") or []
        if isinstance(message, Mapping)
    ]

    body: dict[str, Any] = {
        "messages": messages,
        "model": request.get("model"),
    }
    if "stream" in request:
        body["stream"] = request["stream"]

    # Falsy values count as unset, so a temperature of 0 is not forwarded
    if request.get("max_tokens"):
        body["max_tokens"] = request["max_tokens"]
    if request.get("temperature"):
        body["temperature"] = request["temperature"]
    if request.get("tool_choice"):
        body["tool_choice"] = request["tool_choice"]

    tools = [
        convert_tool(tool)
        for tool in request.get("tools") or []
        if isinstance(tool, Mapping)
    ]
    if tools:
        body["tools"] = tools

    config = RequestConfig(
        url=provider.parsed_url(),
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {provider.api_key}",
        },
    )
    logger.debug(
        "Mapped request for model %s: %d messages, %d tools",
        body["model"],
        len(messages),
        len(tools),
    )
    return TransformedRequest(body=body, config=config)

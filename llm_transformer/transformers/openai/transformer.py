"""Transformer for OpenAI-compatible chat completions APIs."""

import json
import logging
from typing import Any, Mapping

import httpx

from ...core.provider import ProviderConfig
from ..base import Transformer
from .request import IdFactory, TransformedRequest, generate_tool_call_id, map_request
from .response import map_response
from .stream import StreamReassembler, rebuild_response, transform_stream_response

logger = logging.getLogger("llm-transformer")


class OpenAITransformer(Transformer):
    """Unified <-> OpenAI chat completions.

    Responses are dispatched on their content type: JSON bodies are mapped
    whole, anything advertising a stream is reassembled frame by frame, and
    everything else is returned unchanged.
    """

    name = "openai"
    end_point = "/v1/chat/completions"

    def __init__(self, id_factory: IdFactory = generate_tool_call_id) -> None:
        self.id_factory = id_factory

    def transform_request_in(
        self, request: Mapping[str, Any], provider: ProviderConfig
    ) -> TransformedRequest:
        return map_request(request, provider, id_factory=self.id_factory)

    async def transform_response_out(self, response: httpx.Response) -> httpx.Response:
        content_type = response.headers.get("content-type", "")

        if "application/json" in content_type:
            await response.aread()
            try:
                payload = response.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                logger.warning(
                    f"Provider returned undecodable JSON (status {response.status_code}): {exc}"
                )
                return response
            unified = map_response(payload)
            body = json.dumps(unified, ensure_ascii=False, separators=(",", ":"))
            return rebuild_response(response, content=body.encode("utf-8"))

        if "stream" in content_type:
            return transform_stream_response(response, StreamReassembler())

        logger.debug(f"Passing through response with content type {content_type!r}")
        return response

"""OpenAI chat completions transformer."""

from .request import (
    RequestConfig,
    TransformedRequest,
    generate_tool_call_id,
    map_request,
    serialize_arguments,
)
from .response import map_response, map_stream_chunk
from .stream import ReassembledStream, StreamReassembler, transform_stream_response
from .transformer import OpenAITransformer

__all__ = [
    "OpenAITransformer",
    "ReassembledStream",
    "RequestConfig",
    "StreamReassembler",
    "TransformedRequest",
    "generate_tool_call_id",
    "map_request",
    "map_response",
    "map_stream_chunk",
    "serialize_arguments",
    "transform_stream_response",
]

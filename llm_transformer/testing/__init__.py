"""Test helpers for exercising transformers against an in-process upstream.

Requires the ``test`` extra (``pip install llm-transformer[test]``), which
provides FastAPI for the fake upstream app.
"""

from .fake_upstream import (
    FakeUpstream,
    UpstreamResponse,
    build_openai_response,
    build_openai_stream_chunks,
    encode_sse_event,
)

__all__ = [
    "FakeUpstream",
    "UpstreamResponse",
    "build_openai_response",
    "build_openai_stream_chunks",
    "encode_sse_event",
]

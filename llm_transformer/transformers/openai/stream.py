"""Stream reassembler for OpenAI chat completion SSE streams.

Rebuilds ``data:`` lines from an arbitrarily chunked byte stream, maps every
chunk to the unified stream format and re-emits it immediately:

    data: {"id":"1","choices":[{"delta":{"content":"a"},"index":0}]}
    data: [DONE]

becomes

    data: {"id":"1","choices":[{"index":0,"delta":{"content":"a"},"finish_reason":null}]}

    data: [DONE]

A frame that cannot be parsed is logged, recorded on ``errors`` and dropped;
the rest of the stream keeps flowing. Errors from the upstream reader are
re-raised to the consumer.
"""

import json
import logging
from typing import Any, AsyncIterable, AsyncIterator, Optional

import httpx

from ...core import sse
from ...core.exceptions import StreamFrameError
from ...core.provider import filter_response_headers
from .response import map_stream_chunk

logger = logging.getLogger("llm-transformer")


class StreamReassembler:
    """Converts a provider SSE byte stream into unified SSE frames.

    One instance serves exactly one stream; it owns the line buffer.
    """

    def __init__(self, state: Optional[sse.StreamState] = None) -> None:
        self.state = state or sse.StreamState()
        self.errors: list[StreamFrameError] = []
        self.frames_emitted = 0

    def process_line(self, line: str) -> Optional[bytes]:
        """Map one complete line to an output frame, or ``None`` to skip it."""
        if not line.startswith(sse.DATA_PREFIX):
            return None

        payload = line[len(sse.DATA_PREFIX):].strip()
        if payload == sse.DONE_SENTINEL:
            return sse.DONE_FRAME
        if not payload:
            return None

        logger.debug("openai stream chunk: %s", payload)
        try:
            chunk = json.loads(payload)
        except json.JSONDecodeError as exc:
            self._record_error(payload, f"invalid JSON in stream chunk: {exc.msg}")
            return None
        if not isinstance(chunk, dict):
            self._record_error(
                payload, f"stream chunk is not a JSON object: {type(chunk).__name__}"
            )
            return None

        return sse.encode_frame(map_stream_chunk(chunk))

    def feed(self, data: bytes) -> list[bytes]:
        """Consume raw bytes and return the frames completed by them."""
        return self._process_lines(sse.feed(self.state, data))

    def finish(self) -> list[bytes]:
        """Process the trailing fragment left when the stream ends without a newline."""
        return self._process_lines(sse.finish(self.state))

    def _process_lines(self, lines: list[str]) -> list[bytes]:
        frames: list[bytes] = []
        for line in lines:
            frame = self.process_line(line)
            if frame is not None:
                frames.append(frame)
        self.frames_emitted += len(frames)
        return frames

    def _record_error(self, line: str, message: str) -> None:
        logger.warning(f"Error parsing OpenAI stream chunk {line[:100]!r}: {message}")
        self.errors.append(StreamFrameError(message, line))

    async def reassemble(self, byte_stream: AsyncIterable[bytes]) -> AsyncIterator[bytes]:
        """Transform an upstream byte stream into unified SSE frames.

        Args:
            byte_stream: Raw provider SSE bytes, in arbitrary chunks.

        Yields:
            One ``data: ...\\n\\n`` frame per mapped event, in arrival order.
        """
        upstream = byte_stream.__aiter__()
        try:
            async for data in upstream:
                for frame in self.feed(data):
                    yield frame
            for frame in self.finish():
                yield frame
        except Exception as exc:
            logger.error(f"Upstream stream failed: {exc} (type: {exc.__class__.__name__})")
            raise
        finally:
            aclose = getattr(upstream, "aclose", None)
            if aclose is not None:
                await aclose()
            logger.debug(
                "Stream finished: %d frames emitted, %d frames dropped",
                self.frames_emitted,
                len(self.errors),
            )


class ReassembledStream(httpx.AsyncByteStream):
    """Response body that reassembles an upstream httpx streaming response.

    Closing it (explicitly or by consuming it to the end) stops the
    reassembler and releases the upstream response, exactly once.
    """

    def __init__(self, upstream: httpx.Response, reassembler: StreamReassembler) -> None:
        self.upstream = upstream
        self.reassembler = reassembler
        # Decoded bytes, so an upstream content-encoding never leaks through
        self._frames = reassembler.reassemble(upstream.aiter_bytes())
        self._closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        async for frame in self._frames:
            yield frame

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._frames.aclose()
        finally:
            await self.upstream.aclose()


def _response_request(response: httpx.Response) -> Optional[httpx.Request]:
    try:
        return response.request
    except RuntimeError:
        return None


def rebuild_response(
    response: httpx.Response,
    *,
    content: Optional[bytes] = None,
    stream: Optional[httpx.AsyncByteStream] = None,
) -> httpx.Response:
    """Build a response with a new body and the original status, reason and headers."""
    extensions: dict[str, Any] = {
        "reason_phrase": response.reason_phrase.encode("ascii", errors="replace"),
    }
    if "http_version" in response.extensions:
        extensions["http_version"] = response.extensions["http_version"]
    return httpx.Response(
        status_code=response.status_code,
        headers=filter_response_headers(response.headers),
        content=content,
        stream=stream,
        request=_response_request(response),
        extensions=extensions,
    )


def transform_stream_response(
    response: httpx.Response,
    reassembler: Optional[StreamReassembler] = None,
) -> httpx.Response:
    """Wrap a streaming provider response so its body yields unified frames."""
    reassembler = reassembler or StreamReassembler()
    return rebuild_response(response, stream=ReassembledStream(response, reassembler))

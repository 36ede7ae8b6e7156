"""SSE (Server-Sent Events) line reconstruction and framing."""

import codecs
import json
from dataclasses import dataclass, field
from typing import Any

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"
DONE_FRAME = b"data: [DONE]\n\n"


def _utf8_decoder() -> codecs.IncrementalDecoder:
    return codecs.getincrementaldecoder("utf-8")(errors="replace")


@dataclass
class StreamState:
    """Carry-over state for rebuilding lines from an arbitrarily chunked stream.

    ``carry`` holds the trailing fragment that has not seen its newline yet.
    The decoder keeps partial multi-byte sequences between chunks.
    """

    carry: str = ""
    decoder: codecs.IncrementalDecoder = field(default_factory=_utf8_decoder)


def feed(state: StreamState, data: bytes) -> list[str]:
    """Append ``data`` to the carry-over and return every complete line."""
    if not data:
        return []
    state.carry += state.decoder.decode(data)
    lines = state.carry.split("\n")
    state.carry = lines.pop()
    return lines


def finish(state: StreamState) -> list[str]:
    """Return the final unterminated fragment, if any, and reset the state."""
    leftover = state.carry + state.decoder.decode(b"", final=True)
    state.carry = ""
    state.decoder.reset()
    if not leftover:
        return []
    return [leftover]


def encode_frame(payload: Any) -> bytes:
    """Serialize a payload as one ``data: <json>`` frame."""
    json_str = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return f"{DATA_PREFIX}{json_str}\n\n".encode("utf-8")

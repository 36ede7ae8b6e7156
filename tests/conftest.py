"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Generator, Iterable

import pytest

from llm_transformer.core.provider import ProviderConfig


# =============================================================================
# Stream Helpers
# =============================================================================


async def aiter_chunks(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    """Yield byte chunks as an async stream."""
    for chunk in chunks:
        yield chunk


def split_every(payload: bytes, size: int) -> list[bytes]:
    """Split a payload into chunks of ``size`` bytes."""
    return [payload[i:i + size] for i in range(0, len(payload), size)]


def parse_frames(data: bytes) -> list[Any]:
    """Parse joined ``data: ...\\n\\n`` frames into payloads ("[DONE]" kept as a string)."""
    frames: list[Any] = []
    for raw in data.decode("utf-8").split("\n\n"):
        if not raw:
            continue
        assert raw.startswith("data: "), raw
        payload = raw[len("data: "):]
        frames.append(payload if payload == "[DONE]" else json.loads(payload))
    return frames


class RecordingIdFactory:
    """Deterministic tool call id factory that counts its calls."""

    def __init__(self, prefix: str = "call_test_") -> None:
        self.prefix = prefix
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"{self.prefix}{self.calls}"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def provider() -> ProviderConfig:
    return ProviderConfig(
        name="fake",
        base_url="http://upstream.local",
        api_key="test-key",
    )


@pytest.fixture
def id_factory() -> RecordingIdFactory:
    return RecordingIdFactory()


@pytest.fixture
def restore_transformers() -> Generator[None, None, None]:
    """Reset the transformer registry after the test.

    Use this fixture in tests that register their own transformers.
    """
    from llm_transformer.transformers import clear_transformers

    yield
    clear_transformers()

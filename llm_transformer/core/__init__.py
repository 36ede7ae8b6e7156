"""Core module initialization."""

from .exceptions import (
    ConfigurationError,
    InvalidProviderConfigError,
    StreamFrameError,
    TransformerError,
    TransformerNotFoundError,
)
from .provider import (
    ProviderConfig,
    filter_response_headers,
    format_httpx_error,
    mask_headers,
)
from .sse import StreamState

__all__ = [
    "ConfigurationError",
    "InvalidProviderConfigError",
    "ProviderConfig",
    "StreamFrameError",
    "StreamState",
    "TransformerError",
    "TransformerNotFoundError",
    "filter_response_headers",
    "format_httpx_error",
    "mask_headers",
]

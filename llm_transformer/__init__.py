"""llm-transformer - unified chat format <-> provider wire format

Translates provider-agnostic chat requests into OpenAI-compatible chat
completions requests, and maps the provider's JSON and SSE responses back
into the unified shape.

This module provides:
- OpenAITransformer: request/response mapping plus stream reassembly
- A registry of transformers by name
- send_chat_request: a thin httpx helper that ties it together

Example:
    >>> import httpx
    >>> from llm_transformer import ProviderConfig, send_chat_request
    >>> provider = ProviderConfig(name="openai", base_url="https://api.openai.com", api_key="sk-...")
    >>> async with httpx.AsyncClient() as client:
    ...     response = await send_chat_request(
    ...         client,
    ...         {"messages": [{"role": "user", "content": "hi"}], "model": "gpt-4o", "stream": False},
    ...         provider,
    ...     )
"""

from .logging import logger, setup_logging
from .config_loader import load_config, load_providers
from .core import (
    ConfigurationError,
    InvalidProviderConfigError,
    ProviderConfig,
    StreamFrameError,
    TransformerError,
    TransformerNotFoundError,
)
from .dispatch import send_chat_request
from .transformers import (
    OpenAITransformer,
    StreamReassembler,
    Transformer,
    get_transformer,
    register_transformer,
)

__all__ = [
    "ConfigurationError",
    "InvalidProviderConfigError",
    "OpenAITransformer",
    "ProviderConfig",
    "StreamFrameError",
    "StreamReassembler",
    "Transformer",
    "TransformerError",
    "TransformerNotFoundError",
    "get_transformer",
    "load_config",
    "load_providers",
    "logger",
    "register_transformer",
    "send_chat_request",
    "setup_logging",
]

"""Transformers between the unified chat format and provider wire formats."""

from .base import Transformer
from .openai import OpenAITransformer, StreamReassembler
from .registry import (
    clear_transformers,
    get_transformer,
    list_transformers,
    register_transformer,
)

__all__ = [
    "OpenAITransformer",
    "StreamReassembler",
    "Transformer",
    "clear_transformers",
    "get_transformer",
    "list_transformers",
    "register_transformer",
]

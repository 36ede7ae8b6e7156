"""Registry of transformers by name."""

from __future__ import annotations

import logging

from ..core.exceptions import TransformerNotFoundError
from .base import Transformer
from .openai import OpenAITransformer

logger = logging.getLogger("llm-transformer")

_TRANSFORMERS: dict[str, Transformer] = {}


def _normalize_name(name: str) -> str:
    return name.strip().lower()


def register_transformer(transformer: Transformer) -> None:
    """Register a transformer under its ``name`` (replacing any previous one)."""
    if not transformer.name:
        raise ValueError("transformer name is required")
    normalized = _normalize_name(transformer.name)
    _TRANSFORMERS[normalized] = transformer
    logger.debug("Registered transformer '%s'", normalized)


def get_transformer(name: str) -> Transformer:
    """Return the transformer registered under ``name``."""
    transformer = _TRANSFORMERS.get(_normalize_name(name or ""))
    if transformer is None:
        raise TransformerNotFoundError(f"No transformer registered for '{name}'")
    return transformer


def list_transformers() -> list[str]:
    return sorted(_TRANSFORMERS)


def clear_transformers() -> None:
    """Clear all registrations and restore the built-in ones (useful for tests)."""
    _TRANSFORMERS.clear()
    register_default_transformers()


def register_default_transformers() -> None:
    register_transformer(OpenAITransformer())


register_default_transformers()

"""Provider configuration and HTTP helpers."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx

from .exceptions import InvalidProviderConfigError

logger = logging.getLogger("llm-transformer")

DEFAULT_TIMEOUT = 60


@dataclass
class ProviderConfig:
    """Represents an upstream OpenAI-compatible provider."""

    name: str
    base_url: str
    api_key: str
    models: list[str] = field(default_factory=list)
    timeout: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProviderConfig":
        """Build a provider from a config entry.

        Accepts both ``base_url``/``api_key`` and ``baseUrl``/``apiKey``.
        """
        if not isinstance(data, Mapping):
            raise InvalidProviderConfigError(
                f"provider entry must be a mapping, got {type(data).__name__}"
            )
        name = str(data.get("name") or "").strip()
        base_url = str(data.get("base_url") or data.get("baseUrl") or "").strip()
        if not base_url:
            raise InvalidProviderConfigError(
                f"provider '{name or 'unnamed'}' has no base_url"
            )
        api_key = str(data.get("api_key") or data.get("apiKey") or "")
        raw_models = data.get("models") or []
        if isinstance(raw_models, str):
            raw_models = [raw_models]
        timeout = data.get("timeout")
        try:
            timeout = float(timeout) if timeout is not None else None
        except (TypeError, ValueError) as exc:
            raise InvalidProviderConfigError(
                f"provider '{name or 'unnamed'}' has invalid timeout: {timeout!r}"
            ) from exc
        return cls(
            name=name or base_url,
            base_url=base_url,
            api_key=api_key,
            models=[str(model) for model in raw_models],
            timeout=timeout,
        )

    def parsed_url(self) -> httpx.URL:
        """Return the base URL parsed verbatim."""
        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise InvalidProviderConfigError(
                f"provider '{self.name}' has invalid base_url: {self.base_url!r}"
            ) from exc
        if not url.scheme or not url.host:
            raise InvalidProviderConfigError(
                f"provider '{self.name}' has invalid base_url: {self.base_url!r}"
            )
        return url

    def build_url(self, path: str) -> str:
        """Join the base URL and an endpoint path without doubling ``/v1``."""
        base = self.base_url.rstrip("/")
        normalized_path = path or ""
        if not normalized_path.startswith("/"):
            normalized_path = f"/{normalized_path}"

        if base.endswith("/v1") and normalized_path.startswith("/v1"):
            normalized_path = normalized_path[len("/v1"):]
        return f"{base}{normalized_path}"


HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
}


def filter_response_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Filter response headers, removing ones that no longer match a re-encoded body."""
    filtered: dict[str, str] = {}
    for key, value in headers.items():
        key_lower = key.lower()
        if key_lower in HOP_BY_HOP_HEADERS or key_lower in {
            "content-length",
            "transfer-encoding",
            "content-encoding",
        }:
            continue
        filtered[key] = value
    return filtered


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of headers that is safe to log."""
    masked: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() not in {"authorization", "proxy-authorization"}:
            masked[key] = value
            continue
        if value.startswith("Bearer "):
            token = value[7:]
            masked[key] = f"Bearer {token[:3]}****" if token else value
        else:
            masked[key] = value[:3] + "****" if len(value) > 3 else "****"
    return masked


def format_httpx_error(
    exc: Any, provider: ProviderConfig, url: Optional[str] = None
) -> str:
    """Produce a detailed description of an httpx error."""
    parts = [exc.__class__.__name__]
    message = str(exc).strip()
    if message:
        parts.append(message)

    request = None
    try:
        request = exc.request
    except (AttributeError, RuntimeError):
        # httpx raises RuntimeError when the request was never attached
        pass
    if request is not None:
        parts.append(f"request={request.method} {request.url}")
    elif url:
        parts.append(f"url={url}")

    if isinstance(exc, httpx.TimeoutException):
        timeout = provider.timeout or DEFAULT_TIMEOUT
        parts.append(f"timeout={timeout}s")

    return "; ".join(parts)

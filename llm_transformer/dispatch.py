"""Send unified chat requests to a provider over httpx.

This is the thin transport boundary around the transformers: it appends the
transformer endpoint to the provider base URL, sends the mapped body and
pipes the reply back through ``transform_response_out``. Retries and routing
belong to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .core.provider import DEFAULT_TIMEOUT, ProviderConfig, format_httpx_error, mask_headers
from .transformers import Transformer, get_transformer

logger = logging.getLogger("llm-transformer")


async def send_chat_request(
    client: httpx.AsyncClient,
    request: Mapping[str, Any],
    provider: ProviderConfig,
    transformer: Optional[Transformer] = None,
) -> httpx.Response:
    """Send a unified chat request and return the unified response.

    Streaming requests return a response whose body has not been read yet;
    the caller iterates it with ``aiter_bytes()`` and must close it.
    Responses with an error status are returned untransformed.

    Raises:
        httpx.HTTPError: Transport failures propagate unchanged.
    """
    transformer = transformer or get_transformer("openai")
    body, config = transformer.transform_request_in(request, provider)
    url = provider.build_url(transformer.end_point)
    stream = bool(body.get("stream"))

    timeout = provider.timeout or DEFAULT_TIMEOUT
    # Streams may idle between chunks for a long time; only bound the setup
    request_timeout = httpx.Timeout(
        connect=timeout, read=None if stream else timeout, write=timeout, pool=timeout
    )
    http_request = client.build_request(
        "POST", url, headers=config.headers, json=body, timeout=request_timeout
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Sending %s request to %s with headers %s",
            "streaming" if stream else "non-streaming",
            url,
            mask_headers(config.headers),
        )

    try:
        response = await client.send(http_request, stream=stream)
    except httpx.HTTPError as exc:
        logger.error(f"Request to provider {provider.name} failed: {format_httpx_error(exc, provider, url)}")
        raise

    if response.status_code >= 400:
        await response.aread()
        logger.warning(
            f"Provider {provider.name} returned error status {response.status_code}"
        )
        return response

    logger.info(f"Request to {url} successful, status {response.status_code}")
    return await transformer.transform_response_out(response)

"""Base interface shared by all transformers."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

from ..core.provider import ProviderConfig


class Transformer(ABC):
    """Translates between the unified format and one provider wire format.

    Attributes:
        name: Registry name of the transformer.
        end_point: Path appended to the provider base URL by the caller.
    """

    name: str = ""
    end_point: str = ""

    @abstractmethod
    def transform_request_in(
        self, request: Mapping[str, Any], provider: ProviderConfig
    ) -> Any:
        """Map a unified request to the provider body and transport config."""

    @abstractmethod
    async def transform_response_out(self, response: httpx.Response) -> httpx.Response:
        """Map a provider response (JSON or stream) back to the unified format."""

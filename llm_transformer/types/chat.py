"""Types for the unified chat format and the OpenAI-compatible wire format.

Runtime values are plain dicts (as they arrive from JSON), so the shapes are
described with ``TypedDict``. Types are separated into:
- Unified types: what callers hand to the transformer and get back
- Wire types: what the OpenAI-compatible provider speaks
"""

from enum import Enum
from typing import Any
from typing_extensions import TypedDict


class Role(str, Enum):
    """Closed set of message roles understood by the wire API."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        """Return the matching role, falling back to ``USER`` for anything else."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.USER


# =============================================================================
# Unified Types
# =============================================================================


class FunctionCall(TypedDict, total=False):
    """A function call within a tool call.

    Attributes:
        name: Name of the function to call. Absent on streamed follow-up
            chunks where the name was already stated.
        arguments: JSON string with the call arguments. Callers may hand in
            a raw object on the unified side; the wire always gets a string.
    """
    name: str | None
    arguments: Any


class ToolCall(TypedDict, total=False):
    """A tool call requested by the assistant.

    Attributes:
        id: Identifier used to match tool results. Generated when missing.
        type: Always "function".
        function: The function to call with its arguments.
        index: Position in the tool_calls array, streaming only.
    """
    id: str
    type: str
    function: FunctionCall
    index: int


class ContentPart(TypedDict, total=False):
    """A content part for multi-modal messages.

    Attributes:
        type: "text" or "image_url". Other types are forwarded untouched.
        text: Text content (for "text" parts).
        image_url: Object holding the "url" (for "image_url" parts).
    """
    type: str
    text: str | None
    image_url: dict[str, Any] | None


class UnifiedMessage(TypedDict, total=False):
    """A message in a unified chat request.

    Attributes:
        role: "system", "user", "assistant" or "tool". Unknown roles are
            sent as "user".
        content: A string or an ordered list of ContentPart.
        name: Optional speaker name.
        tool_calls: Tool calls issued by the assistant.
        tool_call_id: ID of the tool call this message answers.
    """
    role: str
    content: str | list[ContentPart] | None
    name: str | None
    tool_calls: list[ToolCall] | None
    tool_call_id: str | None


class ToolFunction(TypedDict, total=False):
    name: str
    description: str | None
    parameters: dict[str, Any] | None


class ToolDefinition(TypedDict, total=False):
    """A tool the model may call."""
    type: str
    function: ToolFunction


class UnifiedChatRequest(TypedDict, total=False):
    """A provider-agnostic chat completion request."""
    messages: list[UnifiedMessage]
    model: str
    stream: bool
    max_tokens: int | None
    temperature: float | None
    tool_choice: str | dict[str, Any] | None
    tools: list[ToolDefinition] | None


class Usage(TypedDict, total=False):
    """Token usage information.

    Values are copied from the provider without defaulting, so ``None``
    means the provider did not report the figure.
    """
    prompt_tokens: int | None
    completion_tokens: int | None
    total_tokens: int | None


class ResponseMessage(TypedDict, total=False):
    content: str | None
    role: str
    tool_calls: list[ToolCall]


class ResponseChoice(TypedDict, total=False):
    finish_reason: str | None
    index: int
    message: ResponseMessage


class UnifiedResponse(TypedDict):
    """A complete (non-streaming) unified chat response."""
    id: str | None
    choices: list[ResponseChoice]
    created: int | None
    model: str | None
    object: str | None
    usage: Usage


class Delta(TypedDict, total=False):
    """A streamed fragment of the assistant message.

    Keys are only present when the provider sent them, so callers can merge
    deltas across frames without clobbering earlier values.
    """
    role: str | None
    content: str | None
    tool_calls: list[ToolCall]


class StreamChoice(TypedDict, total=False):
    index: int
    delta: Delta
    finish_reason: str | None


class UnifiedStreamChunk(TypedDict, total=False):
    """One normalized frame of a streamed unified response."""
    id: str
    object: str
    created: int
    model: str
    choices: list[StreamChoice]
    usage: Usage


# =============================================================================
# Wire Types
# =============================================================================
# Shapes as sent by OpenAI-compatible providers. Everything is optional
# because providers routinely omit fields.


class WireChoice(TypedDict, total=False):
    index: int
    message: dict[str, Any] | None
    delta: dict[str, Any] | None
    finish_reason: str | None


class ChatCompletionResponse(TypedDict, total=False):
    id: str
    object: str
    created: int
    model: str
    choices: list[WireChoice]
    usage: Usage | None


class ChatCompletionChunk(TypedDict, total=False):
    id: str
    object: str
    created: int
    model: str
    choices: list[WireChoice]
    usage: Usage | None

"""Type definitions for the transformer."""

from .chat import (
    ChatCompletionChunk,
    ChatCompletionResponse,
    ContentPart,
    Delta,
    FunctionCall,
    ResponseChoice,
    ResponseMessage,
    Role,
    StreamChoice,
    ToolCall,
    ToolDefinition,
    ToolFunction,
    UnifiedChatRequest,
    UnifiedMessage,
    UnifiedResponse,
    UnifiedStreamChunk,
    Usage,
    WireChoice,
)

__all__ = [
    "ChatCompletionChunk",
    "ChatCompletionResponse",
    "ContentPart",
    "Delta",
    "FunctionCall",
    "ResponseChoice",
    "ResponseMessage",
    "Role",
    "StreamChoice",
    "ToolCall",
    "ToolDefinition",
    "ToolFunction",
    "UnifiedChatRequest",
    "UnifiedMessage",
    "UnifiedResponse",
    "UnifiedStreamChunk",
    "Usage",
    "WireChoice",
]

"""Core exceptions for the transformer."""


class TransformerError(Exception):
    """Base exception for transformer errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(TransformerError):
    """Raised when there's an issue with the configuration."""
    pass


class InvalidProviderConfigError(TransformerError):
    """Raised when a provider entry cannot be used to reach an upstream."""
    pass


class TransformerNotFoundError(TransformerError):
    """Raised when a requested transformer is not registered."""
    pass


class StreamFrameError(TransformerError):
    """Describes a stream frame that was dropped because it could not be parsed.

    Recorded on the reassembler rather than raised; one bad frame never ends
    the stream.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line

"""Tests for the exceptions module."""

import pytest

from llm_transformer.core.exceptions import (
    ConfigurationError,
    InvalidProviderConfigError,
    StreamFrameError,
    TransformerError,
    TransformerNotFoundError,
)


class TestTransformerError:
    """Tests for the base TransformerError exception."""

    def test_creates_error_with_message(self):
        error = TransformerError("test error message")
        assert error.message == "test error message"
        assert str(error) == "test error message"

    @pytest.mark.parametrize(
        "error_class",
        [ConfigurationError, InvalidProviderConfigError, TransformerNotFoundError],
    )
    def test_subclasses_inherit_message(self, error_class):
        error = error_class("boom")
        assert isinstance(error, TransformerError)
        assert error.message == "boom"


class TestStreamFrameError:
    """Tests for StreamFrameError."""

    def test_keeps_offending_line(self):
        error = StreamFrameError("invalid JSON", "{oops")
        assert error.message == "invalid JSON"
        assert error.line == "{oops"
        assert isinstance(error, TransformerError)

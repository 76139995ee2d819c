"""Tests for argument checks and error codes."""

import pytest
from hypothesis import given

from kida_ajax import ErrorCode, InvalidArgumentError, not_empty, not_none

from .strategies import blank, dom_id


class TestNotEmpty:
    """not_empty() validation."""

    @given(value=dom_id)
    def test_returns_value(self, value):
        assert not_empty(value, "x") is value

    @given(value=blank)
    def test_blank_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            not_empty(value, "x")

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            not_empty(None, "x")

    def test_message_names_argument(self):
        with pytest.raises(InvalidArgumentError, match="'templateId' may not be empty"):
            not_empty("", "templateId")

    def test_error_code(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            not_empty("", "x")
        assert exc_info.value.code is ErrorCode.EMPTY_ARGUMENT
        assert "KA-ARG-001" in str(exc_info.value)


class TestNotNone:
    """not_none() validation."""

    def test_returns_value(self):
        assert not_none(0, "x") == 0

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            not_none(None, "x")
        assert exc_info.value.code is ErrorCode.NULL_ARGUMENT


class TestErrorCode:
    """Error code metadata."""

    def test_docs_url(self):
        assert ErrorCode.EMPTY_ARGUMENT.docs_url.endswith("#ka-arg-001")

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.EMPTY_ARGUMENT, "argument"),
            (ErrorCode.RESOURCE_NOT_FOUND, "resource"),
            (ErrorCode.CIRCULAR_DEPENDENCY, "header"),
            (ErrorCode.ALREADY_CONFIGURED, "configuration"),
        ],
    )
    def test_category(self, code, category):
        assert code.category == category

"""Tests for ServiceError and ErrorCategory."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError
from structlog.testing import capture_logs

from domain.exceptions import DEFAULT_MESSAGE, ErrorCategory, ServiceError, format_message


class TestErrorCategory:
    """Test ErrorCategory enum."""

    def test_category_values(self) -> None:
        """Test that ErrorCategory has exactly the expected members."""
        assert [category.value for category in ErrorCategory] == [
            "GENERAL",
            "CONFIG",
            "DATABASE",
            "VALIDATION",
            "SERVICE",
        ]

    def test_category_string_comparison(self) -> None:
        """Test that categories compare equal to their string value."""
        assert ErrorCategory.VALIDATION == "VALIDATION"

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ValueError("bad"), ErrorCategory.VALIDATION),
            (TypeError("bad"), ErrorCategory.VALIDATION),
            (ConnectionError("down"), ErrorCategory.SERVICE),
            (TimeoutError("slow"), ErrorCategory.SERVICE),
            (RuntimeError("boom"), ErrorCategory.GENERAL),
            (ServiceError("db", category=ErrorCategory.DATABASE), ErrorCategory.DATABASE),
        ],
    )
    def test_for_exception(self, exc: BaseException, expected: ErrorCategory) -> None:
        """Test classification of native exceptions."""
        assert ErrorCategory.for_exception(exc) is expected

    def test_for_exception_pydantic_validation_error(self) -> None:
        """Test that pydantic validation failures are classified as VALIDATION."""

        class Model(BaseModel):
            size: int

        with pytest.raises(ValidationError) as exc_info:
            Model(size="not a number")

        assert ErrorCategory.for_exception(exc_info.value) is ErrorCategory.VALIDATION


class TestFormatMessage:
    """Test placeholder substitution."""

    def test_substitutes_in_order(self) -> None:
        assert format_message("Value {} and {}", "a", "b") == "Value a and b"

    def test_surplus_tokens_stay_literal(self) -> None:
        assert format_message("Value {} and {}", "a") == "Value a and {}"

    def test_surplus_params_are_ignored(self) -> None:
        assert format_message("Value {}", "a", "b", "c") == "Value a"

    def test_no_tokens(self) -> None:
        assert format_message("No tokens here", 1) == "No tokens here"

    def test_other_braces_untouched(self) -> None:
        """Test that indexed or named braces are not interpreted."""
        assert format_message("{0} {name} {}", 42) == "{0} {name} 42"

    def test_params_are_stringified(self) -> None:
        assert format_message("{} items, ok={}", 3, True) == "3 items, ok=True"


class TestServiceError:
    """Test ServiceError construction."""

    def test_message_only(self) -> None:
        error = ServiceError("Something failed")
        assert error.message == "Something failed"
        assert str(error) == "Something failed"
        assert error.category is ErrorCategory.GENERAL
        assert error.cause is None

    def test_message_without_params_is_not_formatted(self) -> None:
        error = ServiceError("Literal {} stays")
        assert error.message == "Literal {} stays"

    def test_message_with_params(self) -> None:
        error = ServiceError("Value {} and {}", "a", "b", category=ErrorCategory.VALIDATION)
        assert error.message == "Value a and b"
        assert error.category is ErrorCategory.VALIDATION

    def test_cause_only_uses_default_message(self) -> None:
        cause = RuntimeError("root")
        error = ServiceError(cause=cause)
        assert error.message == DEFAULT_MESSAGE
        assert error.category is ErrorCategory.GENERAL

    def test_cause_round_trip_is_identical(self) -> None:
        cause = KeyError("missing")
        error = ServiceError("wrapped", cause=cause, category=ErrorCategory.DATABASE)
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_category_none_defaults_to_general(self) -> None:
        error = ServiceError("msg", category=None)
        assert error.category is ErrorCategory.GENERAL

    def test_attributes_are_read_only(self) -> None:
        error = ServiceError("msg", category=ErrorCategory.CONFIG)
        with pytest.raises(AttributeError):
            error.category = ErrorCategory.GENERAL  # type: ignore[misc]
        with pytest.raises(AttributeError):
            error.message = "other"  # type: ignore[misc]
        assert error.category is ErrorCategory.CONFIG

    def test_construction_does_not_log(self) -> None:
        with capture_logs() as logs:
            ServiceError("quiet", category=ErrorCategory.SERVICE)
        assert logs == []

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(ServiceError, match="boom") as exc_info:
            raise ServiceError("boom", category=ErrorCategory.SERVICE)
        assert exc_info.value.category is ErrorCategory.SERVICE

    def test_repr(self) -> None:
        error = ServiceError("msg", category=ErrorCategory.DATABASE)
        assert repr(error) == "ServiceError(category=DATABASE, message='msg')"

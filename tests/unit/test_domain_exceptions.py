"""Tests for domain exceptions (error_code, message, details)."""

from clouddriver.domain.exceptions import (
    BackendUnavailableException,
    ClouddriverException,
    ConstraintViolationException,
    InvalidArgumentException,
    NotFoundException,
)


def test_base_exception_default_error_code() -> None:
    """ClouddriverException uses class name as error_code when not provided."""
    exc = ClouddriverException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ClouddriverException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict() -> None:
    exc = ClouddriverException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_not_found() -> None:
    exc = NotFoundException("provider", "cluster-a")
    assert exc.error_code == "NOT_FOUND"
    assert exc.message == "provider not found: cluster-a"
    assert exc.details == {"resource_type": "provider", "key": "cluster-a"}


def test_constraint_violation() -> None:
    exc = ConstraintViolationException("register_provider", "UNIQUE constraint failed")
    assert exc.error_code == "CONSTRAINT_VIOLATION"
    assert exc.details["reason"] == "UNIQUE constraint failed"


def test_invalid_argument_with_and_without_argument() -> None:
    assert InvalidArgumentException("no fields provided", argument="fields").details == {
        "argument": "fields"
    }
    exc = InvalidArgumentException("bad")
    assert exc.error_code == "INVALID_ARGUMENT"
    assert exc.details == {}


def test_backend_unavailable_is_catalog_error() -> None:
    exc = BackendUnavailableException("list_providers", "connection refused")
    assert isinstance(exc, ClouddriverException)
    assert exc.error_code == "BACKEND_UNAVAILABLE"
    assert exc.details == {"operation": "list_providers", "reason": "connection refused"}

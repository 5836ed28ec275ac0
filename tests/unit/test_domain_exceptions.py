"""Tests for domain and infrastructure exceptions (error_code, message, details)."""

import pytest

from elemo.domain.enums import ResourceType
from elemo.domain.exceptions import (
    ElemoException,
    InvalidIDException,
    ResourceNotFoundException,
    ValidationException,
)
from elemo.infrastructure.exceptions import (
    CacheDeleteException,
    CacheException,
    CacheReadException,
    CacheWriteException,
    DocumentCreateException,
    InvalidConfigException,
    InvalidDatabaseException,
    InvalidDriverException,
    InvalidPoolException,
    InvalidRepositoryException,
    IssueAddWatcherException,
    NoBucketException,
    NoClientException,
    NoDriverException,
    NoLoggerException,
    NoPoolException,
    NoTracerException,
    StorageException,
    WiringException,
)


def test_elemo_exception_default_error_code() -> None:
    """Base ElemoException uses class name as error_code when not provided."""
    exc = ElemoException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ElemoException"
    assert exc.details == {}


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}


def test_invalid_id_exception_is_validation() -> None:
    exc = InvalidIDException("a:b", "must not contain ':'")
    assert isinstance(exc, ValidationException)
    assert exc.details == {"field": "id", "value": "a:b"}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("Document", "D1")
    assert exc.message == "Document not found: D1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "Document", "resource_id": "D1"}


def test_storage_operation_exception_names_family_and_operation() -> None:
    exc = DocumentCreateException("owner missing", id="U1")
    assert isinstance(exc, StorageException)
    assert exc.message == "Document create failed: owner missing"
    assert exc.error_code == "DOCUMENT_CREATE_ERROR"
    assert exc.details == {"resource_type": "Document", "id": "U1"}


def test_storage_operation_exception_without_reason() -> None:
    exc = IssueAddWatcherException()
    assert exc.message == f"{ResourceType.ISSUE.value} add_watcher failed"
    assert exc.error_code == "ISSUE_ADD_WATCHER_ERROR"


@pytest.mark.parametrize(
    ("cls", "code"),
    [
        (CacheReadException, "CACHE_READ_ERROR"),
        (CacheWriteException, "CACHE_WRITE_ERROR"),
        (CacheDeleteException, "CACHE_DELETE_ERROR"),
    ],
)
def test_cache_exceptions(cls: type[CacheException], code: str) -> None:
    exc = cls("Document:D1", "timeout")
    assert exc.error_code == code
    assert exc.key == "Document:D1"
    assert exc.details == {"key": "Document:D1", "reason": "timeout"}
    assert not isinstance(exc, StorageException)


def test_wiring_exceptions_have_default_messages() -> None:
    assert NoClientException().message == "no cache client provided"
    assert InvalidRepositoryException().error_code == "WIRING_ERROR"
    assert isinstance(NoClientException("custom"), WiringException)
    assert NoClientException("custom").message == "custom"


@pytest.mark.parametrize(
    "cls",
    [
        InvalidDriverException,
        InvalidPoolException,
        InvalidDatabaseException,
        InvalidConfigException,
        NoDriverException,
        NoPoolException,
        NoBucketException,
        NoLoggerException,
        NoTracerException,
    ],
)
def test_every_wiring_exception_is_a_wiring_error(cls: type[WiringException]) -> None:
    exc = cls()
    assert isinstance(exc, WiringException)
    assert exc.message == cls.default_message

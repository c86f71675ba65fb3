"""Error Hierarchy tests — codes, categories and the REST envelope."""

from inspire_me.core.errors import (
    NO_QUOTES_MESSAGE, CorpusIntegrityError, EmptyResultError, ErrorCategory,
    ErrorContext, ErrorSeverity, InspireError,
)


def test_empty_result_is_a_404_warning():
    exc = EmptyResultError("life")
    assert isinstance(exc, InspireError)
    assert exc.http_status == 404
    assert exc.severity == ErrorSeverity.WARNING
    assert exc.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_empty_result_response_uses_user_message():
    body = EmptyResultError("life").to_response()
    assert body["error"]["code"] == "NO_QUOTES_FOUND"
    assert body["error"]["message"] == NO_QUOTES_MESSAGE
    assert body["error"]["context"]["topic"] == "life"


def test_empty_result_keeps_caller_user_message():
    ctx = ErrorContext(user_message="Nothing here")
    exc = EmptyResultError("x", context=ctx)
    assert exc.to_response()["error"]["message"] == "Nothing here"


def test_corpus_integrity_is_critical_500():
    exc = CorpusIntegrityError("duplicate id", "7")
    assert exc.http_status == 500
    assert exc.severity == ErrorSeverity.CRITICAL
    assert "'7'" in exc.message


def test_severity_and_category_serialize_to_str():
    assert ErrorSeverity.WARNING.value == "warning"
    assert ErrorCategory.INTERNAL.value == "internal"

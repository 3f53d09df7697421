import logging

from form_autofill.utils import env
from form_autofill.utils.log_sanitizer import (
    ValueRedactionFilter,
    loggable_value,
    mask_value,
    setup_sanitized_logging,
)


def test_mask_value():
    assert mask_value("山田太郎") == "山***"
    assert mask_value("a@example.com") == "***EMAIL_REDACTED***"
    assert mask_value("x") == "*"
    assert mask_value("") == ""
    assert mask_value(None) == ""
    assert mask_value(True) == "True"


def test_loggable_value_respects_sanitize_flag(monkeypatch):
    assert loggable_value("090") == "'090'"

    monkeypatch.setenv("FORM_AUTOFILL_LOG_SANITIZE", "true")
    env.reset_cache()
    assert loggable_value("090") == "0**"


def test_redaction_filter(monkeypatch):
    monkeypatch.setenv("FORM_AUTOFILL_LOG_SANITIZE", "1")
    env.reset_cache()
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "sent to %s", ("a@example.com",), None)
    assert ValueRedactionFilter().filter(record) is True
    assert record.getMessage() == "sent to ***EMAIL_REDACTED***"


def test_setup_sanitized_logging_attaches_to_handlers():
    log = logging.getLogger("form_autofill.test_sanitizer")
    handler = logging.NullHandler()
    log.addHandler(handler)
    try:
        setup_sanitized_logging("form_autofill.test_sanitizer")
        setup_sanitized_logging("form_autofill.test_sanitizer")
        assert sum(isinstance(f, ValueRedactionFilter) for f in handler.filters) == 1
    finally:
        log.removeHandler(handler)

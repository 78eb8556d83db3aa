import structlog

from authcore.core.logging import (
    REDACTED,
    LoggingContext,
    add_correlation_id,
    redact_credentials,
    rename_message_field,
)


def test_logging_context_binds_and_unbinds():
    with LoggingContext(correlation_id="cid_abc", pattern="auth.login.user"):
        bound = structlog.contextvars.get_contextvars()
        assert bound["correlation_id"] == "cid_abc"
        assert bound["pattern"] == "auth.login.user"

    bound = structlog.contextvars.get_contextvars()
    assert "correlation_id" not in bound
    assert "pattern" not in bound


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_abc"})

    assert event["correlation_id"] == "cid_abc"


def test_add_correlation_id_generates_value():
    event = add_correlation_id(None, "info", {})

    assert event["correlation_id"].startswith("cid_")


def test_rename_message_field():
    event = rename_message_field(None, "info", {"event": "User registered"})

    assert event == {"message": "User registered"}


def test_redact_credentials():
    event = redact_credentials(
        None, "info", {"event": "x", "password": "secret1", "token": "eyJ", "email": "a@x.com"}
    )

    assert event["password"] == REDACTED
    assert event["token"] == REDACTED
    assert event["email"] == "a@x.com"

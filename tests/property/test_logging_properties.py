"""Property tests for structured logging."""

from __future__ import annotations

import json
import logging

from hypothesis import given, settings, strategies as st

from storefront_client.logging_config import JsonFormatter

# --- Strategies ---

request_ids = st.uuids().map(str)
messages = st.text(min_size=1, max_size=100, alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._-/")
levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
methods = st.sampled_from(["GET", "POST"])
urls = st.from_regex(r"https://[a-z]{3,10}\.[a-z]{2,4}/api/[a-z]{1,10}", fullmatch=True)
status_codes = st.integers(min_value=100, max_value=599)
durations = st.floats(min_value=0.1, max_value=60000.0, allow_nan=False, allow_infinity=False)
secrets = st.text(min_size=4, max_size=30, alphabet="0123456789")


def _make_record(
    message: str,
    level: str = "INFO",
    request_id: str | None = None,
    **extra: object,
) -> logging.LogRecord:
    """Create a LogRecord with optional extra attributes."""
    record = logging.LogRecord(
        name="test",
        level=getattr(logging, level),
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if request_id is not None:
        record.request_id = request_id  # type: ignore[attr-defined]
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@settings(max_examples=100)
@given(message=messages, level=levels, request_id=request_ids)
def test_structured_log_format_basic(message: str, level: str, request_id: str) -> None:
    output = JsonFormatter().format(_make_record(message, level=level, request_id=request_id))
    parsed = json.loads(output)

    assert parsed["request_id"] == request_id
    assert parsed["level"] == level
    assert parsed["message"] == message
    assert "timestamp" in parsed


@settings(max_examples=100)
@given(
    request_id=request_ids,
    method=methods,
    url=urls,
    status_code=status_codes,
    duration=durations,
)
def test_request_fields_included(
    request_id: str, method: str, url: str, status_code: int, duration: float
) -> None:
    record = _make_record(
        "request done",
        request_id=request_id,
        method=method,
        url=url,
        status_code=status_code,
        duration_ms=duration,
    )
    parsed = json.loads(JsonFormatter().format(record))

    assert parsed["method"] == method
    assert parsed["url"] == url
    assert parsed["status_code"] == status_code
    assert parsed["duration_ms"] == duration


def test_request_fields_absent_when_not_set() -> None:
    parsed = json.loads(JsonFormatter().format(_make_record("plain")))

    assert parsed["request_id"] is None
    for key in ("method", "url", "status_code", "duration_ms", "error_reason"):
        assert key not in parsed


@settings(max_examples=100)
@given(secret=secrets, key=st.sampled_from(["token", "password", "api_key", "Authorization"]))
def test_secrets_redacted(secret: str, key: str) -> None:
    record = _make_record(f"sending {key}={secret}", error_reason=f"{key}: {secret}")
    parsed = json.loads(JsonFormatter().format(record))

    assert secret not in parsed["message"]
    assert "[REDACTED]" in parsed["message"]
    assert secret not in parsed["error_reason"]

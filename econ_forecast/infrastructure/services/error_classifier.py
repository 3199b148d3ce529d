"""
Infrastructure Service - Error Classifier

Maps any failure raised or returned by the pipeline, or by the HTTP
transport, onto the fixed ``ErrorKind`` taxonomy. Classification is a pure
function of the failure: messages for transport, server and unknown
failures are fixed strings and never echo the raw exception text.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from econ_forecast.domain.entities.errors import (
    ClassifiedError,
    ErrorKind,
    ForecastServiceError,
    ValidationErrorKind,
    ValidationFailure,
)

logger = structlog.get_logger(__name__)

MESSAGES = {
    ErrorKind.NETWORK: (
        "Cannot reach the forecasting service. Check your connection and try again."
    ),
    ErrorKind.TIMEOUT: (
        "The forecasting service took too long to respond. Please try again."
    ),
    ErrorKind.CLIENT_ERROR: "The request was rejected by the forecasting service.",
    ErrorKind.SERVER_ERROR: (
        "The forecasting service is temporarily unavailable. Please try again later."
    ),
    ErrorKind.UNKNOWN: "An unexpected error occurred.",
}

# Longer plain-text bodies are not shown to users.
MAX_TEXT_MESSAGE_LENGTH = 200

RETRYABLE = {
    ErrorKind.NETWORK: True,
    ErrorKind.TIMEOUT: True,
    ErrorKind.CLIENT_ERROR: False,
    ErrorKind.SERVER_ERROR: True,
    ErrorKind.VALIDATION: False,
    ErrorKind.UNKNOWN: False,
}


def _fixed(kind: ErrorKind) -> ClassifiedError:
    return ClassifiedError(kind=kind, message=MESSAGES[kind], retryable=RETRYABLE[kind])


def _from_validation(failure: ValidationFailure) -> ClassifiedError:
    return ClassifiedError(
        kind=ErrorKind.VALIDATION,
        message=failure.message,
        retryable=False,
        fields=tuple(failure.fields),
        detail=failure.kind.value,
        context=dict(failure.context),
    )


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _body_message(response: httpx.Response, body: Any) -> Optional[str]:
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
    if body is None:
        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("text/plain"):
            return None
        text = response.text.strip()
        if not text or len(text) > MAX_TEXT_MESSAGE_LENGTH:
            return None
        return text
    return None


def _validation_envelope(body: Any) -> Optional[ClassifiedError]:
    """Rebuild a validation error from the service's 422 response body."""
    if not isinstance(body, dict) or body.get("kind") != ErrorKind.VALIDATION.value:
        return None
    detail = body.get("detail")
    known = {kind.value for kind in ValidationErrorKind}
    fields = body.get("fields") or []
    context = body.get("context")
    return ClassifiedError(
        kind=ErrorKind.VALIDATION,
        message=str(body.get("message") or MESSAGES[ErrorKind.CLIENT_ERROR]),
        retryable=False,
        fields=tuple(str(name) for name in fields),
        detail=detail if detail in known else None,
        context=dict(context) if isinstance(context, dict) else {},
    )


def _from_response(response: httpx.Response) -> ClassifiedError:
    status = response.status_code
    if 400 <= status < 500:
        body = _response_body(response)
        validation = _validation_envelope(body)
        if validation is not None:
            return validation
        message = _body_message(response, body) or MESSAGES[ErrorKind.CLIENT_ERROR]
        return ClassifiedError(
            kind=ErrorKind.CLIENT_ERROR, message=message, retryable=False
        )
    if 500 <= status < 600:
        return _fixed(ErrorKind.SERVER_ERROR)
    logger.warning("error_classifier.unexpected_status", status_code=status)
    return _fixed(ErrorKind.UNKNOWN)


def classify(failure: Any) -> ClassifiedError:
    """Classify a failure into the caller-facing taxonomy."""

    if isinstance(failure, ClassifiedError):
        return failure
    if isinstance(failure, ForecastServiceError):
        return failure.error
    if isinstance(failure, ValidationFailure):
        return _from_validation(failure)
    # Timeouts first: httpx.ConnectTimeout is also a transport error.
    if isinstance(failure, (httpx.TimeoutException, TimeoutError)):
        return _fixed(ErrorKind.TIMEOUT)
    if isinstance(failure, httpx.HTTPStatusError):
        return _from_response(failure.response)
    if isinstance(failure, httpx.Response):
        return _from_response(failure)
    if isinstance(failure, (httpx.TransportError, ConnectionError)):
        return _fixed(ErrorKind.NETWORK)

    logger.error(
        "error_classifier.unknown_failure",
        failure_type=type(failure).__name__,
        error=str(failure),
    )
    return _fixed(ErrorKind.UNKNOWN)

"""Helpers de logging para chamadas à API SendWithUs (sem PII)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_MAX_LOGGED_BODY_CHARS = 1000


def log_success(method: str, endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "sendwithus_request_succeeded",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_http_error(method: str, endpoint: str, status_code: int) -> None:
    """Loga resposta não-2xx; o tratamento fica com o chamador."""
    logger.warning(
        "sendwithus_request_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_response_body(method: str, endpoint: str, body_text: str) -> None:
    """Loga corpo da resposta (truncado). Usado apenas com debug=True."""
    if len(body_text) > _MAX_LOGGED_BODY_CHARS:
        body_text = body_text[:_MAX_LOGGED_BODY_CHARS] + "..."
    logger.debug(
        "sendwithus_response_body",
        extra={"method": method, "endpoint": endpoint, "response_text": body_text},
    )

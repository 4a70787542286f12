"""Montagem de endpoints com query string (logs)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

LOG_QUERY_KEYS: tuple[str, ...] = (
    "count",
    "offset",
    "created_gt",
    "created_gte",
    "created_lt",
    "created_lte",
)

CUSTOMER_LOG_QUERY_KEYS: tuple[str, ...] = ("count", "created_gt", "created_lt")


def build_query_endpoint(
    endpoint: str,
    options: Mapping[str, Any] | None,
    allowed_keys: tuple[str, ...],
) -> str:
    """Anexa ?k=v ao endpoint para as opções permitidas e não-None.

    A ordem dos parâmetros segue allowed_keys; chaves fora dela são ignoradas.

    Exemplo:
        build_query_endpoint("logs", {"count": 2}, LOG_QUERY_KEYS) -> "logs?count=2"
    """
    options = options or {}
    params = [(key, options[key]) for key in allowed_keys if options.get(key) is not None]
    if not params:
        return endpoint
    return f"{endpoint}?{urlencode(params)}"

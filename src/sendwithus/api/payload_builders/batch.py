"""Normalização de chamadas para o endpoint batch.

A API executa e reporta os itens do batch pela posição, então a ordem
de entrada é preservada.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sendwithus.api.paths import request_path
from sendwithus.domain.batch import BatchItem, NormalizedBatchRequest
from sendwithus.utils.errors import BatchRequestError

REQUIRED_KEYS: tuple[str, ...] = ("endpoint", "method", "payload")


def coerce_batch_item(request: BatchItem | Mapping[str, Any]) -> BatchItem:
    """Converte um descritor em BatchItem.

    Raises:
        BatchRequestError: Se faltar endpoint, method ou payload.
    """
    if isinstance(request, BatchItem):
        return request
    if not isinstance(request, Mapping):
        raise BatchRequestError(
            "Each request must be a mapping containing endpoint, method, and payload keys"
        )
    missing = [key for key in REQUIRED_KEYS if key not in request]
    if missing:
        raise BatchRequestError(
            "Each request must be a mapping containing endpoint, method, and payload keys "
            f"(missing: {', '.join(missing)})"
        )
    return BatchItem(
        endpoint=request["endpoint"],
        method=request["method"],
        payload=request["payload"],
    )


def normalize_batch(
    requests: Iterable[BatchItem | Mapping[str, Any]],
    api_version: str,
) -> list[NormalizedBatchRequest]:
    """Valida todos os descritores e retorna registros na mesma ordem.

    Nenhum registro é produzido se qualquer descritor for inválido.
    """
    items = [coerce_batch_item(request) for request in requests]
    return [
        NormalizedBatchRequest(
            path=request_path(api_version, item.endpoint),
            method=str(item.method or "").upper(),
            body=item.payload,
        )
        for item in items
    ]


def build_batch_payload(
    requests: Iterable[BatchItem | Mapping[str, Any]],
    api_version: str,
) -> list[dict[str, Any]]:
    """Array JSON-serializável enviado ao endpoint batch."""
    return [record.to_dict() for record in normalize_batch(requests, api_version)]

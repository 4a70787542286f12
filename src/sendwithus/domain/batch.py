"""Contratos do batch: descritor de chamada e registro normalizado."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class HttpMethod(StrEnum):
    """Verbos aceitos pela API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True, slots=True)
class BatchItem:
    """Uma chamada lógica dentro de um batch.

    Attributes:
        endpoint: Segmento lógico (ex: "send", "customers/a@b.com")
        method: Verbo HTTP (qualquer caixa)
        payload: Corpo ainda não serializado
    """

    endpoint: str
    method: str
    payload: Any


@dataclass(frozen=True, slots=True)
class NormalizedBatchRequest:
    """Registro {path, method, body} enviado no array do batch."""

    path: str
    method: str
    body: Any

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "method": self.method, "body": self.body}


__all__ = ["BatchItem", "HttpMethod", "NormalizedBatchRequest"]

"""Protocolo HTTP usado pela fachada SendWithUsApi."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx


class SendWithUsHttpClientProtocol(Protocol):
    """Contrato mínimo do transporte da API."""

    def get(self, endpoint: str) -> httpx.Response: ...

    def post(self, endpoint: str, payload: Any = None) -> httpx.Response: ...

    def put(self, endpoint: str, payload: Any = None) -> httpx.Response: ...

    def delete(self, endpoint: str) -> httpx.Response: ...

    def close(self) -> None: ...

"""Cliente HTTP base (síncrono) para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples sobre httpx.Client.

    Uma requisição por chamada, sem retry: a resposta volta como veio e
    erros de transporte do httpx sobem para o chamador.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.Client:
        """httpx.Client criado na primeira requisição quando não injetado."""
        if self._http_client is None:
            self._http_client = httpx.Client(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
            )
        return self._http_client

    def request(
        self,
        method: str,
        url: str,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        return self.client.request(
            method,
            url,
            content=content,
            headers=merged_headers,
            timeout=self._config.timeout_seconds,
        )

    def close(self) -> None:
        """Fecha o httpx.Client se ele foi criado por esta instância."""
        if self._http_client is not None and self._owns_client:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

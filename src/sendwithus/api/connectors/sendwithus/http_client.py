"""Cliente HTTP especializado para a API SendWithUs.

Estende HttpClient com o que é específico da API:
- Resolução de endpoint lógico para /api/v{versão}/...
- Headers X-SWU-API-KEY e X-SWU-API-CLIENT
- Serialização JSON única do corpo
- Logging estruturado sem API key nem payloads
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from sendwithus.api.connectors.sendwithus.api_logging import (
    log_http_error,
    log_response_body,
    log_success,
)
from sendwithus.api.connectors.sendwithus.http_base import HttpClient, HttpClientConfig
from sendwithus.api.paths import request_path
from sendwithus.domain.batch import HttpMethod

if TYPE_CHECKING:
    import httpx

    from sendwithus.config.settings import SendWithUsSettings

logger: logging.Logger = logging.getLogger(__name__)


class SendWithUsHttpClient(HttpClient):
    """Transporte da API SendWithUs.

    Respostas não-2xx não viram exceção: são logadas e devolvidas
    sem modificação para o chamador interpretar.
    """

    def __init__(
        self,
        settings: SendWithUsSettings,
        config: HttpClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(config, http_client)
        self.settings = settings

    def get(self, endpoint: str) -> httpx.Response:
        return self.send(HttpMethod.GET, endpoint)

    def post(self, endpoint: str, payload: Any = None) -> httpx.Response:
        return self.send(HttpMethod.POST, endpoint, payload)

    def put(self, endpoint: str, payload: Any = None) -> httpx.Response:
        return self.send(HttpMethod.PUT, endpoint, payload)

    def delete(self, endpoint: str) -> httpx.Response:
        return self.send(HttpMethod.DELETE, endpoint)

    def send(self, method: str, endpoint: str, payload: Any = None) -> httpx.Response:
        """Executa uma chamada à API.

        Args:
            method: Verbo HTTP
            endpoint: Endpoint lógico (ex: "send", "logs?count=2")
            payload: Corpo ainda não serializado (None = sem corpo)

        Returns:
            httpx.Response sem modificação

        Raises:
            httpx.HTTPError: Falhas de transporte (conexão, timeout)
        """
        method = str(method).upper()
        content = json.dumps(payload) if payload is not None else None
        response = self.request(
            method,
            self.build_url(endpoint),
            content=content,
            headers=self._build_headers(),
        )
        self._log_response(method, endpoint, response)
        return response

    def build_url(self, endpoint: str) -> str:
        return f"{self.settings.url.rstrip('/')}{request_path(self.settings.api_version, endpoint)}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "X-SWU-API-KEY": self.settings.api_key,
            "X-SWU-API-CLIENT": self.settings.client_stub,
            "Content-Type": "application/json",
        }

    def _log_response(self, method: str, endpoint: str, response: httpx.Response) -> None:
        # Query string fica fora dos logs.
        endpoint_path = endpoint.split("?", 1)[0]
        if response.is_success:
            log_success(method, endpoint_path, response.status_code)
        else:
            log_http_error(method, endpoint_path, response.status_code)
        if self.settings.debug:
            log_response_body(method, endpoint_path, response.text)


def create_sendwithus_http_client(
    settings: SendWithUsSettings | None = None,
    http_client: httpx.Client | None = None,
) -> SendWithUsHttpClient:
    """Factory para criar o cliente com config derivada dos settings.

    Args:
        settings: Settings opcionais. Se None, usa os defaults do processo.
        http_client: httpx.Client já configurado (ex: com transport de teste).
    """
    from sendwithus.config.settings import get_sendwithus_settings

    resolved = settings or get_sendwithus_settings()
    config = HttpClientConfig(
        timeout_seconds=resolved.request_timeout_seconds,
        verify_ssl=resolved.verify_ssl,
    )
    return SendWithUsHttpClient(resolved, config=config, http_client=http_client)

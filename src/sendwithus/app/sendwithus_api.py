"""Fachada SendWithUsApi: uma operação por chamada da API REST.

Cada método monta o payload com os builders puros e delega o IO ao
transporte. Todos retornam a httpx.Response sem modificação.

Uso:
    from sendwithus import SendWithUsApi, configure

    configure(api_key="live_xxx")
    with SendWithUsApi() as api:
        api.send_email("tem_123", {"address": "ana@example.com"}, data={"nome": "Ana"})
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sendwithus.api.connectors.sendwithus import create_sendwithus_http_client
from sendwithus.api.payload_builders import (
    CUSTOMER_LOG_QUERY_KEYS,
    LOG_QUERY_KEYS,
    build_batch_payload,
    build_customer_payload,
    build_drip_activation_payload,
    build_drip_deactivation_payload,
    build_drip_unsubscribe_payload,
    build_email_payload,
    build_query_endpoint,
    build_render_payload,
    build_template_payload,
)
from sendwithus.config.settings import SendWithUsSettings, get_sendwithus_settings
from sendwithus.domain.batch import BatchItem, HttpMethod

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from sendwithus.app.protocols import SendWithUsHttpClientProtocol

logger = logging.getLogger(__name__)

SEND_ENDPOINT = "send"
BATCH_ENDPOINT = "batch"


class SendWithUsApi:
    """Cliente da API SendWithUs.

    Settings da instância = defaults do processo (env + configure())
    com os overrides passados aqui por cima.

    Args:
        http_client: Transporte alternativo (ex: fake em testes)
        **overrides: Campos de SendWithUsSettings (api_key, url, ...)

    Raises:
        TypeError: Se algum override não é campo de SendWithUsSettings.
    """

    def __init__(
        self,
        *,
        http_client: SendWithUsHttpClientProtocol | None = None,
        **overrides: Any,
    ) -> None:
        self.settings: SendWithUsSettings = get_sendwithus_settings().merge(**overrides)
        for problem in self.settings.validate():
            logger.warning("sendwithus_settings_invalid", extra={"problem": problem})
        self._http = http_client or create_sendwithus_http_client(self.settings)

    # ------------------------------------------------------------------
    # Envio
    # ------------------------------------------------------------------

    def send_email(
        self,
        email_id: str,
        recipient: Mapping[str, Any],
        **options: Any,
    ) -> httpx.Response:
        """Envia um template para um destinatário.

        Args:
            email_id: ID do template
            recipient: Destinatário (address, name, ...)
            **options: data, sender, cc, bcc, files, esp_account,
                version_name, headers, tags, locale

        Raises:
            ApiNilEmailIdError: Se email_id é None (nenhuma chamada é feita)
        """
        payload = build_email_payload(email_id, recipient, options)
        return self._http.post(SEND_ENDPOINT, payload)

    def send_emails(self, email_params_sets: Iterable[Sequence[Any]]) -> httpx.Response:
        """Envia vários emails numa única chamada batch.

        Args:
            email_params_sets: Itens (email_id, recipient[, options]),
                com os mesmos significados de send_email.
        """
        requests = [
            BatchItem(
                endpoint=SEND_ENDPOINT,
                method=HttpMethod.POST,
                payload=build_email_payload(*email_params),
            )
            for email_params in email_params_sets
        ]
        return self.batch_send(requests)

    def batch_send(self, requests: Iterable[BatchItem | Mapping[str, Any]]) -> httpx.Response:
        """Envia descritores {endpoint, method, payload} como um batch.

        A resposta traz os resultados na mesma ordem dos descritores.

        Raises:
            BatchRequestError: Se algum descritor estiver incompleto
        """
        normalized = build_batch_payload(requests, self.settings.api_version)
        logger.info("sendwithus_batch_prepared", extra={"batch_size": len(normalized)})
        return self._http.post(BATCH_ENDPOINT, normalized)

    def render(
        self,
        template_id: str,
        version_id: str | None = None,
        template_data: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Renderiza um template; template_data pode conter "locale"."""
        payload = build_render_payload(template_id, version_id, template_data)
        return self._http.post("render", payload)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def emails(self) -> httpx.Response:
        return self._http.get("emails")

    list_templates = emails

    def create_template(self, name: str, subject: str, html: str, text: str) -> httpx.Response:
        return self._http.post("emails", build_template_payload(name, subject, html, text))

    def delete_template(self, template_id: str) -> httpx.Response:
        return self._http.delete(f"templates/{template_id}")

    def list_template_versions(self, template_id: str) -> httpx.Response:
        return self._http.get(f"templates/{template_id}/versions")

    def get_template_version(self, template_id: str, version_id: str) -> httpx.Response:
        return self._http.get(f"templates/{template_id}/versions/{version_id}")

    def update_template_version(
        self,
        template_id: str,
        version_id: str,
        name: str,
        subject: str,
        html: str,
        text: str,
    ) -> httpx.Response:
        return self._http.put(
            f"templates/{template_id}/versions/{version_id}",
            build_template_payload(name, subject, html, text),
        )

    def create_template_version(
        self,
        template_id: str,
        name: str,
        subject: str,
        html: str,
        text: str,
    ) -> httpx.Response:
        return self._http.post(
            f"templates/{template_id}/versions",
            build_template_payload(name, subject, html, text),
        )

    # ------------------------------------------------------------------
    # Drip campaigns
    # ------------------------------------------------------------------

    def list_drip_campaigns(self) -> httpx.Response:
        return self._http.get("drip_campaigns")

    def start_on_drip_campaign(
        self,
        recipient_address: str,
        drip_campaign_id: str,
        email_data: Mapping[str, Any] | None = None,
        locale: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> httpx.Response:
        payload = build_drip_activation_payload(recipient_address, email_data, locale, tags)
        return self._http.post(f"drip_campaigns/{drip_campaign_id}/activate", payload)

    def remove_from_drip_campaign(
        self, recipient_address: str, drip_campaign_id: str
    ) -> httpx.Response:
        payload = build_drip_deactivation_payload(recipient_address)
        return self._http.post(f"drip_campaigns/{drip_campaign_id}/deactivate", payload)

    def drips_unsubscribe(self, email_address: str) -> httpx.Response:
        """Remove o endereço de todas as drip campaigns.

        Raises:
            ApiNilEmailIdError: Se email_address é None
        """
        return self._http.post("drips/unsubscribe", build_drip_unsubscribe_payload(email_address))

    def drip_campaign_details(self, drip_campaign_id: str) -> httpx.Response:
        return self._http.get(f"drip_campaigns/{drip_campaign_id}")

    def list_customers_on_campaign(self, drip_campaign_id: str) -> httpx.Response:
        return self._http.get(f"drip_campaigns/{drip_campaign_id}/customers")

    def list_customers_on_campaign_step(
        self, drip_campaign_id: str, drip_campaign_step_id: str
    ) -> httpx.Response:
        return self._http.get(
            f"drip_campaigns/{drip_campaign_id}/step/{drip_campaign_step_id}/customers"
        )

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def customer_get(self, email: str) -> httpx.Response:
        return self._http.get(f"customers/{email}")

    def customer_create(
        self,
        email: str,
        data: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> httpx.Response:
        """Cria ou atualiza um customer."""
        return self._http.post("customers", build_customer_payload(email, data, locale))

    def customer_delete(self, email_address: str) -> httpx.Response:
        return self._http.delete(f"customers/{email_address}")

    def customer_email_log(self, email_address: str, **options: Any) -> httpx.Response:
        """Histórico de envios de um customer (count, created_gt, created_lt)."""
        endpoint = build_query_endpoint(
            f"customers/{email_address}/logs", options, CUSTOMER_LOG_QUERY_KEYS
        )
        return self._http.get(endpoint)

    # ------------------------------------------------------------------
    # Logs
    # ------------------------------------------------------------------

    def logs(self, **options: Any) -> httpx.Response:
        """Lista logs de envio.

        Filtros: count, offset, created_gt, created_gte, created_lt, created_lte.
        """
        return self._http.get(build_query_endpoint("logs", options, LOG_QUERY_KEYS))

    def log(self, log_id: str) -> httpx.Response:
        return self._http.get(f"logs/{log_id}")

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> SendWithUsApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

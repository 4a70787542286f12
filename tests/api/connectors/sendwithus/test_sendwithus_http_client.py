"""Testes para o transporte SendWithUsHttpClient (httpx.MockTransport)."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from sendwithus.api.connectors.sendwithus import (
    HttpClient,
    HttpClientConfig,
    SendWithUsHttpClient,
    create_sendwithus_http_client,
)
from sendwithus.config.settings import SendWithUsSettings, configure


class RecordingTransport:
    """Captura requisições e responde com status/corpo fixos."""

    def __init__(self, status_code: int = 200, body: object | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body if body is not None else {"success": True}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, json=self._body)


def _client(
    transport: RecordingTransport, **settings_overrides: object
) -> SendWithUsHttpClient:
    settings = SendWithUsSettings(api_key="test-key").merge(**settings_overrides)
    http = httpx.Client(transport=httpx.MockTransport(transport))
    return create_sendwithus_http_client(settings, http_client=http)


class TestRequestBuilding:
    """URL, headers e corpo das requisições."""

    def test_post_builds_versioned_url_and_json_body(self) -> None:
        transport = RecordingTransport()
        client = _client(transport)

        client.post("send", {"email_id": "tem_1", "recipient": {"address": "a@b.com"}})

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.sendwithus.com/api/v1/send"
        assert json.loads(request.content) == {
            "email_id": "tem_1",
            "recipient": {"address": "a@b.com"},
        }

    def test_auth_and_client_headers(self) -> None:
        transport = RecordingTransport()
        _client(transport).get("emails")

        headers = transport.requests[0].headers
        assert headers["X-SWU-API-KEY"] == "test-key"
        assert headers["X-SWU-API-CLIENT"].startswith("python-")
        assert headers["Content-Type"] == "application/json"

    def test_get_and_delete_send_no_body(self) -> None:
        transport = RecordingTransport()
        client = _client(transport)

        client.get("logs?count=2")
        client.delete("customers/a@b.com")

        get_request, delete_request = transport.requests
        assert get_request.method == "GET"
        assert get_request.url.path == "/api/v1/logs"
        assert get_request.url.params["count"] == "2"
        assert get_request.content == b""
        assert delete_request.method == "DELETE"
        assert delete_request.url.path == "/api/v1/customers/a@b.com"

    def test_put_sends_body(self) -> None:
        transport = RecordingTransport()
        _client(transport).put("templates/t/versions/v", {"name": "n"})
        assert transport.requests[0].method == "PUT"
        assert json.loads(transport.requests[0].content) == {"name": "n"}

    def test_batch_array_body_is_serialized_once(self) -> None:
        """Lista de registros vira um único array JSON."""
        transport = RecordingTransport()
        records = [{"path": "/api/v1/send", "method": "POST", "body": {"email_id": "a"}}]
        _client(transport).post("batch", records)
        assert json.loads(transport.requests[0].content) == records

    def test_custom_url_and_api_version(self) -> None:
        transport = RecordingTransport()
        _client(transport, url="http://localhost:8080/", api_version="2").get("emails")
        assert str(transport.requests[0].url) == "http://localhost:8080/api/v2/emails"


class TestResponses:
    """Respostas voltam sem modificação."""

    def test_success_response_is_returned(self) -> None:
        transport = RecordingTransport(body={"id": "log_1"})
        response = _client(transport).get("logs/log_1")
        assert response.status_code == 200
        assert response.json() == {"id": "log_1"}

    def test_error_status_is_returned_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        """4xx/5xx não viram exceção; apenas log de warning."""
        transport = RecordingTransport(status_code=403, body={"error": "invalid key"})
        with caplog.at_level(logging.WARNING):
            response = _client(transport).get("emails")

        assert response.status_code == 403
        records = [r for r in caplog.records if r.getMessage() == "sendwithus_request_failed"]
        assert records
        assert records[0].status_code == 403
        assert "test-key" not in caplog.text

    def test_query_string_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = RecordingTransport()
        with caplog.at_level(logging.DEBUG):
            _client(transport).get("customers/a@b.com/logs?count=1")
        records = [r for r in caplog.records if r.getMessage() == "sendwithus_request_succeeded"]
        assert records[0].endpoint == "customers/a@b.com/logs"

    def test_debug_logs_response_body(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = RecordingTransport(body={"ok": 1})
        with caplog.at_level(logging.DEBUG):
            _client(transport, debug=True).get("emails")
        assert any(r.getMessage() == "sendwithus_response_body" for r in caplog.records)

    def test_transport_errors_propagate(self) -> None:
        """Falha de conexão sobe como exceção do httpx."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        settings = SendWithUsSettings(api_key="k")
        http = httpx.Client(transport=httpx.MockTransport(refuse))
        client = SendWithUsHttpClient(settings, http_client=http)
        with pytest.raises(httpx.ConnectError):
            client.post("send", {"email_id": "x"})


class TestFactoryAndLifecycle:
    """Factory e fechamento do httpx.Client."""

    def test_factory_uses_process_settings(self) -> None:
        configure(api_key="from-configure", request_timeout_seconds=5.0)
        client = create_sendwithus_http_client()
        assert client.settings.api_key == "from-configure"
        assert client._config.timeout_seconds == 5.0

    def test_owned_client_is_created_lazily_and_closed(self) -> None:
        base = HttpClient(HttpClientConfig(timeout_seconds=1.0))
        assert base._http_client is None
        inner = base.client
        assert isinstance(inner, httpx.Client)
        base.close()
        assert inner.is_closed
        assert base._http_client is None

    def test_injected_client_is_not_closed(self) -> None:
        http = httpx.Client(transport=httpx.MockTransport(RecordingTransport()))
        with HttpClient(http_client=http):
            pass
        assert not http.is_closed
        http.close()

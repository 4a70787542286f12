"""Conector SendWithUs - único ponto de IO com a API REST.

Responsabilidades:
- Transporte HTTP síncrono (httpx)
- Headers de autenticação
- Logging de respostas sem PII
"""

from .http_base import HttpClient, HttpClientConfig
from .http_client import SendWithUsHttpClient, create_sendwithus_http_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "SendWithUsHttpClient",
    "create_sendwithus_http_client",
]

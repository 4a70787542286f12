"""Protocolos usados pela fachada (evita dependência direta da camada api)."""

from .http_client import SendWithUsHttpClientProtocol

__all__ = ["SendWithUsHttpClientProtocol"]

"""Resolução de endpoint lógico para path versionado."""

from __future__ import annotations


def request_path(api_version: str, endpoint: str) -> str:
    """Retorna o path completo de um endpoint.

    Exemplo:
        request_path("1", "send") -> "/api/v1/send"
    """
    return f"/api/v{api_version}/{str(endpoint).lstrip('/')}"

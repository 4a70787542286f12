"""Settings do cliente SendWithUs.

Defaults do processo vêm das variáveis de ambiente e podem ser
sobrescritos em runtime via configure(). Cada instância do cliente
combina esses defaults com overrides próprios.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any

CLIENT_VERSION: str = "1.0.0"

# Constantes da API
DEFAULT_API_URL: str = "https://api.sendwithus.com"
DEFAULT_API_VERSION: str = "1"


@dataclass(frozen=True)
class SendWithUsSettings:
    """Configurações de acesso à API SendWithUs.

    Attributes:
        api_key: Chave enviada no header X-SWU-API-KEY
        url: URL base (esquema + host, sem path)
        api_version: Versão usada no path (/api/v{versão}/...)
        client_stub: Identificação enviada no header X-SWU-API-CLIENT
        debug: Loga corpo das respostas em nível DEBUG
        request_timeout_seconds: Timeout das requisições HTTP
        verify_ssl: Valida certificado TLS do servidor
    """

    api_key: str = ""
    url: str = DEFAULT_API_URL
    api_version: str = DEFAULT_API_VERSION
    client_stub: str = f"python-{CLIENT_VERSION}"
    debug: bool = False
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    def merge(self, **overrides: Any) -> SendWithUsSettings:
        """Retorna cópia com overrides aplicados (None é ignorado).

        Raises:
            TypeError: Se alguma chave não é um campo de settings.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Opções de configuração desconhecidas: {', '.join(unknown)}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("SENDWITHUS_API_KEY não configurado")

        if not self.url.startswith(("http://", "https://")):
            errors.append("SENDWITHUS_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("SENDWITHUS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_from_env() -> SendWithUsSettings:
    """Carrega SendWithUsSettings a partir de variáveis de ambiente."""
    return SendWithUsSettings(
        api_key=os.getenv("SENDWITHUS_API_KEY", ""),
        url=os.getenv("SENDWITHUS_URL", DEFAULT_API_URL).rstrip("/"),
        api_version=os.getenv("SENDWITHUS_API_VERSION", DEFAULT_API_VERSION),
        debug=_parse_bool(os.getenv("SENDWITHUS_DEBUG", "false")),
        request_timeout_seconds=float(
            os.getenv("SENDWITHUS_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_env_settings() -> SendWithUsSettings:
    """Retorna instância cacheada dos settings lidos do ambiente."""
    return _load_from_env()


_process_settings: SendWithUsSettings | None = None


def get_sendwithus_settings() -> SendWithUsSettings:
    """Retorna os defaults do processo (configure() tem prioridade sobre env)."""
    return _process_settings or get_env_settings()


def configure(**overrides: Any) -> SendWithUsSettings:
    """Define defaults do processo para novas instâncias do cliente.

    Exemplo:
        configure(api_key="live_xxx", debug=True)
    """
    global _process_settings
    _process_settings = get_sendwithus_settings().merge(**overrides)
    return _process_settings


def reset_configuration() -> None:
    """Descarta configure() e relê o ambiente na próxima leitura."""
    global _process_settings
    _process_settings = None
    get_env_settings.cache_clear()

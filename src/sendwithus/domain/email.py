"""Opções de envio de email.

Cada opção é independente e só chega ao payload quando preenchida.
O formato de destinatários, headers e tags não é validado aqui: a API
remota é a única validadora.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmailOptions(BaseModel):
    """Campos opcionais de um envio (send e itens de batch)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    data: Any = Field(
        default=None,
        description="Variáveis do template (vira email_data no payload).",
    )
    sender: Any = Field(
        default=None,
        alias="from",
        description="Remetente (address, name, reply_to).",
    )
    cc: Any = Field(default=None, description="Destinatários em cópia.")
    bcc: Any = Field(default=None, description="Destinatários em cópia oculta.")
    files: Any = Field(
        default=None,
        description=(
            "Anexos: caminho, objeto arquivo ou {'attachment': ..., 'filename': ...}. "
            "Fonte bytes sem filename gera id None."
        ),
    )
    esp_account: Any = Field(default=None, description="Conta ESP a usar.")
    version_name: Any = Field(default=None, description="Versão específica do template.")
    headers: Any = Field(default=None, description="Headers extras do email.")
    tags: Any = Field(default=None, description="Tags do envio.")
    locale: Any = Field(default=None, description="Locale do template.")


__all__ = ["EmailOptions"]

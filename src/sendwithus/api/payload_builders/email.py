"""Builder do payload de envio de email (endpoint send)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sendwithus.api.payload_builders.base import is_present, put_if_present
from sendwithus.domain.attachment import Attachment
from sendwithus.domain.email import EmailOptions
from sendwithus.utils.errors import ApiNilEmailIdError

# Campo de EmailOptions -> chave no payload, na ordem em que entram no JSON
_OPTION_KEYS: tuple[tuple[str, str], ...] = (
    ("data", "email_data"),
    ("sender", "sender"),
    ("cc", "cc"),
    ("bcc", "bcc"),
    ("esp_account", "esp_account"),
    ("version_name", "version_name"),
    ("headers", "headers"),
    ("tags", "tags"),
    ("locale", "locale"),
)


def coerce_email_options(options: EmailOptions | Mapping[str, Any] | None) -> EmailOptions:
    """Aceita EmailOptions, mapping (chaves data/from/sender/cc/...) ou None."""
    if options is None:
        return EmailOptions()
    if isinstance(options, EmailOptions):
        return options
    return EmailOptions.model_validate(dict(options))


def build_attachment_entries(files: Iterable[Any]) -> list[dict[str, Any]]:
    """Converte referências de arquivo em [{id, data}] com conteúdo base64."""
    return [Attachment.from_reference(file_data).to_payload() for file_data in files]


def build_email_payload(
    email_id: str | None,
    recipient: Any,
    options: EmailOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Constrói o corpo de um envio.

    Args:
        email_id: ID do template a enviar (obrigatório)
        recipient: Destinatário, repassado sem validação
        options: Campos opcionais do envio

    Returns:
        Payload com email_id, recipient e apenas as opções preenchidas

    Raises:
        ApiNilEmailIdError: Se email_id é None
    """
    if email_id is None:
        raise ApiNilEmailIdError("email_id cannot be nil")

    opts = coerce_email_options(options)
    payload: dict[str, Any] = {
        "email_id": email_id,
        "recipient": recipient,
    }

    for field_name, key in _OPTION_KEYS:
        put_if_present(payload, key, getattr(opts, field_name))

    if is_present(opts.files):
        payload["files"] = build_attachment_entries(opts.files)

    return payload

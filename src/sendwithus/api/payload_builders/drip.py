"""Builders de drip campaigns."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sendwithus.api.payload_builders.base import put_if_present
from sendwithus.utils.errors import ApiNilEmailIdError


def build_drip_activation_payload(
    recipient_address: str,
    email_data: Mapping[str, Any] | None = None,
    locale: str | None = None,
    tags: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Corpo de drip_campaigns/{id}/activate."""
    payload: dict[str, Any] = {"recipient_address": recipient_address}
    put_if_present(payload, "email_data", dict(email_data) if email_data else None)
    put_if_present(payload, "tags", list(tags) if tags else None)
    put_if_present(payload, "locale", locale)
    return payload


def build_drip_deactivation_payload(recipient_address: str) -> dict[str, Any]:
    return {"recipient_address": recipient_address}


def build_drip_unsubscribe_payload(email_address: str | None) -> dict[str, Any]:
    """Corpo de drips/unsubscribe (remove o endereço de todas as campanhas).

    Raises:
        ApiNilEmailIdError: Se email_address é None
    """
    if email_address is None:
        raise ApiNilEmailIdError("email_address cannot be nil")
    return {"email_address": email_address}

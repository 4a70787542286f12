"""Builder de customers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sendwithus.api.payload_builders.base import put_if_present


def build_customer_payload(
    email: str,
    data: Mapping[str, Any] | None = None,
    locale: str | None = None,
) -> dict[str, Any]:
    """Corpo de criação/atualização de customer."""
    payload: dict[str, Any] = {"email": email}
    put_if_present(payload, "data", dict(data) if data else None)
    put_if_present(payload, "locale", locale)
    return payload

"""Builders de templates, versões e render."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def build_template_payload(name: str, subject: str, html: str, text: str) -> dict[str, Any]:
    """Corpo usado em create_template e em create/update de versões."""
    return {
        "name": name,
        "subject": subject,
        "html": html,
        "text": text,
    }


def build_render_payload(
    template_id: str,
    version_id: str | None = None,
    template_data: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Constrói o corpo do render.

    locale é retirado de template_data e vai para o nível superior.
    template_data do chamador não é alterado.
    """
    data = dict(template_data or {})
    locale = data.pop("locale", None)

    payload: dict[str, Any] = {
        "template_id": template_id,
        "template_data": data,
    }
    if version_id is not None:
        payload["version_id"] = version_id
    if locale is not None:
        payload["locale"] = locale
    return payload

"""Agregador de settings do cliente SendWithUs."""

from __future__ import annotations

from sendwithus.config.settings.client import (
    CLIENT_VERSION,
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    SendWithUsSettings,
    configure,
    get_env_settings,
    get_sendwithus_settings,
    reset_configuration,
)

__all__ = [
    # Constants
    "CLIENT_VERSION",
    "DEFAULT_API_URL",
    "DEFAULT_API_VERSION",
    "SendWithUsSettings",
    "configure",
    "get_env_settings",
    "get_sendwithus_settings",
    "reset_configuration",
]

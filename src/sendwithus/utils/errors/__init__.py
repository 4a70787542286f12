"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiNilEmailIdError,
    BatchRequestError,
    SendWithUsError,
)

__all__ = [
    "ApiNilEmailIdError",
    "BatchRequestError",
    "SendWithUsError",
]

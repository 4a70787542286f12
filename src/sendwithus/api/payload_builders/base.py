"""Regras de presença compartilhadas pelos builders.

Um campo opcional só entra no payload quando tem conteúdo: None,
string vazia, mapping vazio e lista vazia são tratados como ausentes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def is_present(value: Any) -> bool:
    """Retorna True se o valor deve ser incluído no payload."""
    if value is None:
        return False
    if isinstance(value, (str, bytes, Mapping, Sequence)):
        return len(value) > 0
    return True


def put_if_present(payload: dict[str, Any], key: str, value: Any) -> None:
    """Adiciona key ao payload apenas se o valor estiver presente."""
    if is_present(value):
        payload[key] = value

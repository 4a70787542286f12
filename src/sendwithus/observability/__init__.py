"""Observabilidade: correlation_id para logs do cliente.

Uso:
    from sendwithus.observability import set_correlation_id, reset_correlation_id
"""

from sendwithus.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]

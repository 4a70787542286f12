"""Configuração de logging estruturado.

O pacote só emite logs via logging.getLogger(__name__); quem usa o
cliente decide se quer o formato JSON abaixo.

Uso:
    from sendwithus.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_app")

    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from sendwithus.config.logging.config import configure_logging, get_logger
from sendwithus.config.logging.filters import CorrelationIdFilter
from sendwithus.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]

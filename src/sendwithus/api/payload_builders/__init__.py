"""Builders de payload para a API SendWithUs.

Funções puras: recebem argumentos da operação e retornam o corpo JSON
(ainda não serializado) de uma chamada.
"""

from sendwithus.api.payload_builders.base import is_present, put_if_present
from sendwithus.api.payload_builders.batch import (
    build_batch_payload,
    coerce_batch_item,
    normalize_batch,
)
from sendwithus.api.payload_builders.customers import build_customer_payload
from sendwithus.api.payload_builders.drip import (
    build_drip_activation_payload,
    build_drip_deactivation_payload,
    build_drip_unsubscribe_payload,
)
from sendwithus.api.payload_builders.email import (
    build_attachment_entries,
    build_email_payload,
    coerce_email_options,
)
from sendwithus.api.payload_builders.query import (
    CUSTOMER_LOG_QUERY_KEYS,
    LOG_QUERY_KEYS,
    build_query_endpoint,
)
from sendwithus.api.payload_builders.templates import (
    build_render_payload,
    build_template_payload,
)

__all__ = [
    "CUSTOMER_LOG_QUERY_KEYS",
    "LOG_QUERY_KEYS",
    "build_attachment_entries",
    "build_batch_payload",
    "build_customer_payload",
    "build_drip_activation_payload",
    "build_drip_deactivation_payload",
    "build_drip_unsubscribe_payload",
    "build_email_payload",
    "build_query_endpoint",
    "build_render_payload",
    "build_template_payload",
    "coerce_batch_item",
    "coerce_email_options",
    "is_present",
    "normalize_batch",
    "put_if_present",
]

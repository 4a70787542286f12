"""Modelos de domínio do cliente (transientes, sem persistência)."""

from sendwithus.domain.attachment import Attachment
from sendwithus.domain.batch import BatchItem, HttpMethod, NormalizedBatchRequest
from sendwithus.domain.email import EmailOptions

__all__ = [
    "Attachment",
    "BatchItem",
    "EmailOptions",
    "HttpMethod",
    "NormalizedBatchRequest",
]

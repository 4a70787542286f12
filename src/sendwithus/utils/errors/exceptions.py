"""Exceções de validação local do cliente.

Falhas HTTP (autenticação, rate limit, respostas inválidas) não passam
por aqui: chegam ao chamador como exceções do httpx ou como a própria
``httpx.Response``.
"""

from __future__ import annotations


class SendWithUsError(Exception):
    """Base para erros levantados pelo cliente antes de qualquer IO."""


class ApiNilEmailIdError(SendWithUsError, ValueError):
    """email_id (ou email_address) ausente em operação que o exige."""


class BatchRequestError(SendWithUsError, ValueError):
    """Descritor de batch sem endpoint, method ou payload."""

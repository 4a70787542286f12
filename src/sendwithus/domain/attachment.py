"""Anexo de email codificado em base64 no momento do build."""

from __future__ import annotations

import base64
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class Attachment:
    """Referência a um arquivo a ser anexado.

    Attributes:
        source: Caminho (str/PathLike), bytes ou objeto com read()
        explicit_filename: Nome informado pelo chamador; tem prioridade
    """

    source: Any
    explicit_filename: str | None = None

    @classmethod
    def from_reference(cls, reference: Any) -> Attachment:
        """Cria Attachment a partir de referência simples ou estruturada.

        Referência estruturada: {"attachment": <fonte>, "filename": "nome.ext"}.
        """
        if isinstance(reference, Mapping):
            return cls(reference["attachment"], reference.get("filename"))
        return cls(reference)

    @property
    def filename(self) -> str | None:
        if self.explicit_filename:
            return self.explicit_filename
        if isinstance(self.source, (str, os.PathLike)):
            return Path(self.source).name
        name = getattr(self.source, "name", None)
        if isinstance(name, str):
            return Path(name).name
        return None

    def read_bytes(self) -> bytes:
        """Lê o conteúdo binário da fonte (rebobina objetos arquivo)."""
        if isinstance(self.source, (bytes, bytearray)):
            return bytes(self.source)
        if hasattr(self.source, "read"):
            if hasattr(self.source, "seek"):
                self.source.seek(0)
            content = self.source.read()
            return content.encode() if isinstance(content, str) else content
        return Path(self.source).read_bytes()

    def encoded_data(self) -> str:
        return base64.b64encode(self.read_bytes()).decode("ascii")

    def to_payload(self) -> dict[str, Any]:
        """Entrada do campo files: {id: nome do arquivo, data: base64}."""
        return {"id": self.filename, "data": self.encoded_data()}


__all__ = ["Attachment"]

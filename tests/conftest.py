"""Configuração do pytest para o cliente SendWithUs."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sendwithus.config.settings import reset_configuration  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_configuration(monkeypatch: pytest.MonkeyPatch):
    """Cada teste começa sem configure() e sem SENDWITHUS_* do ambiente real."""
    for key in (
        "SENDWITHUS_API_KEY",
        "SENDWITHUS_URL",
        "SENDWITHUS_API_VERSION",
        "SENDWITHUS_DEBUG",
        "SENDWITHUS_REQUEST_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_configuration()
    yield
    reset_configuration()

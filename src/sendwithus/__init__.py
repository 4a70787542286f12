"""Cliente Python da API SendWithUs.

Uso:
    from sendwithus import SendWithUsApi, configure

    configure(api_key="live_xxx")
    api = SendWithUsApi()
    api.send_email("tem_123", {"address": "ana@example.com"}, data={"nome": "Ana"})
"""

from sendwithus.app.sendwithus_api import SendWithUsApi
from sendwithus.config.settings import (
    CLIENT_VERSION,
    SendWithUsSettings,
    configure,
    reset_configuration,
)
from sendwithus.domain import Attachment, BatchItem, EmailOptions, HttpMethod
from sendwithus.utils.errors import ApiNilEmailIdError, BatchRequestError, SendWithUsError

__version__ = CLIENT_VERSION

__all__ = [
    "ApiNilEmailIdError",
    "Attachment",
    "BatchItem",
    "BatchRequestError",
    "EmailOptions",
    "HttpMethod",
    "SendWithUsApi",
    "SendWithUsError",
    "SendWithUsSettings",
    "__version__",
    "configure",
    "reset_configuration",
]

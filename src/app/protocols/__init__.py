"""Protocolos e contratos do core da aplicação."""

from .config_source import ConfigSourceProtocol
from .document_store import DocumentStoreProtocol
from .models import SUCCESS_STATUS, DocumentStatus, InboundRequest, SecretValue

__all__ = [
    "SUCCESS_STATUS",
    "ConfigSourceProtocol",
    "DocumentStatus",
    "DocumentStoreProtocol",
    "InboundRequest",
    "SecretValue",
]

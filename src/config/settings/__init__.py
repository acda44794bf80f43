"""Agregador de settings do gateway.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    get_base_settings,
    parse_bool,
)
from config.settings.document_store import (
    DEFAULT_API_SERVER,
    DocumentStoreSettings,
    get_document_store_settings,
)
from config.settings.gateway import GatewaySettings, get_gateway_settings

__all__ = [
    "DEFAULT_API_SERVER",
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "DocumentStoreSettings",
    "GatewaySettings",
    "get_base_settings",
    "get_document_store_settings",
    "get_gateway_settings",
    "parse_bool",
]

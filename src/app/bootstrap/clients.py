"""Factories de clientes externos — document store e secret store."""

from __future__ import annotations

import logging

from app.domain.errors import ConfigInvalidError
from app.infra.document_store import RocksetDocumentStore
from app.infra.secrets import GCPSecretConfigSource
from config.settings import (
    DocumentStoreSettings,
    get_base_settings,
    get_document_store_settings,
)

logger = logging.getLogger(__name__)


def create_document_store(
    settings: DocumentStoreSettings | None = None,
) -> RocksetDocumentStore:
    """Cria cliente do document store.

    Lê ROCKSET_APIKEY e ROCKSET_APISERVER da env quando `settings` é None.

    Raises:
        ConfigInvalidError: Se a configuração do cliente for inválida
    """
    store_settings = settings or get_document_store_settings()
    errors = store_settings.validate()
    if errors:
        raise ConfigInvalidError("; ".join(f"document_store: {error}" for error in errors))

    store = RocksetDocumentStore.from_settings(store_settings)
    logger.info(
        "document_store_client_created",
        extra={"api_server": store_settings.base_url, "max_retries": store_settings.max_retries},
    )
    return store


def create_config_source() -> GCPSecretConfigSource:
    """Cria leitor do Secret Manager para CONFIG_PATH."""
    return GCPSecretConfigSource(project_id=get_base_settings().gcp_project or None)

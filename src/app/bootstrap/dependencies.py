"""Composição do use case de ingestão.

Toda falha aqui é ConfigInvalidError: o processo não deve servir
tráfego com configuração ausente ou inválida.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_config_source, create_document_store
from app.domain import ConfigInvalidError, PolicyRegistry, describe_auth_policy
from app.use_cases.ingest import HandlePayloadUseCase
from config.settings import BaseSettings, GatewaySettings, get_base_settings, get_gateway_settings

if TYPE_CHECKING:
    from app.protocols import ConfigSourceProtocol, DocumentStoreProtocol

logger = logging.getLogger(__name__)


def load_config_document(
    settings: GatewaySettings,
    config_source: ConfigSourceProtocol | None = None,
) -> str:
    """Obtém o documento de rotas: CONFIG inline ou secret em CONFIG_PATH.

    Raises:
        ConfigInvalidError: Se nenhuma fonte estiver definida ou a leitura falhar
    """
    if not settings.uses_remote_config:
        if settings.config_raw is None:
            raise ConfigInvalidError("CONFIG ou CONFIG_PATH não configurado")
        return settings.config_raw

    source = config_source or create_config_source()
    try:
        return source.load(settings.config_path).value
    except Exception as exc:
        raise ConfigInvalidError(
            f"falha ao carregar configuração de {settings.config_path}"
        ) from exc


def create_policy_registry(raw: str, *, debug: bool = False) -> PolicyRegistry:
    """Parseia o documento de rotas e loga o resumo (sem segredos)."""
    registry = PolicyRegistry.from_json(raw)
    logger.info("routes_configured", extra={"paths": sorted(registry), "count": len(registry)})
    if debug:
        logger.debug(
            "route_policies",
            extra={
                "policies": {
                    path: {
                        "workspace": policy.workspace,
                        "collection": policy.collection,
                        "wrap": policy.wrap,
                        "auth": describe_auth_policy(policy.auth),
                    }
                    for path, policy in registry.items()
                }
            },
        )
    return registry


def create_handle_payload_use_case(
    settings: GatewaySettings | None = None,
    *,
    store: DocumentStoreProtocol | None = None,
    config_source: ConfigSourceProtocol | None = None,
    base_settings: BaseSettings | None = None,
) -> HandlePayloadUseCase:
    """Monta o use case com registro, store e workspace padrão.

    Args:
        settings: Settings do gateway (default: env)
        store: Document store injetado (default: Rockset via env)
        config_source: Leitor de CONFIG_PATH (default: Secret Manager)
        base_settings: Identidade do serviço (default: env)

    Raises:
        ConfigInvalidError: Entradas obrigatórias ausentes ou documento inválido
    """
    gateway_settings = settings or get_gateway_settings()
    errors = [
        *(base_settings or get_base_settings()).validate(),
        *gateway_settings.validate(),
    ]
    if errors:
        raise ConfigInvalidError("; ".join(errors))

    logger.info("workspace_configured", extra={"workspace": gateway_settings.workspace})

    raw = load_config_document(gateway_settings, config_source)
    registry = create_policy_registry(raw, debug=gateway_settings.debug)

    return HandlePayloadUseCase(
        registry=registry,
        store=store if store is not None else create_document_store(),
        default_workspace=gateway_settings.workspace,
        debug=gateway_settings.debug,
    )

"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_handle_payload_use_case

    initialize_app()
    use_case = get_handle_payload_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings

if TYPE_CHECKING:
    from app.use_cases.ingest import HandlePayloadUseCase

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


@lru_cache(maxsize=1)
def get_handle_payload_use_case() -> HandlePayloadUseCase:
    """Obtém o use case de ingestão (singleton).

    Raises:
        ConfigInvalidError: Se a configuração de startup for inválida
    """
    from app.bootstrap.dependencies import create_handle_payload_use_case

    use_case = create_handle_payload_use_case()
    logger.info("handle_payload_ready", extra={"routes": len(use_case.registry)})
    return use_case

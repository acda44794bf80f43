"""Setup do logging JSON do processo.

Um único handler em stdout no root logger; os loggers do uvicorn passam
a propagar para ele, de modo que access log e logs da aplicação saem no
mesmo formato.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import DEFAULT_SERVICE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Loggers de terceiros que instalam handlers próprios
PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def _build_handler(
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger.

    Chamadas repetidas substituem a configuração anterior (sem
    duplicar handlers).

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (qualquer caixa).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id da requisição atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    normalized = _normalize_level(level)

    root = logging.getLogger()
    root.handlers = [_build_handler(service_name, correlation_id_getter)]
    root.setLevel(normalized)

    for name in PROPAGATED_LOGGERS:
        third_party = logging.getLogger(name)
        third_party.handlers = []
        third_party.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger (campos de contexto vêm do handler)."""
    return logging.getLogger(name)

"""Logging estruturado JSON do gateway.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="webhook-gateway")
    logger = get_logger(__name__)
    logger.info("documents_added", extra={"collection": "events"})

Todo record sai com asctime, level, logger, message, correlation_id e
service. Atributos com nome de segredo são mascarados no handler.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]

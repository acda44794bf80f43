"""Formatter JSON dos logs do gateway."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter com os campos obrigatórios e os `extra` do record.

    Saída típica de uma rejeição de autenticação:
        {"asctime": "...", "level": "WARNING", "logger": "app.domain.authenticator",
         "message": "authentication_rejected", "correlation_id": "abc-123",
         "service": "webhook-gateway", "path": "/github", "reason": "signature_mismatch"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )

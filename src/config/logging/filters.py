"""Filters de logging do gateway.

- CorrelationIdFilter: injeta `correlation_id` e `service`
- SensitiveFieldFilter: mascara atributos `extra` com nome de segredo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"

# Nomes de atributos que nunca saem em claro, mesmo se passados via extra
SENSITIVE_FIELDS = frozenset(
    {
        "authorization",
        "api_key",
        "secret",
        "signature",
        "signing_key",
        "expected_secret",
        "body",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Anota cada record com o serviço e a requisição em curso.

    Args:
        service_name: Valor fixo do campo `service`.
        correlation_id_getter: Fonte do correlation_id (ex: ContextVar);
            sem getter o campo fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._getter = correlation_id_getter

    def _current_correlation_id(self) -> str:
        return self._getter() if self._getter is not None else ""

    def filter(self, record: logging.LogRecord) -> bool:
        # extra={"correlation_id": ...} explícito tem precedência
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui o valor de atributos sensíveis por `[redacted]`.

    Atua só sobre atributos do record (campos `extra`); a mensagem em si
    é sempre um nome de evento.
    """

    def __init__(self, fields: Iterable[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            setattr(record, name, REDACTED)
        return True

"""correlation_id da requisição em curso.

Vem do header `x-correlation-id` (ou do request id do evento Lambda);
sem valor de entrada, um UUID é gerado. Guardado em ContextVar, o que
isola requisições concorrentes no mesmo event loop.

Uso:
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    return _correlation_id.get()


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; devolve o token para `reset_correlation_id`."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair."""
    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)

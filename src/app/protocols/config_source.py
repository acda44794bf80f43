"""Protocolo de leitura da configuração remota."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SecretValue


class ConfigSourceProtocol(Protocol):
    """Busca um valor secreto (já decifrado) por chave."""

    def load(self, key: str) -> SecretValue: ...

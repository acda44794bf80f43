"""Modelos compartilhados entre transporte, use case e infraestrutura."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

SUCCESS_STATUS = "ADDED"


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Requisição recebida pelo adapter de transporte.

    Attributes:
        path: Rota exata da requisição (ex: /github)
        headers: Headers com chaves normalizadas para minúsculas
        body: Corpo bruto como recebido
        is_base64_encoded: True se o transporte entregou o corpo em base64
    """

    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    is_base64_encoded: bool = False

    def __post_init__(self) -> None:
        normalized = {str(key).lower(): value for key, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))

    def header(self, name: str) -> str | None:
        """Busca header sem diferenciar maiúsculas no nome."""
        return self.headers.get(name.lower())

    def decoded_body(self) -> bytes:
        """Corpo com a codificação de transporte removida.

        Quebras de linha (CR/LF) no texto base64 são ignoradas.

        Raises:
            binascii.Error: Se o corpo declarado como base64 for inválido
                (subclasse de ValueError).
        """
        if self.is_base64_encoded:
            encoded = self.body.replace(b"\r", b"").replace(b"\n", b"")
            return base64.b64decode(encoded, validate=True)
        return self.body


@dataclass(frozen=True, slots=True)
class DocumentStatus:
    """Resultado por documento devolvido pelo document store."""

    collection: str
    status: str
    document_id: str | None = None
    error: str | None = None

    @property
    def added(self) -> bool:
        return self.status == SUCCESS_STATUS


@dataclass(frozen=True, slots=True)
class SecretValue:
    """Valor lido do secret store com a versão correspondente."""

    value: str
    version: int

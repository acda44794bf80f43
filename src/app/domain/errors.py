"""Taxonomia de erros do gateway.

- ConfigInvalidError: fatal no startup, o processo não deve servir tráfego.
- RequestFailedError e subclasses: falha terminal de uma requisição,
  cada uma com seu FailureKind.
"""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """Tipo de falha visível ao transporte."""

    MISSING_PATH = "missing_path"
    AUTH_FAILED = "auth_failed"
    DECODE_ERROR = "decode_error"
    DISPATCH_ERROR = "dispatch_error"
    BAD_DOCUMENT = "bad_document"


class GatewayError(Exception):
    """Base para erros do gateway."""


class ConfigInvalidError(GatewayError):
    """Configuração ausente ou inválida no startup."""


class RequestFailedError(GatewayError):
    """Falha terminal de uma requisição."""

    kind: FailureKind

    def log_context(self) -> dict[str, str]:
        """Campos extras para o log da falha (nunca segredos)."""
        return {}


class MissingPathError(RequestFailedError):
    """Rota sem política configurada."""

    kind = FailureKind.MISSING_PATH

    def __init__(self, path: str) -> None:
        super().__init__(f"{path}: missing path configuration")
        self.path = path


class AuthFailedError(RequestFailedError):
    """Autenticação rejeitada.

    A mensagem é sempre a mesma: o motivo (header ausente, assinatura
    divergente, tipo desconhecido) vai apenas para o log.
    """

    kind = FailureKind.AUTH_FAILED

    def __init__(self) -> None:
        super().__init__("authentication failed")


class DecodeError(RequestFailedError):
    """Corpo declarado como base64 não pôde ser decodificado."""

    kind = FailureKind.DECODE_ERROR


class DispatchError(RequestFailedError):
    """Falha na chamada ao document store.

    O erro original fica em `__cause__`.
    """

    kind = FailureKind.DISPATCH_ERROR


class BadDocumentError(RequestFailedError):
    """Document store aceitou a chamada mas rejeitou um documento."""

    kind = FailureKind.BAD_DOCUMENT

    def __init__(
        self,
        workspace: str,
        collection: str,
        status: str,
        *,
        document_id: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(f"{workspace}.{collection} ({status}): failed to add document")
        self.workspace = workspace
        self.collection = collection
        self.status = status
        self.document_id = document_id
        self.detail = detail

    def log_context(self) -> dict[str, str]:
        context = {"document_status": self.status}
        if self.document_id:
            context["document_id"] = self.document_id
        if self.detail:
            context["document_error"] = self.detail
        return context

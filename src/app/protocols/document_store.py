"""Protocolo do document store de destino."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import DocumentStatus


class DocumentStoreProtocol(Protocol):
    """Contrato mínimo para escrita de documentos.

    `payload` é JSON bruto (objeto ou array) repassado sem reserialização.
    Falhas de chamada são levantadas; rejeições por documento vêm no
    status de cada item.
    """

    async def add_documents_raw(
        self,
        workspace: str,
        collection: str,
        payload: bytes,
    ) -> list[DocumentStatus]: ...

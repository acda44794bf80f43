"""Cliente de escrita de documentos na API REST do Rockset.

Endpoint:
    POST {server}/v1/orgs/self/ws/{workspace}/collections/{collection}/docs
    Authorization: ApiKey <key>
    {"data": <payload>}

O payload (objeto ou array JSON) é embutido sem reserialização.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols import DocumentStatus

if TYPE_CHECKING:
    import httpx

    from config.settings import DocumentStoreSettings

logger = logging.getLogger(__name__)


class DocumentStoreError(HttpError):
    """Resposta de erro ou malformada do document store."""


class RocksetDocumentStore(HttpClient):
    """Implementação de DocumentStoreProtocol sobre HTTP."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError("api_key é obrigatório para o document store")
        super().__init__(config)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(
        cls,
        settings: DocumentStoreSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RocksetDocumentStore:
        config = HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
            transport=transport,
        )
        return cls(settings.api_key, settings.base_url, config)

    def documents_url(self, workspace: str, collection: str) -> str:
        return (
            f"{self._base_url}/v1/orgs/self/ws/{quote(workspace, safe='')}"
            f"/collections/{quote(collection, safe='')}/docs"
        )

    async def add_documents_raw(
        self,
        workspace: str,
        collection: str,
        payload: bytes,
    ) -> list[DocumentStatus]:
        """Adiciona documentos e devolve o status de cada um.

        Raises:
            HttpError: Falha de conexão ou status retryable
            DocumentStoreError: Status de erro ou resposta malformada
        """
        response = await self.post(
            self.documents_url(workspace, collection),
            content=b'{"data":' + payload + b"}",
            headers={
                "Authorization": f"ApiKey {self._api_key}",
                "Content-Type": "application/json",
            },
        )
        if not response.is_success:
            raise DocumentStoreError(
                _error_message(response),
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise DocumentStoreError(
                "invalid_response_json",
                status_code=response.status_code,
            ) from exc

        statuses = _parse_statuses(body, collection)
        logger.debug(
            "document_store_response",
            extra={"workspace": workspace, "collection": collection, "documents": len(statuses)},
        )
        return statuses


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"document_store_status_{response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return f"document_store_status_{response.status_code}: {body['message']}"
    return f"document_store_status_{response.status_code}"


def _parse_statuses(body: Any, collection: str) -> list[DocumentStatus]:
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        raise DocumentStoreError("invalid_response_shape")

    statuses: list[DocumentStatus] = []
    for item in data:
        if not isinstance(item, dict):
            raise DocumentStoreError("invalid_response_shape")
        error = item.get("error")
        statuses.append(
            DocumentStatus(
                collection=item.get("_collection") or collection,
                status=str(item.get("status") or ""),
                document_id=str(item["_id"]) if item.get("_id") is not None else None,
                error=error.get("message") if isinstance(error, dict) else None,
            )
        )
    return statuses

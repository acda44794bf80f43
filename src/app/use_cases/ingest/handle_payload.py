"""Use case de ingestão de webhook.

Pipeline linear, sem retentativas:
    rota -> autenticação -> normalização -> envio -> validação

Cada invocação produz exatamente um IngestResult e não guarda estado;
registro e workspace padrão são somente leitura e podem ser
compartilhados entre requisições concorrentes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.authenticator import authenticate
from app.domain.errors import (
    BadDocumentError,
    DispatchError,
    FailureKind,
    RequestFailedError,
)
from app.observability import elapsed_ms, get_correlation_id, record_latency, record_outcome
from app.use_cases.ingest.normalize import normalize_payload

if TYPE_CHECKING:
    from app.domain.policy_registry import PathPolicy, PolicyRegistry
    from app.protocols import DocumentStatus, DocumentStoreProtocol, InboundRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IngestResult:
    """Resultado de uma requisição."""

    path: str
    success: bool
    failure: FailureKind | None = None
    error: RequestFailedError | None = None
    workspace: str | None = None
    collection: str | None = None
    documents: int = 0

    @classmethod
    def failed(cls, path: str, error: RequestFailedError) -> IngestResult:
        return cls(path=path, success=False, failure=error.kind, error=error)


class HandlePayloadUseCase:
    """Orquestra lookup da rota, autenticação, normalização e envio."""

    def __init__(
        self,
        registry: PolicyRegistry,
        store: DocumentStoreProtocol,
        default_workspace: str,
        *,
        debug: bool = False,
    ) -> None:
        self._registry = registry
        self._store = store
        self._default_workspace = default_workspace
        self._debug = debug

    @property
    def registry(self) -> PolicyRegistry:
        return self._registry

    @property
    def default_workspace(self) -> str:
        return self._default_workspace

    async def execute(self, request: InboundRequest) -> IngestResult:
        """Processa a requisição e classifica qualquer falha.

        Erros fora da taxonomia (bugs) não são capturados aqui.
        """
        try:
            result = await self._process(request)
        except RequestFailedError as exc:
            logger.warning(
                "ingest_failed",
                extra={
                    "path": request.path,
                    "failure": exc.kind.value,
                    "error": str(exc),
                    **exc.log_context(),
                },
            )
            result = IngestResult.failed(request.path, exc)

        record_outcome(
            request.path,
            "success" if result.success else str(result.failure),
            get_correlation_id(),
        )
        return result

    async def _process(self, request: InboundRequest) -> IngestResult:
        if self._debug:
            _log_request(request)

        policy = self._registry.resolve(request.path)
        authenticate(policy.auth, request)

        payload = normalize_payload(request, policy)
        if policy.wrap:
            logger.debug("payload_wrapped_in_array", extra={"path": request.path})

        workspace = policy.resolve_workspace(self._default_workspace)
        statuses = await self._dispatch(workspace, policy, payload)
        _validate_statuses(workspace, policy.collection, statuses)

        logger.info(
            "documents_added",
            extra={
                "path": request.path,
                "workspace": workspace,
                "collection": policy.collection,
                "documents": len(statuses),
            },
        )
        return IngestResult(
            path=request.path,
            success=True,
            workspace=workspace,
            collection=policy.collection,
            documents=len(statuses),
        )

    async def _dispatch(
        self,
        workspace: str,
        policy: PathPolicy,
        payload: bytes,
    ) -> list[DocumentStatus]:
        started_at = time.perf_counter()
        try:
            return await self._store.add_documents_raw(workspace, policy.collection, payload)
        except Exception as exc:
            raise DispatchError(
                f"{workspace}.{policy.collection}: failed to add documents: {exc}"
            ) from exc
        finally:
            record_latency(
                "document_store",
                "add_documents",
                elapsed_ms(started_at),
                get_correlation_id(),
            )


def _validate_statuses(
    workspace: str,
    collection: str,
    statuses: list[DocumentStatus],
) -> None:
    for document in statuses:
        if not document.added:
            raise BadDocumentError(
                workspace,
                document.collection or collection,
                document.status,
                document_id=document.document_id,
                detail=document.error,
            )


def _log_request(request: InboundRequest) -> None:
    # Somente nomes de headers e tamanho: valores podem conter segredos
    logger.debug(
        "request_received",
        extra={
            "path": request.path,
            "header_names": sorted(request.headers),
            "body_size": len(request.body),
            "base64": request.is_base64_encoded,
        },
    )

"""Mapeamento de IngestResult para status HTTP e corpo de resposta.

Compartilhado entre a rota FastAPI e o adapter de Function URL.
O corpo de erro carrega só o tipo da falha; detalhes ficam no log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.errors import FailureKind

if TYPE_CHECKING:
    from app.use_cases.ingest import IngestResult

STATUS_BY_FAILURE: dict[FailureKind, int] = {
    FailureKind.MISSING_PATH: 404,
    FailureKind.AUTH_FAILED: 401,
    FailureKind.DECODE_ERROR: 400,
    FailureKind.DISPATCH_ERROR: 502,
    FailureKind.BAD_DOCUMENT: 422,
}


def http_status_for(result: IngestResult) -> int:
    if result.success or result.failure is None:
        return 200
    return STATUS_BY_FAILURE.get(result.failure, 500)


def response_body_for(result: IngestResult, correlation_id: str = "") -> dict[str, Any]:
    """Corpo JSON da resposta.

    Sucesso: `{"status": "ok", "documents": N, ...}`.
    Falha: `{"error": "<failure_kind>", ...}`.
    """
    body: dict[str, Any]
    if result.success:
        body = {"status": "ok", "documents": result.documents}
    else:
        body = {"error": str(result.failure)}
    if correlation_id:
        body["correlation_id"] = correlation_id
    return body

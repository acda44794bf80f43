"""Endpoint de ingestão de webhooks.

Endpoint:
- POST /{path}: qualquer path; a política vem do documento de rotas

Fluxo:
1. Monta InboundRequest com path, headers e corpo bruto
2. Executa HandlePayloadUseCase
3. Mapeia o IngestResult para status HTTP

Segurança:
- Autenticação decidida por path (fail-closed)
- Corpo de erro expõe só o tipo de falha
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.connectors.outcome import http_status_for, response_body_for
from app.bootstrap import get_handle_payload_use_case
from app.observability import correlation_scope
from app.protocols import InboundRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _raw_path(request: Request) -> str:
    """Path como enviado pelo cliente (sem decodificar %xx), igual ao rawPath da Function URL."""
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.decode("latin-1").split("?", 1)[0]


@router.post("/{full_path:path}")
async def receive_webhook(request: Request, full_path: str) -> JSONResponse:
    """Recebe um payload e o encaminha ao document store."""
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()
        inbound = InboundRequest(
            path=_raw_path(request),
            headers=dict(request.headers),
            body=raw_body,
        )

        use_case = get_handle_payload_use_case()
        result = await use_case.execute(inbound)

        status_code = http_status_for(result)
        logger.info(
            "webhook_handled",
            extra={
                "path": inbound.path,
                "status_code": status_code,
                "payload_size": len(raw_body),
                "correlation_id": correlation_id,
            },
        )
        return JSONResponse(
            content=response_body_for(result, correlation_id),
            status_code=status_code,
        )

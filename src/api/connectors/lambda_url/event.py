"""Conversão entre eventos de Lambda Function URL e modelos internos.

Formato do evento (payload v2.0):
    {
        "rawPath": "/path",
        "headers": {"x-signature": "..."},
        "body": "...",
        "isBase64Encoded": false,
        "requestContext": {"requestId": "..."}
    }
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from api.connectors.outcome import http_status_for, response_body_for
from app.protocols import InboundRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.use_cases.ingest import IngestResult


class InvalidEventError(ValueError):
    """Evento sem o formato mínimo de Function URL."""


def parse_function_url_event(event: Mapping[str, Any]) -> InboundRequest:
    """Extrai path, headers e corpo do evento.

    Args:
        event: Evento recebido pelo handler

    Returns:
        InboundRequest com o corpo ainda no encoding de transporte

    Raises:
        InvalidEventError: Se rawPath estiver ausente
    """
    path = event.get("rawPath")
    if not isinstance(path, str) or not path:
        raise InvalidEventError("rawPath ausente no evento")

    headers = event.get("headers") or {}
    body = event.get("body") or ""

    return InboundRequest(
        path=path,
        headers={str(k): str(v) for k, v in headers.items()},
        body=body.encode("utf-8") if isinstance(body, str) else bytes(body),
        is_base64_encoded=bool(event.get("isBase64Encoded", False)),
    )


def request_id_from_event(event: Mapping[str, Any]) -> str | None:
    """Request id do contexto, usado como correlation_id."""
    headers = event.get("headers") or {}
    for name, value in headers.items():
        if str(name).lower() == "x-correlation-id" and value:
            return str(value)
    context = event.get("requestContext") or {}
    request_id = context.get("requestId")
    return str(request_id) if request_id else None


def build_function_url_response(
    result: IngestResult,
    correlation_id: str = "",
) -> dict[str, Any]:
    """Monta a resposta no formato esperado pela Function URL."""
    return {
        "statusCode": http_status_for(result),
        "headers": {"content-type": "application/json"},
        "body": json.dumps(response_body_for(result, correlation_id)),
        "isBase64Encoded": False,
    }

"""Entrypoint para AWS Lambda Function URL.

Configuração do runtime:
    handler: app.lambda_handler.handler

O use case é montado na primeira invocação e reaproveitado enquanto o
ambiente de execução estiver quente. Configuração inválida propaga e
faz a invocação falhar.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from api.connectors.lambda_url import (
    InvalidEventError,
    build_function_url_response,
    parse_function_url_event,
    request_id_from_event,
)
from app.bootstrap import get_handle_payload_use_case, initialize_app
from app.observability import correlation_scope

initialize_app()

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Processa um evento da Function URL.

    Args:
        event: Evento no formato payload v2.0
        context: Contexto do runtime (não utilizado)

    Returns:
        Resposta `{statusCode, headers, body}`
    """
    use_case = get_handle_payload_use_case()
    with correlation_scope(request_id_from_event(event)) as correlation_id:
        try:
            request = parse_function_url_event(event)
        except InvalidEventError as exc:
            logger.warning("lambda_event_invalid", extra={"error": str(exc)})
            return {
                "statusCode": 400,
                "headers": {"content-type": "application/json"},
                "body": '{"error": "invalid_event"}',
                "isBase64Encoded": False,
            }

        result = asyncio.run(use_case.execute(request))
        return build_function_url_response(result, correlation_id)

"""Métricas emitidas como logs estruturados.

Cada métrica é um record `metric_<tipo>` com `metric_type` e os campos
da medição; a agregação fica com o backend de logs.

- latency: duração de chamadas externas (ex: document store)
- outcome: contador por rota e resultado ("success" ou o FailureKind)
"""

from __future__ import annotations

import logging
import time
from typing import Any

logger = logging.getLogger(__name__)


def elapsed_ms(started_at: float) -> float:
    """Milissegundos desde um `time.perf_counter()`."""
    return (time.perf_counter() - started_at) * 1000


def _emit(metric_type: str, correlation_id: str | None, **fields: Any) -> None:
    logger.info(
        f"metric_{metric_type}",
        extra={"metric_type": metric_type, "correlation_id": correlation_id, **fields},
    )


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra a duração de uma operação.

    Args:
        component: Ex: "document_store"
        operation: Ex: "add_documents"
        latency_ms: Duração em milissegundos
        correlation_id: Requisição de origem
    """
    _emit(
        "latency",
        correlation_id,
        component=component,
        operation=operation,
        latency_ms=round(latency_ms, 2),
    )


def record_outcome(path: str, outcome: str, correlation_id: str | None = None) -> None:
    """Registra o resultado final de uma requisição na rota."""
    _emit("outcome", correlation_id, path=path, outcome=outcome)

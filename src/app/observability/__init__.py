"""Observabilidade: correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import correlation_scope, record_outcome
"""

from app.observability.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import elapsed_ms, record_latency, record_outcome

__all__ = [
    "correlation_scope",
    "elapsed_ms",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]

"""Testes de correlation_id e métricas."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_latency,
    record_outcome,
)


def test_scope_sets_and_restores() -> None:
    before = get_correlation_id()

    with correlation_scope("req-1") as correlation_id:
        assert correlation_id == "req-1"
        assert get_correlation_id() == "req-1"
        with correlation_scope("req-2"):
            assert get_correlation_id() == "req-2"
        assert get_correlation_id() == "req-1"

    assert get_correlation_id() == before


def test_scope_generates_id_when_absent() -> None:
    with correlation_scope(None) as correlation_id:
        assert len(correlation_id) == 32


def test_metrics_are_log_events(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_latency("document_store", "add_documents", 12.3456, "c-1")
        record_outcome("/github", "auth_failed", "c-1")

    latency, outcome = caplog.records[-2:]
    assert latency.getMessage() == "metric_latency"
    assert latency.latency_ms == 12.35
    assert outcome.getMessage() == "metric_outcome"
    assert (outcome.path, outcome.outcome, outcome.correlation_id) == ("/github", "auth_failed", "c-1")

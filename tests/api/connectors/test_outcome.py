"""Testes do mapeamento de resultado para HTTP."""

from __future__ import annotations

import pytest

from api.connectors.outcome import STATUS_BY_FAILURE, http_status_for, response_body_for
from app.domain import (
    AuthFailedError,
    BadDocumentError,
    DecodeError,
    DispatchError,
    FailureKind,
    MissingPathError,
    RequestFailedError,
)
from app.use_cases.ingest import IngestResult


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (MissingPathError("/x"), 404),
        (AuthFailedError(), 401),
        (DecodeError("/x: invalid base64 body"), 400),
        (DispatchError("w.c: failed"), 502),
        (BadDocumentError("w", "c", "ERROR"), 422),
    ],
)
def test_failure_status(error: RequestFailedError, status: int) -> None:
    result = IngestResult.failed("/x", error)

    assert http_status_for(result) == status
    assert response_body_for(result) == {"error": error.kind.value}


def test_every_failure_kind_is_mapped() -> None:
    assert set(STATUS_BY_FAILURE) == set(FailureKind)


def test_success() -> None:
    result = IngestResult(path="/x", success=True, documents=3)

    assert http_status_for(result) == 200
    assert response_body_for(result) == {"status": "ok", "documents": 3}

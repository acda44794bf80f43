"""Testes do entrypoint de Lambda Function URL."""

from __future__ import annotations

import json

import pytest

from app import lambda_handler
from app.domain import PolicyRegistry
from app.use_cases.ingest import HandlePayloadUseCase
from tests.fakes.fake_document_store import FakeDocumentStore


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeDocumentStore:
    fake = FakeDocumentStore(documents=2)
    use_case = HandlePayloadUseCase(
        registry=PolicyRegistry.from_json(
            json.dumps({"/batch": {"collection": "events", "auth": {"type": "noop"}}})
        ),
        store=fake,
        default_workspace="commons",
    )
    monkeypatch.setattr(lambda_handler, "get_handle_payload_use_case", lambda: use_case)
    return fake


def test_handler_dispatches_event(store: FakeDocumentStore) -> None:
    event = {
        "rawPath": "/batch",
        "headers": {"content-type": "application/json"},
        "body": '[{"a":1},{"b":2}]',
        "isBase64Encoded": False,
        "requestContext": {"requestId": "req-1"},
    }

    response = lambda_handler.handler(event, None)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "status": "ok",
        "documents": 2,
        "correlation_id": "req-1",
    }
    assert store.calls[0].workspace == "commons"
    assert store.calls[0].payload == b'[{"a":1},{"b":2}]'


def test_handler_unknown_path(store: FakeDocumentStore) -> None:
    response = lambda_handler.handler({"rawPath": "/nope", "body": "{}"}, None)

    assert response["statusCode"] == 404
    assert store.calls == []


def test_handler_invalid_event(store: FakeDocumentStore) -> None:
    response = lambda_handler.handler({"headers": {}}, None)

    assert response["statusCode"] == 400
    assert json.loads(response["body"]) == {"error": "invalid_event"}

"""Testes da rota catch-all de ingestão."""

from __future__ import annotations

import json

import pytest
from starlette.requests import Request

from api.routes.webhook import router as webhook
from app.domain import PolicyRegistry
from app.infra.crypto import compute_signature
from app.observability import get_correlation_id
from app.use_cases.ingest import HandlePayloadUseCase
from tests.fakes.fake_document_store import FakeDocumentStore

CONFIG = {
    "/path": {"workspace": "workspace", "collection": "noop", "auth": {"type": "noop"}},
    "/signed": {
        "collection": "signed",
        "auth": {"type": "signature", "secret": "secret"},
    },
    "/team%20a": {"collection": "escaped", "auth": {"type": "noop"}},
}


def _build_request(
    path: str,
    *,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    raw_path: bytes | None = None,
) -> Request:
    raw_headers = [
        (k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "raw_path": raw_path if raw_path is not None else path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeDocumentStore:
    fake = FakeDocumentStore()
    use_case = HandlePayloadUseCase(
        registry=PolicyRegistry.from_json(json.dumps(CONFIG)),
        store=fake,
        default_workspace="default",
    )
    monkeypatch.setattr(webhook, "get_handle_payload_use_case", lambda: use_case)
    return fake


@pytest.mark.asyncio
async def test_success_returns_200(store: FakeDocumentStore) -> None:
    request = _build_request(
        "/path",
        body=b'{"key":"value"}',
        headers={"x-correlation-id": "corr-1"},
    )

    response = await webhook.receive_webhook(request, "path")
    payload = json.loads(response.body)

    assert response.status_code == 200
    assert payload == {"status": "ok", "documents": 1, "correlation_id": "corr-1"}
    assert store.calls[0].payload == b'{"key":"value"}'


@pytest.mark.asyncio
async def test_unknown_path_returns_404(store: FakeDocumentStore) -> None:
    response = await webhook.receive_webhook(_build_request("/missing", body=b"{}"), "missing")

    assert response.status_code == 404
    assert json.loads(response.body)["error"] == "missing_path"
    assert store.calls == []


@pytest.mark.asyncio
async def test_bad_signature_returns_401(store: FakeDocumentStore) -> None:
    request = _build_request("/signed", body=b"{}", headers={"X-Signature": "sha256=00"})

    response = await webhook.receive_webhook(request, "signed")

    assert response.status_code == 401
    assert json.loads(response.body)["error"] == "auth_failed"


@pytest.mark.asyncio
async def test_valid_signature_is_accepted(store: FakeDocumentStore) -> None:
    body = b'{"id":1}'
    request = _build_request(
        "/signed",
        body=body,
        headers={"X-Signature": compute_signature(body, "secret")},
    )

    response = await webhook.receive_webhook(request, "signed")

    assert response.status_code == 200
    assert store.calls[0].workspace == "default"


@pytest.mark.asyncio
async def test_correlation_id_is_reset_after_request(store: FakeDocumentStore) -> None:
    await webhook.receive_webhook(
        _build_request("/path", body=b"{}", headers={"x-correlation-id": "temp"}),
        "path",
    )

    assert get_correlation_id() != "temp"


@pytest.mark.asyncio
async def test_percent_escapes_are_matched_as_sent(store: FakeDocumentStore) -> None:
    request = _build_request("/team a", body=b"{}", raw_path=b"/team%20a")

    response = await webhook.receive_webhook(request, "team a")

    assert response.status_code == 200
    assert store.calls[0].collection == "escaped"


@pytest.mark.asyncio
async def test_decoded_path_is_not_configured(store: FakeDocumentStore) -> None:
    request = _build_request("/team a", body=b"{}", raw_path=b"/team a")

    response = await webhook.receive_webhook(request, "team a")

    assert response.status_code == 404
    assert store.calls == []

"""Testes dos modelos compartilhados."""

from __future__ import annotations

import base64
import binascii

import pytest

from app.protocols import DocumentStatus, InboundRequest


def test_header_names_are_normalized() -> None:
    request = InboundRequest(path="/p", headers={"X-Signature": "abc", "Content-Type": "json"})

    assert dict(request.headers) == {"x-signature": "abc", "content-type": "json"}
    assert request.header("X-SIGNATURE") == "abc"
    assert request.header("x-missing") is None


def test_headers_are_read_only() -> None:
    request = InboundRequest(path="/p", headers={"a": "1"})

    with pytest.raises(TypeError):
        request.headers["b"] = "2"  # type: ignore[index]


def test_str_body_is_encoded() -> None:
    assert InboundRequest(path="/p", body="ção").body == "ção".encode()  # type: ignore[arg-type]


def test_decoded_body() -> None:
    plain = InboundRequest(path="/p", body=b"raw")
    encoded = InboundRequest(path="/p", body=base64.b64encode(b"raw"), is_base64_encoded=True)
    broken = InboundRequest(path="/p", body=b"r@w", is_base64_encoded=True)

    assert plain.decoded_body() == b"raw"
    assert encoded.decoded_body() == b"raw"
    with pytest.raises(binascii.Error):
        broken.decoded_body()


def test_document_status_added() -> None:
    assert DocumentStatus(collection="c", status="ADDED").added is True
    assert DocumentStatus(collection="c", status="added").added is False
    assert DocumentStatus(collection="c", status="ERROR").added is False

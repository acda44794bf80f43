"""Testes da leitura de configuração no Secret Manager."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.infra.secrets import GCPSecretConfigSource, resolve_secret_name


def _response(value: str, name: str) -> SimpleNamespace:
    return SimpleNamespace(name=name, payload=SimpleNamespace(data=value.encode("utf-8")))


class TestResolveSecretName:
    def test_bare_id_uses_project_and_latest(self) -> None:
        assert resolve_secret_name("gateway-config", "proj") == (
            "projects/proj/secrets/gateway-config/versions/latest"
        )

    def test_full_name_without_version_gets_latest(self) -> None:
        assert resolve_secret_name("projects/p/secrets/s", None) == (
            "projects/p/secrets/s/versions/latest"
        )

    def test_full_name_with_version_is_kept(self) -> None:
        name = "projects/p/secrets/s/versions/3"
        assert resolve_secret_name(name, "other") == name

    def test_bare_id_without_project_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_secret_name("gateway-config", "")


def test_load_returns_value_and_version() -> None:
    client = MagicMock()
    client.access_secret_version.return_value = _response(
        '{"/p": {"collection": "c"}}',
        "projects/123/secrets/gateway-config/versions/7",
    )

    secret = GCPSecretConfigSource(project_id="proj", client=client).load("gateway-config")

    assert secret.value == '{"/p": {"collection": "c"}}'
    assert secret.version == 7
    client.access_secret_version.assert_called_once_with(
        request={"name": "projects/proj/secrets/gateway-config/versions/latest"}
    )


def test_load_propagates_client_errors() -> None:
    client = MagicMock()
    client.access_secret_version.side_effect = PermissionError("denied")

    with pytest.raises(PermissionError):
        GCPSecretConfigSource(project_id="proj", client=client).load("gateway-config")


def test_project_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GCP_PROJECT", "env-proj")
    client = MagicMock()
    client.access_secret_version.return_value = _response("{}", "x/versions/1")

    GCPSecretConfigSource(client=client).load("cfg")

    assert client.access_secret_version.call_args.kwargs["request"]["name"] == (
        "projects/env-proj/secrets/cfg/versions/latest"
    )

"""Testes do composition root."""

from __future__ import annotations

import json
import logging

import pytest

from app.bootstrap import clients
from app.bootstrap.dependencies import create_handle_payload_use_case, load_config_document
from app.domain import ConfigInvalidError
from app.infra.document_store import RocksetDocumentStore
from config.settings import BaseSettings, DocumentStoreSettings, GatewaySettings
from tests.fakes.fake_document_store import FakeConfigSource, FakeDocumentStore

CONFIG = json.dumps(
    {
        "/path": {"workspace": "workspace", "collection": "noop", "auth": {"type": "noop"}},
        "/signed": {"collection": "c", "auth": {"type": "signature", "secret": "super-secret"}},
    }
)


class TestLoadConfigDocument:
    def test_inline_config_wins(self) -> None:
        source = FakeConfigSource({"cfg": "{}"})
        settings = GatewaySettings(workspace="w", config_raw=CONFIG, config_path="cfg")

        assert load_config_document(settings, source) == CONFIG
        assert source.loaded == []

    def test_fetches_from_config_path(self) -> None:
        source = FakeConfigSource({"cfg": CONFIG})
        settings = GatewaySettings(workspace="w", config_path="cfg")

        assert load_config_document(settings, source) == CONFIG
        assert source.loaded == ["cfg"]

    def test_fetch_failure_is_config_invalid(self) -> None:
        settings = GatewaySettings(workspace="w", config_path="absent")

        with pytest.raises(ConfigInvalidError, match="absent") as exc_info:
            load_config_document(settings, FakeConfigSource())

        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_no_source_is_config_invalid(self) -> None:
        with pytest.raises(ConfigInvalidError):
            load_config_document(GatewaySettings(workspace="w"), FakeConfigSource())


class TestCreateHandlePayloadUseCase:
    def test_builds_use_case(self) -> None:
        store = FakeDocumentStore()
        settings = GatewaySettings(workspace="workspace", config_raw=CONFIG)

        use_case = create_handle_payload_use_case(settings, store=store)

        assert use_case.default_workspace == "workspace"
        assert set(use_case.registry) == {"/path", "/signed"}

    def test_remote_config(self) -> None:
        settings = GatewaySettings(workspace="workspace", config_path="cfg")

        use_case = create_handle_payload_use_case(
            settings,
            store=FakeDocumentStore(),
            config_source=FakeConfigSource({"cfg": CONFIG}),
        )

        assert "/path" in use_case.registry

    @pytest.mark.parametrize(
        "settings",
        [
            GatewaySettings(workspace="", config_raw=CONFIG),
            GatewaySettings(workspace="w"),
            GatewaySettings(workspace="w", config_raw="not json"),
            GatewaySettings(workspace="w", config_raw='{"/p": {"auth": {"type": "noop"}}}'),
        ],
    )
    def test_invalid_inputs_raise(self, settings: GatewaySettings) -> None:
        with pytest.raises(ConfigInvalidError):
            create_handle_payload_use_case(settings, store=FakeDocumentStore())

    def test_blank_service_name_aborts_startup(self) -> None:
        settings = GatewaySettings(workspace="w", config_raw=CONFIG)

        with pytest.raises(ConfigInvalidError, match="SERVICE_NAME"):
            create_handle_payload_use_case(
                settings,
                store=FakeDocumentStore(),
                base_settings=BaseSettings(service_name=" "),
            )

    def test_debug_summary_has_no_secrets(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = GatewaySettings(workspace="workspace", config_raw=CONFIG, debug=True)

        with caplog.at_level(logging.DEBUG):
            create_handle_payload_use_case(settings, store=FakeDocumentStore())

        summary = next(r for r in caplog.records if r.getMessage() == "route_policies")
        assert summary.policies["/signed"]["auth"] == "signature:x-signature"
        assert all("super-secret" not in str(r.__dict__) for r in caplog.records)


class TestClients:
    def test_create_document_store(self) -> None:
        store = clients.create_document_store(DocumentStoreSettings(api_key="k"))

        assert isinstance(store, RocksetDocumentStore)

    def test_missing_api_key_is_config_invalid(self) -> None:
        with pytest.raises(ConfigInvalidError, match="ROCKSET_APIKEY"):
            clients.create_document_store(DocumentStoreSettings(api_key=""))

"""GCP Secret Manager — leitura do documento de configuração.

O documento de rotas contém segredos de autenticação; em produção ele
fica no Secret Manager e é buscado uma única vez no startup.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from app.protocols import SecretValue

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceClient

logger = logging.getLogger(__name__)

LATEST_VERSION = "latest"


@lru_cache(maxsize=1)
def _get_client() -> SecretManagerServiceClient:
    """Obtém cliente do Secret Manager (singleton via lru_cache)."""
    from google.cloud import secretmanager

    return secretmanager.SecretManagerServiceClient()


def resolve_secret_name(key: str, project_id: str | None) -> str:
    """Monta o nome completo da versão do secret.

    Aceita nome completo (`projects/p/secrets/s[/versions/v]`) ou apenas
    o id do secret, resolvido contra o projeto na versão `latest`.

    Raises:
        ValueError: Se só o id foi informado e não há projeto definido.
    """
    if key.startswith("projects/"):
        return key if "/versions/" in key else f"{key}/versions/{LATEST_VERSION}"
    if not project_id:
        msg = "GCP_PROJECT não definido e CONFIG_PATH não é um nome completo"
        raise ValueError(msg)
    return f"projects/{project_id}/secrets/{key}/versions/{LATEST_VERSION}"


class GCPSecretConfigSource:
    """ConfigSourceProtocol sobre o GCP Secret Manager.

    Args:
        project_id: ID do projeto GCP (default: env GCP_PROJECT)
        client: Cliente injetado (testes); usa o singleton se None
    """

    def __init__(
        self,
        project_id: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._project_id = project_id or os.getenv("GCP_PROJECT", "")
        self._client = client

    def load(self, key: str) -> SecretValue:
        """Lê e decifra o secret.

        Returns:
            Valor e número da versão lida

        Raises:
            ValueError: Se a chave não puder ser resolvida
            google.api_core.exceptions.GoogleAPICallError: Falha na API
        """
        name = resolve_secret_name(key, self._project_id)
        client = self._client or _get_client()

        try:
            response = client.access_secret_version(request={"name": name})
        except Exception as exc:
            logger.error(
                "config_load_error",
                extra={"key": key, "error_type": type(exc).__name__},
            )
            raise

        secret = SecretValue(
            value=response.payload.data.decode("UTF-8"),
            version=_parse_version(response.name),
        )
        logger.info("config_loaded", extra={"key": key, "version": secret.version})
        return secret


def _parse_version(name: str) -> int:
    tail = name.rsplit("/", 1)[-1]
    return int(tail) if tail.isdigit() else 0

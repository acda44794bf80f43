"""Settings do document store (Rockset).

Mesmas variáveis lidas pelo cliente oficial: ROCKSET_APIKEY e
ROCKSET_APISERVER.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_SERVER: str = "https://api.usw2a1.rockset.com"


@dataclass(frozen=True)
class DocumentStoreSettings:
    """Configurações do cliente de documentos.

    Attributes:
        api_key: API key enviada como `Authorization: ApiKey <key>`
        api_server: Host da API (esquema opcional, https por padrão)
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Retentativas em 429/5xx (0 = chamada única)
    """

    api_key: str = ""
    api_server: str = DEFAULT_API_SERVER
    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    @property
    def base_url(self) -> str:
        """URL base com esquema e sem barra final."""
        server = self.api_server.strip().rstrip("/")
        if not server.startswith(("http://", "https://")):
            server = f"https://{server}"
        return server

    def validate(self) -> list[str]:
        """Valida configurações mínimas do cliente.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("ROCKSET_APIKEY não configurado")

        if not self.api_server:
            errors.append("ROCKSET_APISERVER não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("ROCKSET_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("ROCKSET_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> DocumentStoreSettings:
    """Carrega DocumentStoreSettings a partir de variáveis de ambiente."""
    return DocumentStoreSettings(
        api_key=os.getenv("ROCKSET_APIKEY", ""),
        api_server=os.getenv("ROCKSET_APISERVER", DEFAULT_API_SERVER),
        request_timeout_seconds=float(os.getenv("ROCKSET_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("ROCKSET_MAX_RETRIES", "0")),
    )


@lru_cache(maxsize=1)
def get_document_store_settings() -> DocumentStoreSettings:
    """Retorna instância cacheada de DocumentStoreSettings."""
    return _load_from_env()

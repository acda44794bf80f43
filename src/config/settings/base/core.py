"""Settings do processo, independentes de rota ou destino."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TRUTHY_VALUES = frozenset({"true", "1", "yes", "on"})

DEFAULT_SERVICE_NAME = "webhook-gateway"


@dataclass(frozen=True)
class BaseSettings:
    """Identidade do serviço.

    Attributes:
        service_name: Campo `service` dos logs e do /health
        gcp_project: Projeto usado para resolver CONFIG_PATH no Secret Manager
    """

    service_name: str = DEFAULT_SERVICE_NAME
    gcp_project: str = ""

    def validate(self) -> list[str]:
        """Returns: lista de erros (vazia = OK)."""
        if not self.service_name.strip():
            return ["SERVICE_NAME não pode ser vazio"]
        return []


def parse_bool(value: str | None) -> bool:
    """Flag de env: true/1/yes/on (sem diferenciar caixa) é True."""
    return (value or "").strip().lower() in TRUTHY_VALUES


def _load_from_env() -> BaseSettings:
    return BaseSettings(
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        gcp_project=os.getenv("GCP_PROJECT") or os.getenv("GOOGLE_CLOUD_PROJECT", ""),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_from_env()

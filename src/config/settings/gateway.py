"""Settings de roteamento do gateway.

Entradas obrigatórias do processo:
- WORKSPACE: workspace padrão quando a rota não define o seu
- CONFIG: documento JSON de rotas, ou
- CONFIG_PATH: chave do secret que contém o documento
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import parse_bool


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações de roteamento.

    Attributes:
        workspace: Workspace padrão de destino
        config_raw: Documento de configuração JSON (inline)
        config_path: Chave do documento no secret store
        debug: Loga nomes de headers e tamanho do corpo por requisição
    """

    workspace: str = ""
    config_raw: str | None = None
    config_path: str | None = None
    debug: bool = False

    @property
    def uses_remote_config(self) -> bool:
        """True quando o documento precisa ser buscado no secret store."""
        return self.config_raw is None and bool(self.config_path)

    def validate(self) -> list[str]:
        """Valida entradas obrigatórias de startup.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.workspace:
            errors.append("WORKSPACE não configurado")

        if self.config_raw is None and not self.config_path:
            errors.append("CONFIG ou CONFIG_PATH não configurado")

        return errors


def _load_from_env() -> GatewaySettings:
    """Carrega GatewaySettings a partir de variáveis de ambiente."""
    return GatewaySettings(
        workspace=os.getenv("WORKSPACE", ""),
        config_raw=os.getenv("CONFIG"),
        config_path=os.getenv("CONFIG_PATH") or None,
        debug=parse_bool(os.getenv("DEBUG")),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_from_env()

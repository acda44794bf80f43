"""Registro imutável rota -> política.

Construído uma vez no startup a partir do documento de configuração
(objeto JSON indexado pela rota). Lookup exato e case-sensitive, sem
prefixo ou wildcard.

Exemplo de documento:
    {
        "/github": {
            "collection": "github_events",
            "wrap": true,
            "auth": {"type": "signature", "secret": "...", "header": "X-Hub-Signature-256"}
        },
        "/internal": {"workspace": "ops", "collection": "audit", "auth": {"type": "noop"}}
    }
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.domain.auth_policy import AuthPolicy, DenyAll, build_auth_policy
from app.domain.errors import ConfigInvalidError, MissingPathError

logger = logging.getLogger(__name__)


class AuthConfig(BaseModel):
    """Bloco `auth` de uma rota."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    secret: str | None = None
    header: str | None = None


class RouteConfig(BaseModel):
    """Entrada do documento de configuração para uma rota."""

    model_config = ConfigDict(extra="ignore")

    workspace: str | None = None
    collection: str = Field(min_length=1)
    wrap: bool = False
    auth: AuthConfig | None = None


_DOCUMENT_ADAPTER = TypeAdapter(dict[str, RouteConfig])


@dataclass(frozen=True, slots=True)
class PathPolicy:
    """Destino, autenticação e transformação de uma rota.

    Attributes:
        collection: Collection de destino
        auth: Política de autenticação
        workspace: Workspace de destino; vazio usa o padrão do processo
        wrap: Envolve o corpo em um array JSON antes do envio
    """

    collection: str
    auth: AuthPolicy
    workspace: str = ""
    wrap: bool = False

    def resolve_workspace(self, default_workspace: str) -> str:
        """Workspace efetivo: o da rota, ou o padrão se vazio."""
        return self.workspace or default_workspace

    @classmethod
    def from_config(cls, config: RouteConfig) -> PathPolicy:
        auth = config.auth
        if auth is None:
            policy = build_auth_policy(None)
        else:
            policy = build_auth_policy(auth.type, auth.secret, auth.header)
        return cls(
            collection=config.collection,
            auth=policy,
            workspace=config.workspace or "",
            wrap=config.wrap,
        )


class PolicyRegistry(Mapping[str, PathPolicy]):
    """Mapeamento somente-leitura rota -> PathPolicy."""

    __slots__ = ("_policies",)

    def __init__(self, policies: Mapping[str, PathPolicy]) -> None:
        self._policies = MappingProxyType(dict(policies))

    @classmethod
    def from_json(cls, raw: str | bytes) -> PolicyRegistry:
        """Parseia o documento de configuração.

        Raises:
            ConfigInvalidError: Se o documento não for JSON válido, não for
                objeto, ou alguma rota não tiver collection.
        """
        try:
            document = _DOCUMENT_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise ConfigInvalidError(
                f"documento de configuração inválido: {exc.error_count()} erro(s)"
            ) from exc

        registry = cls(
            {path: PathPolicy.from_config(config) for path, config in document.items()}
        )
        denied = [path for path, policy in registry.items() if isinstance(policy.auth, DenyAll)]
        if denied:
            logger.warning("routes_fail_closed", extra={"paths": denied})
        return registry

    def resolve(self, path: str) -> PathPolicy:
        """Retorna a política da rota.

        Raises:
            MissingPathError: Se a rota não estiver configurada.
        """
        policy = self._policies.get(path)
        if policy is None:
            raise MissingPathError(path)
        return policy

    def auth_policy_for(self, path: str) -> AuthPolicy:
        """Política de autenticação da rota; DenyAll se desconhecida."""
        policy = self._policies.get(path)
        if policy is None:
            logger.info("auth_policy_not_found", extra={"path": path})
            return DenyAll("path_not_configured")
        return policy.auth

    def __getitem__(self, path: str) -> PathPolicy:
        return self._policies[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._policies)

    def __len__(self) -> int:
        return len(self._policies)

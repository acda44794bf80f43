"""Políticas de autenticação por rota.

Conjunto fechado de variantes; o despacho fica em
`app.domain.authenticator.authenticate` via `match`.

Qualquer configuração ausente, incompleta ou desconhecida vira
`DenyAll` (fail-closed). Nunca cair para `NoAuth` por omissão.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

DEFAULT_SIGNATURE_HEADER = "x-signature"

AUTH_TYPE_NOOP = "noop"
AUTH_TYPE_HEADER = "header"
AUTH_TYPE_SIGNATURE = "signature"


@dataclass(frozen=True, slots=True)
class NoAuth:
    """Sempre autentica. Para rotas internas/confiáveis."""


@dataclass(frozen=True, slots=True)
class DenyAll:
    """Nunca autentica.

    Attributes:
        reason: Motivo do fallback, apenas para log
    """

    reason: str = "not_configured"


@dataclass(frozen=True, slots=True)
class HeaderMatch:
    """Header estático com segredo compartilhado."""

    header_name: str
    expected_secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class HmacSignature:
    """Assinatura HMAC-SHA256 do corpo em um header."""

    signing_key: str = field(repr=False)
    header_name: str = DEFAULT_SIGNATURE_HEADER


AuthPolicy: TypeAlias = NoAuth | DenyAll | HeaderMatch | HmacSignature


def build_auth_policy(
    auth_type: str | None,
    secret: str | None = None,
    header: str | None = None,
) -> AuthPolicy:
    """Converte o bloco `auth` da configuração em uma política.

    Args:
        auth_type: "noop", "header" ou "signature"; outro valor nega tudo
        secret: Segredo do header ou chave de assinatura
        header: Nome do header (opcional para "signature")

    Returns:
        Política correspondente, ou DenyAll quando incompleta/desconhecida.
    """
    match auth_type:
        case "noop":
            return NoAuth()
        case "header":
            if not header or not secret:
                return DenyAll("header_policy_incomplete")
            return HeaderMatch(header_name=header, expected_secret=secret)
        case "signature":
            if not secret:
                return DenyAll("signing_key_missing")
            return HmacSignature(
                signing_key=secret,
                header_name=header or DEFAULT_SIGNATURE_HEADER,
            )
        case None | "":
            return DenyAll("auth_type_missing")
        case _:
            return DenyAll("unknown_auth_type")


def describe_auth_policy(policy: AuthPolicy) -> str:
    """Nome curto da política para logs (sem segredos)."""
    match policy:
        case NoAuth():
            return AUTH_TYPE_NOOP
        case HeaderMatch(header_name=name):
            return f"{AUTH_TYPE_HEADER}:{name.lower()}"
        case HmacSignature(header_name=name):
            return f"{AUTH_TYPE_SIGNATURE}:{name.lower()}"
        case DenyAll(reason=reason):
            return f"deny:{reason}"

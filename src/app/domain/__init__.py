"""Domínio do gateway — políticas por rota, autenticação e erros."""

from app.domain.auth_policy import (
    DEFAULT_SIGNATURE_HEADER,
    AuthPolicy,
    DenyAll,
    HeaderMatch,
    HmacSignature,
    NoAuth,
    build_auth_policy,
    describe_auth_policy,
)
from app.domain.authenticator import authenticate
from app.domain.errors import (
    AuthFailedError,
    BadDocumentError,
    ConfigInvalidError,
    DecodeError,
    DispatchError,
    FailureKind,
    GatewayError,
    MissingPathError,
    RequestFailedError,
)
from app.domain.policy_registry import PathPolicy, PolicyRegistry

__all__ = [
    "DEFAULT_SIGNATURE_HEADER",
    "AuthFailedError",
    "AuthPolicy",
    "BadDocumentError",
    "ConfigInvalidError",
    "DecodeError",
    "DenyAll",
    "DispatchError",
    "FailureKind",
    "GatewayError",
    "HeaderMatch",
    "HmacSignature",
    "MissingPathError",
    "NoAuth",
    "PathPolicy",
    "PolicyRegistry",
    "RequestFailedError",
    "authenticate",
    "build_auth_policy",
    "describe_auth_policy",
]

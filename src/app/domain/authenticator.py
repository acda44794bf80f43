"""Autenticação de requisições conforme a política da rota.

Motivos de rejeição são logados; o chamador recebe sempre o mesmo
AuthFailedError para não expor o mecanismo de validação.
"""

from __future__ import annotations

import binascii
import hmac
import logging
from typing import TYPE_CHECKING, NoReturn

from app.domain.auth_policy import (
    DEFAULT_SIGNATURE_HEADER,
    DenyAll,
    HeaderMatch,
    HmacSignature,
    NoAuth,
)
from app.domain.errors import AuthFailedError
from app.infra.crypto import verify_signature

if TYPE_CHECKING:
    from app.domain.auth_policy import AuthPolicy
    from app.protocols import InboundRequest

logger = logging.getLogger(__name__)


def authenticate(policy: AuthPolicy, request: InboundRequest) -> None:
    """Valida a requisição contra a política.

    Args:
        policy: Política resolvida para a rota
        request: Requisição original (headers + corpo ainda sem wrap)

    Raises:
        AuthFailedError: Se a política rejeitar a requisição.
    """
    match policy:
        case NoAuth():
            return
        case DenyAll(reason=reason):
            _reject(request, "deny_all", policy_reason=reason)
        case HeaderMatch():
            _check_header(policy, request)
        case HmacSignature():
            _check_signature(policy, request)
        case _:
            _reject(request, "unsupported_policy")


def _check_header(policy: HeaderMatch, request: InboundRequest) -> None:
    presented = request.header(policy.header_name)
    if presented is None:
        _reject(request, "auth_header_missing", header=policy.header_name.lower())
    if not presented:
        _reject(request, "auth_header_empty", header=policy.header_name.lower())
    if not hmac.compare_digest(
        presented.encode("utf-8"), policy.expected_secret.encode("utf-8")
    ):
        _reject(request, "auth_header_mismatch", header=policy.header_name.lower())


def _check_signature(policy: HmacSignature, request: InboundRequest) -> None:
    header = (policy.header_name or DEFAULT_SIGNATURE_HEADER).lower()
    presented = request.header(header)
    if presented is None:
        _reject(request, "signature_header_missing", header=header)

    try:
        payload = request.decoded_body()
    except binascii.Error:
        _reject(request, "signature_body_undecodable", header=header)

    if not verify_signature(payload, presented, policy.signing_key):
        _reject(request, "signature_mismatch", header=header)


def _reject(request: InboundRequest, reason: str, **context: str) -> NoReturn:
    logger.warning(
        "authentication_rejected",
        extra={"path": request.path, "reason": reason, **context},
    )
    raise AuthFailedError

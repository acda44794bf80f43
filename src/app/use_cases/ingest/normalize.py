"""Normalização do corpo antes do envio ao document store."""

from __future__ import annotations

import binascii
from typing import TYPE_CHECKING

from app.domain.errors import DecodeError

if TYPE_CHECKING:
    from app.domain.policy_registry import PathPolicy
    from app.protocols import InboundRequest

ARRAY_PREFIX = b"["
ARRAY_SUFFIX = b"]"


def normalize_payload(request: InboundRequest, policy: PathPolicy) -> bytes:
    """Decodifica o corpo e aplica o wrap em array quando configurado.

    Chamado somente após a autenticação: o wrap nunca altera os bytes
    verificados pela assinatura.

    Args:
        request: Requisição original
        policy: Política da rota

    Returns:
        Payload JSON bruto para envio

    Raises:
        DecodeError: Se o corpo base64 for inválido
    """
    try:
        body = request.decoded_body()
    except binascii.Error as exc:
        raise DecodeError(f"{request.path}: invalid base64 body") from exc

    if policy.wrap:
        return wrap_in_array(body)
    return body


def wrap_in_array(body: bytes) -> bytes:
    """Envolve um documento JSON como único elemento de um array."""
    return ARRAY_PREFIX + body + ARRAY_SUFFIX

"""Use cases de ingestão de webhooks."""

from .handle_payload import HandlePayloadUseCase, IngestResult
from .normalize import normalize_payload, wrap_in_array

__all__ = [
    "HandlePayloadUseCase",
    "IngestResult",
    "normalize_payload",
    "wrap_in_array",
]

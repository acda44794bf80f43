"""Integração com o document store de destino."""

from .rockset import DocumentStoreError, RocksetDocumentStore

__all__ = ["DocumentStoreError", "RocksetDocumentStore"]

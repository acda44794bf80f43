"""Secrets — leitura da configuração remota.

Módulos disponíveis:
    - gcp_secrets: Integração com Google Cloud Secret Manager
"""

from __future__ import annotations

from app.infra.secrets.gcp_secrets import GCPSecretConfigSource, resolve_secret_name

__all__ = [
    "GCPSecretConfigSource",
    "resolve_secret_name",
]

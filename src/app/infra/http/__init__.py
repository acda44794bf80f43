"""Cliente HTTP compartilhado pelas integrações."""

from .client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]

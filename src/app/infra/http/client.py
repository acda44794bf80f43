"""Cliente HTTP assíncrono compartilhado pelas integrações de saída.

Uma tentativa por padrão. Retentativa é opt-in (`max_retries`) e só
cobre falhas transitórias: 429, 5xx, timeout e erro de conexão.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass
class HttpClientConfig:
    """Parâmetros de transporte.

    Attributes:
        timeout_seconds: Timeout total por tentativa
        max_retries: Tentativas extras após a primeira (0 = nenhuma)
        backoff_base_seconds: Espera base, dobrada a cada tentativa
        backoff_max_seconds: Teto da espera
        default_headers: Headers enviados em toda requisição
        transport: Transporte httpx alternativo (ex: MockTransport)
    """

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None

    def backoff_for(self, attempt: int) -> float:
        return min(self.backoff_base_seconds * (2**attempt), self.backoff_max_seconds)


class HttpError(Exception):
    """Falha de transporte; a mensagem nunca inclui headers ou corpo."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Base para clientes de APIs externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia `content` sem reserialização.

        Returns:
            Resposta final; status não transitórios voltam ao chamador.

        Raises:
            HttpError: Falha transitória persistente após as tentativas.
        """
        merged = {**self._config.default_headers, **(headers or {})}
        attempts = self._config.max_retries + 1

        for attempt in range(attempts):
            last = attempt == attempts - 1
            try:
                response = await self._send(url, content, merged)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if last:
                    raise HttpError("http_connection_error") from exc
                reason = type(exc).__name__
            else:
                if response.status_code not in RETRYABLE_STATUS:
                    return response
                if last:
                    raise HttpError("http_retryable_status", status_code=response.status_code)
                reason = f"status_{response.status_code}"

            delay = self._config.backoff_for(attempt)
            logger.info(
                "http_retry_scheduled",
                extra={"attempt": attempt + 1, "reason": reason, "backoff_seconds": delay},
            )
            await asyncio.sleep(delay)

        raise HttpError("http_retry_exhausted")

    async def _send(self, url: str, content: bytes, headers: dict[str, str]) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._config.transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            return await client.post(url, content=content, headers=headers)

"""Entrypoint HTTP do webhook gateway.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    webhook-gateway   # HOST/PORT via env, reload ligado com DEBUG=true
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import get_handle_payload_use_case, initialize_app
from app.domain.errors import ConfigInvalidError
from config.logging import get_logger
from config.settings import parse_bool

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging antes de qualquer logger ser usado
initialize_app()

logger = get_logger(__name__)

APP_TITLE = "webhook-gateway"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Monta o use case no startup; sem rotas válidas o serviço não sobe."""
    try:
        app.state.handle_payload = get_handle_payload_use_case()
    except ConfigInvalidError as exc:
        logger.critical("config_invalid", extra={"error": str(exc)})
        raise

    logger.info("gateway_started", extra={"routes": len(app.state.handle_payload.registry)})
    yield
    logger.info("gateway_stopped")


def create_app() -> FastAPI:
    """Aplicação sem docs/openapi: toda rota POST é um webhook."""
    gateway = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    gateway.include_router(create_api_router())
    return gateway


app = create_app()


def main() -> None:
    """Sobe o uvicorn com HOST/PORT do ambiente."""
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info("gateway_serving", extra={"host": host, "port": port})
    uvicorn.run("app.app:app", host=host, port=port, reload=parse_bool(os.getenv("DEBUG")))


if __name__ == "__main__":
    main()

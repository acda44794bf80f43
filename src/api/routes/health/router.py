"""Probes de liveness e readiness."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _now() -> str:
    return datetime.now(UTC).isoformat()


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Processo de pé; não consulta dependências."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=_now(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Pronto quando o lifespan montou o use case com as rotas carregadas."""
    use_case = getattr(request.app.state, "handle_payload", None)
    if use_case is None:
        logger.warning("readiness_not_ready")
        return JSONResponse(
            content={"status": "not_ready", "checks": {"routes": 0}, "timestamp": _now()},
            status_code=503,
        )

    return JSONResponse(
        content={
            "status": "ready",
            "checks": {"routes": len(use_case.registry)},
            "timestamp": _now(),
        }
    )

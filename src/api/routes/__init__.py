"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (ingestão, health)
- Montar InboundRequest a partir do request
- Delegação para o use case
- Respostas HTTP apropriadas

Estrutura:
- routes/webhook/: catch-all POST de ingestão
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

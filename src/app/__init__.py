"""App — núcleo do gateway: domínio, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: políticas por rota, autenticação e taxonomia de erros
- use_cases/: pipeline de ingestão (sem IO direto)
- infra/: implementações concretas de IO (document store, secrets, HTTP)
- protocols/: contratos/interfaces e modelos compartilhados
- observability/: correlation_id e métricas via logs estruturados

Entrypoints:
- app.py: aplicação ASGI (FastAPI)
- lambda_handler.py: AWS Lambda Function URL

Padrão: api adapta; app executa; config configura.
"""

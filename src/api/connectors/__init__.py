"""Connectors — adapters de borda entre transportes e o use case.

Estrutura:
- lambda_url/: eventos de AWS Lambda Function URL
- outcome.py: IngestResult -> status HTTP e corpo
"""

__all__: list[str] = []

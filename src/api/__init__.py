"""API — camada de borda.

Responsabilidades:
- Receber requests HTTP e eventos de Function URL
- Converter para InboundRequest
- Mapear IngestResult para respostas do transporte

Subpastas:
- connectors/: adapters de transporte e mapeamento de resultado
- routes/: endpoints HTTP (ingestão, health)

NÃO PODE conter: autenticação, parsing de rotas, chamadas ao document store.
"""

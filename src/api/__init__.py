"""API — camada de borda do Notion.

Responsabilidades:
- Receber webhooks (verificação, assinatura HMAC, chave de API)
- Chamar a API REST do Notion (retries, erros tipados)
- Construir blocos e valores de propriedade para escrita

Subpastas:
- connectors/: cliente HTTP e validação de webhooks do Notion
- payload_builders/: construção de blocos para a API do Notion
- routes/: endpoints HTTP (webhooks e health)

NÃO PODE conter: regras de casamento de processadores nem orquestração de use cases.
"""

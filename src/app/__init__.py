"""App — despacho de eventos, processadores e infraestrutura.

Subpastas:
- bootstrap/: composition root (clientes, registro, inicialização)
- coordinators/: fluxo webhook → use case de despacho
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- domain/: eventos de webhook e definição de processador
- processors/: processadores registrados (predicados + executor)
- executors/: ações executadas quando um processador casa
- services/: predicados e registro
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation id e métricas

Padrão: app executa; api adapta; ai descreve a pesquisa; utils apoia.
"""

"""App — orquestração da reconciliação e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: reconcilers (create/read/update por recurso)
- domain/: identificadores e resultados
- infra/: implementações concretas do estado declarativo
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas
- constants/: constantes da aplicação

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""

"""API — camada de borda com a Contentful.

Subpastas:
- connectors/: transporte HTTP, autenticação e serviços por recurso
- normalizers/: conversão formato externo ↔ formato da API
- payload_builders/: construção de corpos de requisição

NÃO PODE conter: FSM, regras de reconciliação, orquestração de use cases.
"""

"""API — camada de borda com o backend da agenda.

Responsabilidades:
- Desembrulhar o envelope `{success, data, errors}`
- Normalizar os formatos de `data` por ação para o formato canônico

Subpastas:
- normalizers/: conversão de respostas externas → formato interno

NÃO PODE conter: regras de agenda, estado de tela, IO de rede.
"""

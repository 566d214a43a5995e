"""App — núcleo da agenda: serviços, sessão de visualização e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- services/: configuração, grade, agregação dia/semana, status e comandos
- sessions/: estado explícito da tela e operações de navegação
- infra/: implementações concretas de IO (cliente HTTP)
- protocols/: contratos/interfaces
- domain/: modelos de agendamento, erros e mensagens
- observability/: correlation_id e métricas em logs
- constants/: ações do backend e códigos de conflito

Padrão: app executa; api adapta; fsm governa status.
"""

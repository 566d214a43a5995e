"""
Tabelas de transição entre status de agendamento.

O comportamento histórico da agenda permite qualquer botão de status a
partir de qualquer status (inclusive o atual). Essa é a tabela padrão.
A tabela com terminais travados fica disponível para quando o produto
decidir que Faltou/Cancelado/Concluído não podem mais ser alterados.
"""

from fsm.states.status import TERMINAL_STATUSES, AppointmentStatus

TransitionMap = dict[AppointmentStatus, frozenset[AppointmentStatus]]

_ALL_STATUSES: frozenset[AppointmentStatus] = frozenset(AppointmentStatus)

# Qualquer status → qualquer status
UNRESTRICTED_TRANSITIONS: TransitionMap = {
    status: _ALL_STATUSES for status in AppointmentStatus
}

# Status terminais sem saída; demais seguem livres
TERMINAL_LOCKED_TRANSITIONS: TransitionMap = {
    status: frozenset() if status in TERMINAL_STATUSES else _ALL_STATUSES
    for status in AppointmentStatus
}


def get_transition_table(*, lock_terminal: bool = False) -> TransitionMap:
    """Seleciona a tabela de transições conforme a configuração."""
    return TERMINAL_LOCKED_TRANSITIONS if lock_terminal else UNRESTRICTED_TRANSITIONS


def get_valid_targets(
    status: AppointmentStatus,
    table: TransitionMap | None = None,
) -> frozenset[AppointmentStatus]:
    """
    Retorna os status de destino permitidos a partir de `status`.

    Args:
        status: Status de origem
        table: Tabela de transições (padrão: irrestrita)

    Returns:
        Conjunto de destinos (vazio se não houver saída)
    """
    transitions = table if table is not None else UNRESTRICTED_TRANSITIONS
    return transitions.get(status, frozenset())


def is_transition_valid(
    from_status: AppointmentStatus,
    to_status: AppointmentStatus,
    table: TransitionMap | None = None,
) -> bool:
    """Verifica se a transição é permitida pela tabela."""
    return to_status in get_valid_targets(from_status, table)


def validate_transition_map(table: TransitionMap) -> list[str]:
    """
    Valida a integridade de uma tabela de transições.

    Verifica:
    - Todos os status do enum estão na tabela
    - Nenhum destino é valor fora do enum

    Returns:
        Lista de erros encontrados (vazia se válida)
    """
    errors: list[str] = []

    for status in AppointmentStatus:
        if status not in table:
            errors.append(f"Status {status.name} ausente na tabela de transições")

    for from_status, targets in table.items():
        for target in targets:
            if not isinstance(target, AppointmentStatus):
                errors.append(f"Transição {from_status.name} → {target}: destino inválido")

    return errors

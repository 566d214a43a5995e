"""Resolução da configuração da agenda (uma tentativa por sessão).

A grade depende de início, fim e granularidade. O backend pode não
responder ou devolver campos inválidos; nesses casos o padrão é mantido
campo a campo e a agenda continua utilizável.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.constants.agenda import AgendaAction
from app.domain.agenda_config import AgendaConfig
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.protocols.agenda_request import AgendaRequestProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "agenda_config_resolver"
_CONFIG_FIELDS = ("hora_inicio_padrao", "hora_fim_padrao", "duracao_grade_minutos")


def merge_config(current: AgendaConfig, data: Mapping[str, Any] | None) -> AgendaConfig:
    """Aplica sobre `current` cada campo presente e válido de `data`.

    Valores vazios, zero ou malformados mantêm o valor atual do campo.
    """
    if not isinstance(data, Mapping):
        return current
    merged = current
    for field in _CONFIG_FIELDS:
        value = data.get(field)
        if not value:
            continue
        candidate = {**merged.model_dump(by_alias=True), field: value}
        try:
            merged = AgendaConfig.model_validate(candidate)
        except ValidationError:
            logger.warning(
                "agenda_config_field_ignored",
                extra={"component": _COMPONENT, "field": field},
            )
    return merged


class AgendaConfigResolver:
    """Carrega `AgendaConfig_Obter` uma única vez e guarda o resultado.

    Chamadas concorrentes a `ensure_loaded` compartilham a mesma busca.
    Depois da primeira tentativa (com sucesso ou não) nada é refeito.
    """

    __slots__ = ("_request", "_config", "_loaded", "_lock")

    def __init__(
        self,
        request: AgendaRequestProtocol,
        defaults: AgendaConfig | None = None,
    ) -> None:
        self._request = request
        self._config = defaults if defaults is not None else AgendaConfig()
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_config(self) -> AgendaConfig:
        """Configuração atual (padrão até `ensure_loaded` terminar)."""
        return self._config

    async def ensure_loaded(self) -> AgendaConfig:
        if self._loaded:
            return self._config
        async with self._lock:
            if not self._loaded:
                await self._load()
        return self._config

    async def _load(self) -> None:
        started = time.perf_counter()
        try:
            data = await self._request.request(AgendaAction.CONFIG_OBTER, {})
        except Exception as exc:
            log_fallback(
                logger,
                _COMPONENT,
                reason=getattr(exc, "kind", type(exc).__name__),
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
            return
        finally:
            self._loaded = True

        self._config = merge_config(self._config, data)
        logger.info(
            "agenda_config_loaded",
            extra={
                "component": _COMPONENT,
                "action": "ensure_loaded",
                "result": "ok",
                "start_time": self._config.start_time,
                "end_time": self._config.end_time,
                "slot_granularity_minutes": self._config.slot_granularity_minutes,
            },
        )


__all__ = ["AgendaConfigResolver", "merge_config"]

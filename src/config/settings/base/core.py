"""Settings base da agenda.

Configurações comuns ao serviço, independentes do backend.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível de log aplicado no bootstrap
    """

    environment: Environment = "development"
    service_name: str = "prontio_agenda"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in {"development", "staging", "production"}:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "prontio_agenda"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()

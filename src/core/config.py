"""Configuración del Core.

Por qué aquí:
- Centraliza los ajustes de runtime (pydantic-settings) sin contaminar la CLI.
- Solo cubre aspectos ambientales (nivel de log); la generación nunca depende
  del entorno y no se lee ningún fichero de configuración.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Ajustes de runtime de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="PASSGEN_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de log cuando no se pasa --verbose (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value!r}")
        return name

    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

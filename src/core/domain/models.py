"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las opciones resueltas se validan una sola vez en el borde y luego son
  inmutables (`frozen=True`) durante toda la invocación.

Nota:
- Estos modelos describen *qué* se genera, no *cómo* se sortea.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GenerationMode(str, Enum):
    """Generation strategy selected by `--type`."""

    CHARS = "chars"
    WORDS = "words"

    @classmethod
    def default(cls) -> "GenerationMode":
        return cls.CHARS

    @classmethod
    def parse(cls, value: str) -> "GenerationMode | None":
        """Return the mode for an exact flag value, or None when unknown."""

        for mode in cls:
            if mode.value == value:
                return mode
        return None


class GenerationOptions(BaseModel):
    """Opciones ya resueltas para una invocación.

    Invariante: `min_length <= max_length` (lo comprueba el resolver antes de
    construir el modelo).
    """

    model_config = ConfigDict(frozen=True)

    mode: GenerationMode = Field(
        default=GenerationMode.CHARS,
        description="Generador a usar (caracteres o palabras).",
    )
    min_length: int = Field(
        ...,
        ge=0,
        description="Cota inferior de longitud.",
    )
    max_length: int = Field(
        ...,
        ge=0,
        description="Cota superior de longitud.",
    )
    uppercase: bool = Field(
        default=False,
        description="Mayúsculas en el pool (chars) o capitalizar palabras (words).",
    )
    numbers: bool = Field(
        default=False,
        description="Incluir dígitos en el pool (solo chars).",
    )
    symbols: bool = Field(
        default=False,
        description="Incluir el set fijo de símbolos en el pool (solo chars).",
    )
    separator: str = Field(
        default="-",
        description="Separador entre palabras (solo words).",
    )
    word_count: int | None = Field(
        default=None,
        ge=1,
        description="Número fijo de palabras; si falta se sortea en [min_length, max_length].",
    )
    output_path: Path | None = Field(
        default=None,
        description="Fichero destino; si falta se imprime por stdout.",
    )

"""Resolución y validación de opciones.

Convierte los flags crudos de la CLI (nombre -> valor, `None` = ausente) en
un `GenerationOptions` inmutable, aplicando los defaults que dependen del
modo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import structlog

from core.domain.errors import InvalidModeError, InvalidRangeError
from core.domain.models import GenerationMode, GenerationOptions

logger = structlog.get_logger()

# (min_length, max_length)
_LENGTH_DEFAULTS: dict[GenerationMode, tuple[int, int]] = {
    GenerationMode.CHARS: (8, 16),
    GenerationMode.WORDS: (2, 5),
}

DEFAULT_SEPARATOR = "-"


def _get(raw: Mapping[str, Any], key: str, default: Any) -> Any:
    value = raw.get(key)
    return default if value is None else value


def resolve_options(raw: Mapping[str, Any]) -> GenerationOptions:
    """Merge raw flags with mode defaults and validate them.

    Recognised keys: `type`, `min_length`, `max_length`, `uppercase`,
    `numbers`, `symbols`, `separator`, `file`, `word_count`. Unknown keys are
    ignored.

    The range check runs before the mode check, so an unknown `type` with
    inverted bounds reports the range first. Unknown types resolve their
    length defaults as if they were `words`.
    """

    type_value = _get(raw, "type", GenerationMode.default().value)
    if isinstance(type_value, GenerationMode):
        type_value = type_value.value
    mode = GenerationMode.parse(str(type_value))

    default_min, default_max = _LENGTH_DEFAULTS[
        GenerationMode.CHARS if mode is GenerationMode.CHARS else GenerationMode.WORDS
    ]
    min_length = int(_get(raw, "min_length", default_min))
    max_length = int(_get(raw, "max_length", default_max))

    if min_length < 0:
        raise InvalidRangeError(
            "--min-length cannot be negative",
            min_length=min_length,
            max_length=max_length,
        )
    if min_length > max_length:
        raise InvalidRangeError(
            "--min-length cannot be greater than --max-length",
            min_length=min_length,
            max_length=max_length,
        )
    if mode is None:
        raise InvalidModeError(type_value)

    file_value = raw.get("file")
    options = GenerationOptions(
        mode=mode,
        min_length=min_length,
        max_length=max_length,
        uppercase=bool(_get(raw, "uppercase", False)),
        numbers=bool(_get(raw, "numbers", False)),
        symbols=bool(_get(raw, "symbols", False)),
        separator=str(_get(raw, "separator", DEFAULT_SEPARATOR)),
        word_count=raw.get("word_count"),
        output_path=Path(file_value) if file_value else None,
    )
    logger.debug(
        "options_resolved",
        mode=options.mode.value,
        min_length=options.min_length,
        max_length=options.max_length,
    )
    return options

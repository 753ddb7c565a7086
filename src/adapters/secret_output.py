"""Salida del secreto generado.

Dos destinos:
- Fichero (`--file`): se escribe el texto exacto, sin salto de línea final.
- stdout: se imprime seguido de un único salto de línea.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import structlog
import typer

from core.domain.errors import FileWriteError

logger = structlog.get_logger()


def write_secret_file(*, secret: str, output_path: Path) -> Path:
    """Escribe `secret` tal cual (UTF-8). No crea directorios intermedios.

    Se codifica antes de abrir el fichero: si falla la codificación no se
    crea nada en disco.
    """

    try:
        data = secret.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FileWriteError(output_path, f"secret is not valid UTF-8 ({exc.reason})") from exc
    try:
        output_path.write_bytes(data)
    except OSError as exc:
        raise FileWriteError(output_path, exc.strerror or str(exc)) from exc
    logger.debug("secret_written", path=str(output_path), length=len(secret))
    return output_path


def dispatch_secret(
    secret: str,
    output_path: Path | None = None,
    *,
    echo: Callable[[str], None] = typer.echo,
) -> None:
    if output_path is not None:
        write_secret_file(secret=secret, output_path=output_path)
        return
    echo(secret)

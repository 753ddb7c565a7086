"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de la lógica del comando. Todo lo que se pinta
aquí va a stderr: stdout queda reservado para el secreto.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def build_error_console() -> Console:
    return Console(stderr=True, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    """Imprime un error de una sola línea: `Error: <mensaje>`."""

    line = Text.assemble(("Error:", "bold red"), " ", message)
    console.print(line)

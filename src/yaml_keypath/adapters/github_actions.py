# src/yaml_keypath/adapters/github_actions.py
"""
Emitter para workflows do GitHub Actions.

Protocolo (v1):
    - outputs → registro delimitado (heredoc) anexado a `$GITHUB_OUTPUT`
    - env     → registro delimitado anexado a `$GITHUB_ENV` e exportado
                também para `os.environ` do processo atual
    - fallback → quando os arquivos não estão definidos, usa os workflow
                 commands legados `::set-output` / `::set-env`
    - info    → linha crua no stdout
    - falha   → `::error::<mensagem escapada>`

Formato do registro delimitado:

    <name><<ghadelimiter_<uuid>
    <value>
    ghadelimiter_<uuid>

Valores não string são convertidos por `to_command_value`
(None → "", sequências/mappings → JSON compacto).
"""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import Any, MutableMapping, Optional, TextIO

from yaml_keypath.core.output.emitter import to_command_value


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_file_command(name: str, value: str, delimiter: Optional[str] = None) -> str:
    """
    Monta um registro delimitado para `$GITHUB_OUTPUT` / `$GITHUB_ENV`.

    Raises:
        ValueError: Se o nome ou o valor contiver o delimitador.
    """
    delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name:
        raise ValueError(f"Unexpected input: name should not contain the delimiter {delimiter!r}")
    if delimiter in value:
        raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter!r}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubActionsEmitter:
    """Emitter que fala o protocolo de arquivos/comandos do runner do Actions."""

    def __init__(
        self,
        *,
        environ: Optional[MutableMapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ):
        self.environ: MutableMapping[str, str] = os.environ if environ is None else environ
        self.stream: TextIO = stream or sys.stdout
        self.failed: bool = False

    def _write_line(self, line: str) -> None:
        self.stream.write(line + "\n")

    def _append(self, env_key: str, name: str, value: str) -> bool:
        target = self.environ.get(env_key)
        if not target:
            return False
        path = Path(target)
        with path.open("a", encoding="utf-8") as f:
            f.write(format_file_command(name, value))
        return True

    def set_output(self, key: str, value: Any) -> None:
        text = to_command_value(value)
        if not self._append("GITHUB_OUTPUT", key, text):
            self._write_line(f"::set-output name={escape_property(key)}::{escape_data(text)}")

    def export_env(self, name: str, value: Any) -> None:
        text = to_command_value(value)
        self.environ[name] = text
        if not self._append("GITHUB_ENV", name, text):
            self._write_line(f"::set-env name={escape_property(name)}::{escape_data(text)}")

    def info(self, message: str) -> None:
        self._write_line(message)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self._write_line(f"::error::{escape_data(message)}")

# src/yaml_keypath/adapters/console.py
"""Emitter de terminal: `key=value` e `export NAME='value'` no stdout, info no stderr."""

from __future__ import annotations

import shlex
import sys
from typing import Any, Optional, TextIO

from yaml_keypath.core.output.emitter import to_command_value


class ConsoleEmitter:
    def __init__(
        self,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        verbose: bool = True,
    ):
        self.stdout: TextIO = stdout or sys.stdout
        self.stderr: TextIO = stderr or sys.stderr
        self.verbose = verbose
        self.failed: bool = False

    def set_output(self, key: str, value: Any) -> None:
        self.stdout.write(f"{key}={to_command_value(value)}\n")

    def export_env(self, name: str, value: Any) -> None:
        # saída avaliável por shell: eval "$(yaml-keypath ...)"
        self.stdout.write(f"export {name}={shlex.quote(to_command_value(value))}\n")

    def info(self, message: str) -> None:
        if self.verbose:
            self.stderr.write(message + "\n")

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.stderr.write(f"error: {message}\n")

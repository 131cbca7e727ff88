# src/yaml_keypath/core/output/emitter.py
"""
Contrato do Emitter (sink externo de outputs).

O Emitter é a única fronteira pela qual a run produz efeitos externos:

    - set_output(key, value)  → publica um output nomeado
    - export_env(name, value) → exporta uma variável de ambiente
    - info(message)           → linha informativa para humanos
    - set_failed(message)     → reporta a falha terminal da run

Invariantes:
    - A ordem das chamadas segue a ordem de travessia
    - Em uma run que falha, nenhuma chamada de output/env acontece;
      apenas uma única chamada `set_failed`

Implementações concretas vivem em `yaml_keypath.adapters`; este módulo
fornece o Protocol, a conversão canônica de valores para texto e um
emitter em memória (útil em testes e em usos como biblioteca).
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, List, Protocol, runtime_checkable

from yaml_keypath.core.keypath.nodes import stringify


@runtime_checkable
class Emitter(Protocol):
    def set_output(self, key: str, value: Any) -> None:
        ...

    def export_env(self, name: str, value: Any) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def set_failed(self, message: str) -> None:
        ...


def _json_compatible(value: Any) -> Any:
    if isinstance(value, dict):
        return {stringify(k): _json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_compatible(v) for v in value]
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, float):
        # NaN/Infinity não existem em JSON
        return None if not math.isfinite(value) else value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def to_command_value(value: Any) -> str:
    """
    Forma textual de um valor de output.

    - str  → sem alteração
    - None → ""
    - escalares → forma textual canônica (`true`, `2`, `1.5`, ...)
    - sequências/mappings → JSON compacto
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(
            _json_compatible(value),
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )
    return stringify(value)


@dataclass
class MemoryEmitter:
    """Emitter que apenas registra as chamadas recebidas."""

    outputs: Dict[str, str] = field(default_factory=dict)
    env: Dict[str, str] = field(default_factory=dict)
    messages: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    calls: List[tuple] = field(default_factory=list)

    def set_output(self, key: str, value: Any) -> None:
        self.outputs[key] = to_command_value(value)
        self.calls.append(("set_output", key, self.outputs[key]))

    def export_env(self, name: str, value: Any) -> None:
        self.env[name] = to_command_value(value)
        self.calls.append(("export_env", name, self.env[name]))

    def info(self, message: str) -> None:
        self.messages.append(message)
        self.calls.append(("info", message))

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
        self.calls.append(("set_failed", message))

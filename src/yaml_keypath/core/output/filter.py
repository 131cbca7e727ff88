# src/yaml_keypath/core/output/filter.py
"""
Filtro e reescrita do Resolved Map em entradas de saída.

Este módulo seleciona quais key-paths do Resolved Map viram outputs e
calcula, para cada um, a chave de saída e (opcionalmente) o nome da
variável de ambiente correspondente.

Regras (v1):
    - Sem padrão: toda entrada passa com `output_key = key`
    - Com padrão: apenas chaves em que o padrão casa (busca, não match
      ancorado) passam; `output_key` é a chave com a **primeira**
      ocorrência casada removida
    - Com prefixo: `env_key = f"{prefix}_{output_key}"` com `.` e `-`
      trocados por `_`
    - Padrão ou prefixo vazio equivale a ausente

Invariantes:
    - A ordem das entradas é a ordem do Resolved Map
    - O Resolved Map nunca é mutado
    - Um padrão inválido falha antes de qualquer entrada ser produzida
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Pattern

from yaml_keypath.core.exceptions import PatternError


_ENV_UNSAFE = re.compile(r"[.\-]")


@dataclass(frozen=True)
class OutputEntry:
    """Uma entrada selecionada para emissão."""
    output_key: str
    value: Any
    env_key: Optional[str] = None


def compile_key_path_pattern(pattern: Optional[str]) -> Optional[Pattern[str]]:
    """
    Compila o padrão de key-path.

    Returns:
        Optional[Pattern[str]]: Padrão compilado, ou None quando ausente/vazio.

    Raises:
        PatternError: Se o padrão não for uma expressão regular válida.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(
            message=f"Invalid key-path-pattern {pattern!r}: {e}",
            details={"pattern": pattern, "reason": str(e)},
            hint="Use a sintaxe de expressões regulares do módulo `re`.",
        ) from e


def env_var_name(prefix: str, key: str) -> str:
    """Nome da variável de ambiente para `key` sob `prefix`."""
    return f"{prefix}_{_ENV_UNSAFE.sub('_', key)}"


def filter_entries(
    resolved: Mapping[str, Any],
    pattern: Optional[str] = None,
    env_prefix: Optional[str] = None,
) -> List[OutputEntry]:
    """
    Seleciona e reescreve as entradas do Resolved Map.

    Args:
        resolved (Mapping[str, Any]): Resolved Map ordenado.
        pattern (Optional[str]): Expressão regular de seleção/reescrita.
        env_prefix (Optional[str]): Prefixo das variáveis de ambiente.

    Returns:
        List[OutputEntry]: Entradas selecionadas, em ordem.

    Raises:
        PatternError: Se `pattern` não compilar.
    """
    compiled = compile_key_path_pattern(pattern)

    entries: List[OutputEntry] = []
    for key, value in resolved.items():
        if compiled is None:
            output_key = key
        else:
            if compiled.search(key) is None:
                continue
            output_key = compiled.sub("", key, count=1)

        env_key = env_var_name(env_prefix, output_key) if env_prefix else None
        entries.append(OutputEntry(output_key=output_key, value=value, env_key=env_key))

    return entries

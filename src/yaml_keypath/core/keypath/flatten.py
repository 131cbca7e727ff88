# src/yaml_keypath/core/keypath/flatten.py
"""
Flatten + resolução de variáveis de uma árvore de documento.

Este módulo converte a árvore mesclada em um Resolved Map ordenado de
key-paths pontuados para valores finais, resolvendo `$(name)` durante a
própria travessia.

Travessia (v1):
    - profundidade primeiro, chaves de mapping em ordem de documento,
      elementos de sequência em ordem de índice
    - mapping  → desce com prefixo `p.`, sem entrada para `p`
    - sequence → registra `p` como marca de array (valor inteiro exposto
      como `p.array`) e desce como um mapping (`p.0`, `p.1`, ...)
    - string   → `resolved[p] = resolve_vars(v)` contra o estado atual
    - escalar  → `resolved[p] = v` sem alteração

Representação dupla de sequências:
    Cada sequência produz tanto as entradas por elemento quanto a marca
    de array. Consumidores escolhem acesso por elemento ou ao array inteiro.

Invariantes:
    - A árvore de entrada nunca é mutada
    - Uma entrada, uma vez escrita, nunca é sobrescrita na mesma run;
      colisões de key-path (ex.: chave literal "a.b" e a → b) preservam o
      primeiro valor e são registradas em `collisions`
    - Nenhum estado de módulo: o acumulador é explícito e a função é reentrante
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Tuple

from .nodes import NodeKind, kind_of, render_segment
from .variables import DEFAULT_MAX_SUBSTITUTIONS, resolve_vars


ARRAY_SUFFIX = ".array"
SEPARATOR = "."


@dataclass
class FlattenResult:
    """
    Resultado de um flatten.

    Campos:
    - resolved: Resolved Map ordenado (key-path → escalar final)
    - array_marks: key-paths de sequências, em ordem de travessia
    - arrays: key-path da sequência → valor inteiro (cópia, sem substituição)
    - collisions: key-paths produzidos mais de uma vez (primeiro valor mantido)
    """
    resolved: Dict[str, Any] = field(default_factory=dict)
    array_marks: List[str] = field(default_factory=list)
    arrays: Dict[str, List[Any]] = field(default_factory=dict)
    collisions: List[str] = field(default_factory=list)

    def array_outputs(self) -> Dict[str, List[Any]]:
        """Saídas laterais `<path>.array`, em ordem de travessia."""
        return {f"{mark}{ARRAY_SUFFIX}": self.arrays[mark] for mark in self.array_marks}


@dataclass
class _Traversal:
    result: FlattenResult
    max_substitutions: int

    def write(self, path: str, value: Any) -> None:
        self.result.resolved[path] = value

    def collides(self, path: str) -> bool:
        if path in self.result.resolved:
            self.result.collisions.append(path)
            return True
        return False

    def mark_array(self, path: str, value: Any) -> None:
        if path in self.result.arrays:
            self.result.collisions.append(f"{path}{ARRAY_SUFFIX}")
            return
        self.result.array_marks.append(path)
        self.result.arrays[path] = deepcopy(list(value))


def _visit_children(acc: _Traversal, prefix: str, items: Iterable[Tuple[Any, Any]]) -> None:
    for key, value in items:
        _visit(acc, prefix + render_segment(key), value)


def _visit_mapping(acc: _Traversal, path: str, value: Any) -> None:
    _visit_children(acc, path + SEPARATOR, value.items())


def _visit_sequence(acc: _Traversal, path: str, value: Any) -> None:
    acc.mark_array(path, value)
    _visit_children(acc, path + SEPARATOR, enumerate(value))


def _visit_string(acc: _Traversal, path: str, value: str) -> None:
    if acc.collides(path):
        return
    acc.write(
        path,
        resolve_vars(
            value,
            acc.result.resolved,
            key_path=path,
            max_substitutions=acc.max_substitutions,
        ),
    )


def _visit_scalar(acc: _Traversal, path: str, value: Any) -> None:
    if acc.collides(path):
        return
    acc.write(path, value)


_HANDLERS: Dict[NodeKind, Callable[[_Traversal, str, Any], None]] = {
    NodeKind.MAPPING: _visit_mapping,
    NodeKind.SEQUENCE: _visit_sequence,
    NodeKind.STRING: _visit_string,
    NodeKind.SCALAR: _visit_scalar,
}


def _visit(acc: _Traversal, path: str, value: Any) -> None:
    _HANDLERS[kind_of(value)](acc, path, value)


def flatten(
    tree: Dict[str, Any],
    *,
    max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS,
) -> FlattenResult:
    """
    Achata e resolve uma árvore de documento.

    Args:
        tree (Dict[str, Any]): Árvore mesclada (mapping na raiz).
        max_substitutions (int): Limite de substituições por valor string.

    Returns:
        FlattenResult: Resolved Map, marcas de array e colisões.

    Raises:
        TypeError: Se a raiz não for um mapping.
        UndefinedVariableError: Se uma referência não estiver resolvida no momento da visita.
        SubstitutionLimitError: Se uma substituição não convergir.
    """
    if kind_of(tree) is not NodeKind.MAPPING:
        raise TypeError(f"flatten requer mapping na raiz, recebido: {type(tree).__name__}")

    acc = _Traversal(result=FlattenResult(), max_substitutions=max_substitutions)
    _visit_children(acc, "", tree.items())
    return acc.result

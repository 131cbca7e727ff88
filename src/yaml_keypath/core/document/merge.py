# src/yaml_keypath/core/document/merge.py
"""
Utilitário canônico de deep-merge de documentos.

Este módulo implementa a política oficial de combinação de múltiplos
documentos carregados, na ordem em que foram informados, em uma única
árvore.

Política de merge (v1):
    - mapping + mapping → união de chaves, merge recursivo nas compartilhadas
    - qualquer outro par → o documento posterior vence integralmente
      (listas são substituídas, nunca concatenadas; um escalar pode
      substituir um mapping e vice-versa)

Ordem de chaves:
    - chaves já presentes mantêm sua posição original
    - chaves novas são anexadas na ordem do documento posterior

A ordem importa: o flatten percorre a árvore mesclada em ordem de
documento, e uma referência `$(name)` só enxerga chaves visitadas antes.

Invariantes:
    - Nenhum input é mutado
    - O resultado não compartilha estrutura mutável com os inputs
    - merge é associativo, mas não comutativo
"""

from copy import deepcopy
from typing import Any, Dict, Iterable


def deep_merge(base: Any, override: Any) -> Any:
    """
    Combina duas árvores de documento com a política last-document-wins.

    Args:
        base (Any): Árvore anterior (menor precedência).
        override (Any): Árvore posterior (maior precedência).

    Returns:
        Any: Nova árvore resultante; `override` copiado quando algum dos
        lados não for um mapping.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        return deepcopy(override)

    result: Dict[Any, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key in result:
            result[key] = deep_merge(result[key], override_value)
        else:
            result[key] = deepcopy(override_value)

    return result


def merge_documents(trees: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Dobra (left fold) uma sequência ordenada de documentos em um só.

    merge([]) == {}; merge([t]) == cópia de t; merge([..ts, t]) == deep_merge(merge(ts), t).
    """
    merged: Dict[str, Any] = {}
    for tree in trees:
        merged = deep_merge(merged, tree)
    return merged

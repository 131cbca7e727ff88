# tests/core/document/test_merge.py
"""
Testes do deep-merge de documentos.

Os testes asseguram que:
- mappings são mesclados recursivamente
- valores não-mapping (inclusive listas) são substituídos pelo lado direito
- o merge é associativo, mas não comutativo
- nenhuma entrada é mutada

Este módulo existe para garantir precedência previsível
entre múltiplos documentos de configuração.
"""

import copy

import pytest

try:
    from yaml_keypath.core.document.merge import deep_merge, merge_documents
except Exception as e:
    deep_merge = None
    merge_documents = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing merge. Implement:
- src/yaml_keypath/core/document/merge.py (deep_merge, merge_documents)
Import error: {_IMPORT_ERR}
""")


def test_two_document_scenario():
    """
    Verifica o cenário canônico de dois documentos.

        A = {x: {y: 1, z: 2}}
        B = {x: {y: 3}, w: 4}
        merge(A, B) == {x: {y: 3, z: 2}, w: 4}
    """
    _require_imports()
    a = {"x": {"y": 1, "z": 2}}
    b = {"x": {"y": 3}, "w": 4}

    assert merge_documents([a, b]) == {"x": {"y": 3, "z": 2}, "w": 4}


def test_lists_are_replaced_not_concatenated():
    _require_imports()
    merged = deep_merge({"a": [1, 2, 3], "b": 1}, {"a": [9]})
    assert merged == {"a": [9], "b": 1}


def test_mapping_replaced_by_scalar_and_back():
    _require_imports()
    assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}
    assert deep_merge({"a": "flat"}, {"a": {"b": 1}}) == {"a": {"b": 1}}


def test_merge_is_associative():
    _require_imports()
    a = {"x": {"y": 1, "l": [1]}, "k": "a"}
    b = {"x": {"z": 2}, "k": {"nested": True}}
    c = {"x": {"y": 3, "l": [2, 3]}, "k": {"other": 1}}

    assert deep_merge(deep_merge(a, b), c) == deep_merge(a, deep_merge(b, c))


def test_merge_is_not_commutative():
    _require_imports()
    a = {"env": "prod"}
    b = {"env": "dev"}

    assert deep_merge(a, b) != deep_merge(b, a)
    assert deep_merge(a, b) == {"env": "dev"}


def test_inputs_are_not_mutated():
    _require_imports()
    a = {"x": {"y": 1, "l": [1, 2]}}
    b = {"x": {"y": 2}, "w": {"v": [3]}}
    a_before, b_before = copy.deepcopy(a), copy.deepcopy(b)

    merged = merge_documents([a, b])
    merged["x"]["l"].append(99)
    merged["w"]["v"].append(99)

    assert a == a_before
    assert b == b_before


def test_merge_keeps_base_key_order_and_appends_new_keys():
    _require_imports()
    merged = deep_merge({"b": 1, "a": 2}, {"c": 3, "b": 4})
    assert list(merged.keys()) == ["b", "a", "c"]


def test_merge_documents_empty_and_single():
    _require_imports()
    assert merge_documents([]) == {}
    assert merge_documents([{"a": 1}]) == {"a": 1}

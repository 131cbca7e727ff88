# tests/core/keypath/test_resolved_hashing.py
"""
Testes do fingerprint do Resolved Map.

Os testes asseguram que:
- o hash é SHA-256 hexadecimal (64 caracteres)
- o mesmo Resolved Map produz sempre o mesmo hash
- a ordem das entradas faz parte da identidade
- escalares não-JSON (datas) são aceitos
"""

from datetime import date

import pytest

try:
    from yaml_keypath.core.keypath.hashing import compute_resolved_hash
except Exception as e:
    compute_resolved_hash = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing resolved hashing. Implement:
- src/yaml_keypath/core/keypath/hashing.py (compute_resolved_hash)
Import error: {_IMPORT_ERR}
""")


def test_hash_is_deterministic():
    _require_imports()
    resolved = {"a": "x", "b.0": 1, "c": True}

    h1 = compute_resolved_hash(resolved)
    h2 = compute_resolved_hash(dict(resolved))

    assert h1 == h2
    assert len(h1) == 64
    assert all(ch in "0123456789abcdef" for ch in h1)


def test_order_is_part_of_identity():
    _require_imports()
    assert compute_resolved_hash({"a": 1, "b": 2}) != compute_resolved_hash({"b": 2, "a": 1})


def test_value_change_changes_hash():
    _require_imports()
    assert compute_resolved_hash({"a": "1"}) != compute_resolved_hash({"a": 1})


def test_dates_are_hashable():
    _require_imports()
    assert len(compute_resolved_hash({"released": date(2024, 1, 2)})) == 64


def test_rejects_non_mapping():
    _require_imports()
    with pytest.raises(TypeError):
        compute_resolved_hash([("a", 1)])

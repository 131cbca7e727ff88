# tests/core/keypath/test_variables.py
"""
Testes da substituição `$(name)`.

Os testes asseguram que:
- referências são resolvidas contra o Resolved Map corrente
- múltiplas referências (inclusive repetidas) são todas substituídas
- nomes ausentes ou com valor falsy falham com UndefinedVariableError
- substituições que não convergem são interrompidas pelo limite
"""

import pytest

try:
    from yaml_keypath.core.exceptions import SubstitutionLimitError, UndefinedVariableError
    from yaml_keypath.core.keypath.variables import find_references, resolve_vars
except Exception as e:
    resolve_vars = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing variable resolver. Implement:
- src/yaml_keypath/core/keypath/variables.py (resolve_vars, find_references)
Import error: {_IMPORT_ERR}
""")


def test_text_without_references_is_unchanged():
    _require_imports()
    assert resolve_vars("plain value", {}) == "plain value"
    assert resolve_vars("$ not (a) reference $()", {}) == "$ not (a) reference $()"


def test_resolves_every_reference():
    _require_imports()
    resolved = {"env": "prod", "loc": "eastus"}

    assert resolve_vars("rg-$(env)-$(loc)-$(env)", resolved) == "rg-prod-eastus-prod"


def test_dotted_names_and_scalar_values():
    _require_imports()
    resolved = {"db.port": 5432, "flags.on": True, "ratio": 2.0}

    assert resolve_vars("$(db.port)/$(flags.on)/$(ratio)", resolved) == "5432/true/2"


def test_substituted_text_is_scanned_again():
    """O texto substituído participa da próxima busca (substituição iterativa)."""
    _require_imports()
    resolved = {"open": "$(", "ab": "done"}

    assert resolve_vars("$(open)ab)", resolved) == "done"


def test_missing_name_raises_with_name_in_message():
    _require_imports()
    with pytest.raises(UndefinedVariableError) as exc:
        resolve_vars("x-$(missing)", {"present": "1"}, key_path="key")

    assert 'Variable "missing" is not defined' in str(exc.value)
    assert exc.value.variable == "missing"
    assert exc.value.details["key_path"] == "key"
    assert exc.value.details["empty_value"] is False


@pytest.mark.parametrize("empty", ["", 0, False, None, float("nan")])
def test_falsy_value_is_treated_as_undefined(empty):
    """
    Verifica o comportamento herdado para valores falsy.

    Um valor presente, porém vazio, é indistinguível de ausente:
    a substituição falha em vez de produzir texto vazio.
    """
    _require_imports()
    with pytest.raises(UndefinedVariableError) as exc:
        resolve_vars("$(name)", {"name": empty})

    assert exc.value.details["empty_value"] is True


def test_runaway_substitution_is_bounded():
    _require_imports()
    resolved = {"x": "$(x"}

    with pytest.raises(SubstitutionLimitError) as exc:
        resolve_vars("$(x))", resolved, key_path="loop", max_substitutions=50)

    assert exc.value.details == {"key_path": "loop", "limit": 50}


def test_find_references_in_order():
    _require_imports()
    assert find_references("$(b)-$(a)-$(b)") == ["b", "a", "b"]
    assert find_references("none") == []

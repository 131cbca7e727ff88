# tests/core/engine/test_planner_toposort.py
"""
Testes de ordenação topológica do planner do engine.

Este módulo valida o comportamento do planner responsável por
derivar uma ordem de execução determinística a partir das
dependências explícitas entre Steps.

Os testes asseguram que:
- a ordem de execução respeita rigorosamente `depends_on`
- empates são resolvidos pela ordem de declaração
- grafos inválidos (dependência desconhecida, ciclo, id duplicado) falham

Invariantes:
    - Nenhum Step aparece antes de suas dependências
    - Todos os Steps válidos aparecem exatamente uma vez no plano
    - A ordem retornada é estável e previsível

Limites explícitos:
    - Não valida execução de Steps
"""

import pytest

try:
    from yaml_keypath.core.engine.planner import (
        CycleDetectedError,
        UnknownDependencyError,
        plan_execution,
    )
except Exception as e:
    plan_execution = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a implementação do planner esteja disponível para os testes.

    Falha imediatamente quando `plan_execution` não pode ser importada,
    apontando o módulo esperado em vez de produzir erros indiretos.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing planner. Implement:
- src/yaml_keypath/core/engine/planner.py (plan_execution)
Import error: {_IMPORT_ERR}
""")


def test_toposort_linear(DummyStep):
    """
    Verifica a ordenação topológica correta em um grafo linear de Steps.

    Decisões arquiteturais:
        - A ordem de execução é derivada exclusivamente de `depends_on`
        - O planner respeita dependências explícitas sem inferências implícitas
    """
    _require_imports()
    steps = [
        DummyStep(step_id="c", depends_on=["b"]),
        DummyStep(step_id="a"),
        DummyStep(step_id="b", depends_on=["a"]),
    ]
    order = plan_execution(steps)
    assert [s.id for s in order] == ["a", "b", "c"]


def test_ties_follow_declaration_order(DummyStep):
    """A run canônica é executada exatamente na ordem em que foi montada."""
    _require_imports()
    steps = [
        DummyStep(step_id="document.load"),
        DummyStep(step_id="document.merge", depends_on=["document.load"]),
        DummyStep(step_id="keypath.flatten", depends_on=["document.merge"]),
        DummyStep(step_id="output.filter", depends_on=["keypath.flatten"]),
        DummyStep(step_id="output.emit", depends_on=["keypath.flatten", "output.filter"]),
        DummyStep(step_id="a.unrelated"),
    ]
    order = plan_execution(steps)
    assert [s.id for s in order] == [
        "document.load",
        "document.merge",
        "keypath.flatten",
        "output.filter",
        "output.emit",
        "a.unrelated",
    ]


def test_unknown_dependency(DummyStep):
    _require_imports()
    with pytest.raises(UnknownDependencyError):
        plan_execution([DummyStep(step_id="a", depends_on=["ghost"])])


def test_cycle_detected(DummyStep):
    _require_imports()
    with pytest.raises(CycleDetectedError):
        plan_execution(
            [
                DummyStep(step_id="a", depends_on=["b"]),
                DummyStep(step_id="b", depends_on=["a"]),
            ]
        )


def test_duplicate_ids_rejected(DummyStep):
    _require_imports()
    with pytest.raises(ValueError, match="Duplicate step id"):
        plan_execution([DummyStep(step_id="a"), DummyStep(step_id="a")])

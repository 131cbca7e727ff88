# src/yaml_keypath/core/engine/planner.py
"""
Planejador de execução da run (DAG).

Este módulo valida a estrutura dos Steps declarados e produz uma ordem
de execução topológica determinística.

Decisões arquiteturais:
    - Utiliza ordenação topológica determinística (Kahn)
    - Empates são resolvidos pela ordem de declaração dos Steps, de modo
      que a run canônica (load → merge → flatten → filter → emit) é
      executada exatamente na ordem em que foi montada
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - Nenhum Step é executado antes de suas dependências
    - Todos os Steps aparecem exatamente uma vez
    - A mesma definição de run produz sempre a mesma ordem

Limites explícitos:
    - Não executa Steps
    - Não interage com RunContext
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from yaml_keypath.core.pipeline.step import Step


class UnknownDependencyError(ValueError):
    """
    Exceção levantada quando um Step referencia uma dependência inexistente.

    Todas as dependências devem ser explícitas e resolvíveis; a validação
    ocorre antes de qualquer execução.
    """


class CycleDetectedError(ValueError):
    """
    Exceção levantada quando o grafo de dependências contém um ciclo.

    Nenhuma ordem topológica válida pode ser produzida e nenhuma execução
    parcial é permitida.
    """


def plan_execution(steps: Iterable[Step]) -> List[Step]:
    """
    Valida e produz uma ordem de execução topológica determinística de Steps.

    Sempre que múltiplos Steps estiverem prontos para execução, a escolha
    segue a ordem em que foram declarados.

    Args:
        steps (Iterable[Step]): Steps declarativos da run.

    Returns:
        List[Step]: Steps em ordem topológica determinística.

    Raises:
        ValueError: Se algum Step possuir `id` inválido ou duplicado.
        UnknownDependencyError: Se um Step declarar dependência inexistente.
        CycleDetectedError: Se houver ciclo no grafo de dependências.
    """
    step_list = list(steps)
    by_id: Dict[str, Step] = {}
    position: Dict[str, int] = {}
    for index, s in enumerate(step_list):
        sid = getattr(s, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError("step.id must be a non-empty string")
        if sid in by_id:
            raise ValueError(f"Duplicate step id: {sid}")
        by_id[sid] = s
        position[sid] = index

    deps: Dict[str, List[str]] = {}
    for sid, s in by_id.items():
        d = list(getattr(s, "depends_on", []) or [])
        for dep in d:
            if dep not in by_id:
                raise UnknownDependencyError(f"Step '{sid}' depends on unknown step '{dep}'")
        deps[sid] = d

    incoming_count: Dict[str, int] = {sid: len(set(d)) for sid, d in deps.items()}
    outgoing: Dict[str, List[str]] = {sid: [] for sid in by_id}
    for sid, dlist in deps.items():
        for dep in set(dlist):
            outgoing[dep].append(sid)

    ready: List[str] = [sid for sid in by_id if incoming_count[sid] == 0]
    order_ids: List[str] = []

    while ready:
        ready.sort(key=position.__getitem__)
        sid = ready.pop(0)
        order_ids.append(sid)
        for child in outgoing[sid]:
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                ready.append(child)

    if len(order_ids) != len(by_id):
        raise CycleDetectedError("Cycle detected in step dependency graph")

    return [by_id[sid] for sid in order_ids]

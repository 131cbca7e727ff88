# src/yaml_keypath/core/engine/__init__.py
"""
Engine do yaml-keypath.

Este pacote contém a implementação responsável por **planejar** e
**executar** a run de resolução: load → merge → flatten → filter → emit.

Componentes principais:
    - planner → ordenação topológica determinística e validações estruturais
    - engine  → execução coordenada de Steps com política fail-fast

Invariantes:
    - Steps só são executados após suas dependências
    - Cada Step é executado no máximo uma vez por run
    - A primeira falha encerra a run (nenhum Step posterior executa)

Limites explícitos:
    - Não contém lógica de resolução de variáveis
    - Não emite outputs diretamente
"""

from .engine import Engine, RunResult
from .planner import CycleDetectedError, UnknownDependencyError, plan_execution

__all__ = [
    "Engine",
    "RunResult",
    "plan_execution",
    "CycleDetectedError",
    "UnknownDependencyError",
]

# src/yaml_keypath/core/pipeline/step.py
"""
Contrato canônico de Step do yaml-keypath.

Um Step é a menor unidade executável da run de resolução e representa
uma operação atômica (carregar, mesclar, resolver, filtrar, emitir).

Princípios fundamentais:
    - Steps não conhecem o Engine nem o planner
    - Comunicação entre Steps é mediada pelo RunContext (artefatos por chave)
    - Conformidade é garantida por duck typing (@runtime_checkable)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable, List

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step do yaml-keypath.

    Atributos obrigatórios:
        - id: identificador único e estável do Step (ex.: "keypath.flatten")
        - kind: classificação semântica do Step (`StepKind`)
        - depends_on: lista de `step_id` dos Steps dos quais depende

    Decisões arquiteturais:
        - Steps não controlam ordem de execução
        - Falhas tipadas esperadas viram StepResult FAILED com `payload["error"]`;
          qualquer outra exceção é convertida pelo Engine
        - O protocolo não impõe herança, apenas conformidade estrutural
    """
    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o RunContext."""
        ...

# src/yaml_keypath/core/pipeline/types.py
"""
Tipos canônicos do pipeline do yaml-keypath.

Este módulo define as estruturas e enums fundamentais que padronizam
a comunicação entre Steps, Engine e o runner.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - StepKind   → enum de classificação semântica de Steps
    - StepResult → estrutura imutável de resultado de execução

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepResult é imutável e seguro contra mutação acidental
    - Tipos não dependem de engine, adapters ou CLI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps da run de resolução.

    Tipos definidos:
        - LOAD: leitura de documentos a partir do filesystem
        - TRANSFORM: transformação estrutural de árvores (ex.: deep-merge)
        - RESOLVE: flatten e substituição de variáveis
        - FILTER: seleção e reescrita de key-paths
        - EMIT: entrega dos pares finais ao Emitter

    Decisões arquiteturais:
        - O tipo é puramente informativo e semântico
        - O Engine não utiliza `StepKind` para decidir execução
    """
    LOAD = "load"
    TRANSFORM = "transform"
    RESOLVE = "resolve"
    FILTER = "filter"
    EMIT = "emit"


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um Step.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: execução pulada por decisão explícita (config ou dependência falha)
        - FAILED: execução interrompida por erro

    Estados intermediários (ex.: running) não pertencem a este enum.
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id: identificador único do Step
        - kind: tipo semântico do Step
        - status: estado final da execução do Step
        - summary: resumo textual da execução
        - metrics: métricas numéricas produzidas pelo Step
        - warnings: avisos não fatais gerados durante a execução
        - artifacts: referências a artefatos produzidos (chaves do RunContext, hashes)
        - payload: dados adicionais livres (ex.: `error` em caso de falha)

    Invariantes:
        - Uma instância de StepResult nunca é alterada após criada
        - `step_id`, `kind` e `status` estão sempre presentes
    """
    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, Any] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

"""
# Pipeline Core: yaml-keypath

Este pacote define os **contratos canônicos** da run de resolução.

Uma run é modelada como um **DAG explícito de Steps**
(`document.load → document.merge → keypath.flatten → output.filter → output.emit`), onde:
- cada Step declara identidade, tipo semântico e dependências
- a execução é coordenada exclusivamente pelo Engine
- o estado compartilhado é mediado pelo `RunContext`

## Componentes

- **types**: `StepStatus`, `StepKind`, `StepResult`
- **step**: `Step` (Protocol)
- **context**: `RunContext` (artefatos, logs, warnings)
"""

from .context import RunContext
from .step import Step
from .types import StepKind, StepResult, StepStatus

__all__ = ["RunContext", "Step", "StepKind", "StepResult", "StepStatus"]

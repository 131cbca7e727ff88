"""Step canônico: document.merge (v1).

Responsabilidades:
- consumir artifact `documents`
- mesclar as árvores da esquerda para a direita (documentos posteriores
  sobrepõem anteriores)
- publicar a árvore mesclada como artifact `document.merged`

Limites explícitos (v1):
- Sequências são substituídas, nunca concatenadas
- NÃO resolve variáveis
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from yaml_keypath.core.document.merge import merge_documents
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus


@dataclass
class DocumentMergeStep(Step):
    """Deep-merge dos documentos carregados."""

    id: str = "document.merge"
    kind: StepKind = StepKind.TRANSFORM
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["document.load"]

    def run(self, ctx: RunContext) -> StepResult:
        documents = ctx.get_artifact("documents")
        merged = merge_documents(documents)

        ctx.set_artifact("document.merged", merged)
        ctx.log(
            step_id=self.id,
            level="INFO",
            message="documents merged",
            documents=len(documents),
            top_level_keys=len(merged),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(documents)} document(s) merged",
            metrics={"documents": len(documents), "top_level_keys": len(merged)},
        )

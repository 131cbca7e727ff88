"""Step canônico: document.load (v1).

Responsabilidades:
- ler os documentos fonte (YAML / JSON) na ordem declarada
- publicar as árvores como artifact `documents`
- publicar a lista de fontes como artifact `document.sources`

Config esperada:
steps:
  document.load:
    sources: [path, ...]
    string_scalars: false

Limites explícitos (v1):
- NÃO mescla documentos
- NÃO resolve variáveis
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from yaml_keypath.core.document.loader import load_documents
from yaml_keypath.core.exceptions import KeypathException, SettingsError
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus


def _get_step_cfg(ctx: RunContext, step_id: str) -> Dict[str, Any]:
    cfg = ctx.config or {}
    steps_cfg = cfg.get("steps") if isinstance(cfg, dict) else None
    step_cfg = (steps_cfg.get(step_id) or {}) if isinstance(steps_cfg, dict) else {}
    return step_cfg if isinstance(step_cfg, dict) else {}


@dataclass
class DocumentLoadStep(Step):
    """Carrega os documentos fonte em ordem."""

    id: str = "document.load"
    kind: StepKind = StepKind.LOAD
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = []

    def run(self, ctx: RunContext) -> StepResult:
        step_cfg = _get_step_cfg(ctx, self.id)
        sources = list(step_cfg.get("sources") or [])
        string_scalars = bool(step_cfg.get("string_scalars", False))

        try:
            if not sources:
                raise SettingsError(
                    message="No source documents given",
                    details={"step_id": self.id},
                )

            documents = load_documents(sources, string_scalars=string_scalars)

        except KeypathException as e:
            ctx.log(
                step_id=self.id,
                level="ERROR",
                message="document.load failed",
                error_type=e.error_type,
                error_message=e.message,
            )
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=e.message,
                payload={"error": e.to_payload().to_dict()},
            )

        ctx.set_artifact("documents", documents)
        ctx.set_artifact("document.sources", sources)

        for source, tree in zip(sources, documents):
            ctx.log(
                step_id=self.id,
                level="INFO",
                message="document loaded",
                source_path=source,
                top_level_keys=len(tree),
            )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(documents)} document(s) loaded",
            metrics={"documents": len(documents)},
            artifacts={"sources": sources},
            payload={"string_scalars": string_scalars},
        )

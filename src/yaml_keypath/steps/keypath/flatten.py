"""Step canônico: keypath.flatten (v1).

Responsabilidades:
- consumir artifact `document.merged`
- achatar a árvore em key-paths pontuados, resolvendo `$(name)` na ordem
  de documento
- publicar `keypath.resolved` (Resolved Map) e `keypath.array_outputs`
  (`<path>.array` → sequência original)
- registrar fingerprint SHA-256 do Resolved Map
- registrar warning para cada key-path colidente

Payload:
payload:
  collisions: [key-path, ...]

Limites explícitos (v1):
- NÃO filtra chaves
- NÃO emite outputs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from yaml_keypath.core.exceptions import KeypathException
from yaml_keypath.core.keypath.flatten import flatten
from yaml_keypath.core.keypath.hashing import compute_resolved_hash
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus


@dataclass
class KeypathFlattenStep(Step):
    """Constrói o Resolved Map a partir da árvore mesclada."""

    id: str = "keypath.flatten"
    kind: StepKind = StepKind.RESOLVE
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["document.merge"]

    def run(self, ctx: RunContext) -> StepResult:
        tree = ctx.get_artifact("document.merged")

        try:
            result = flatten(tree)
        except KeypathException as e:
            ctx.log(
                step_id=self.id,
                level="ERROR",
                message="keypath.flatten failed",
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

        for path in result.collisions:
            ctx.add_warning(
                step_id=self.id,
                message=f"key-path {path!r} produced more than once; first value kept",
            )

        array_outputs = result.array_outputs()
        ctx.set_artifact("keypath.resolved", result.resolved)
        ctx.set_artifact("keypath.array_outputs", array_outputs)

        ctx.log(
            step_id=self.id,
            level="INFO",
            message="key-paths resolved",
            keys=len(result.resolved),
            arrays=len(array_outputs),
            collisions=len(result.collisions),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(result.resolved)} key-path(s) resolved",
            metrics={"keys": len(result.resolved), "arrays": len(array_outputs)},
            artifacts={"resolved_sha256": compute_resolved_hash(result.resolved)},
            payload={"collisions": list(result.collisions)},
        )

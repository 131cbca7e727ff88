"""Step canônico: output.filter (v1).

Responsabilidades:
- consumir artifact `keypath.resolved`
- aplicar o padrão de key-path (seleção + remoção da primeira ocorrência)
- calcular nomes de variáveis de ambiente quando há prefixo
- publicar as entradas como artifact `output.entries`

Config esperada:
steps:
  output.filter:
    key_path_pattern: "^prod\\."
    env_var_prefix: APP

Um padrão inválido falha aqui, antes de qualquer emissão.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from yaml_keypath.core.exceptions import KeypathException
from yaml_keypath.core.output.filter import filter_entries
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus


def _get_step_cfg(ctx: RunContext, step_id: str) -> Dict[str, Any]:
    cfg = ctx.config or {}
    steps_cfg = cfg.get("steps") if isinstance(cfg, dict) else None
    step_cfg = (steps_cfg.get(step_id) or {}) if isinstance(steps_cfg, dict) else {}
    return step_cfg if isinstance(step_cfg, dict) else {}


@dataclass
class OutputFilterStep(Step):
    """Seleciona e reescreve as entradas do Resolved Map."""

    id: str = "output.filter"
    kind: StepKind = StepKind.FILTER
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["keypath.flatten"]

    def run(self, ctx: RunContext) -> StepResult:
        step_cfg = _get_step_cfg(ctx, self.id)
        pattern = step_cfg.get("key_path_pattern") or None
        env_prefix = step_cfg.get("env_var_prefix") or None

        resolved = ctx.get_artifact("keypath.resolved")

        try:
            entries = filter_entries(resolved, pattern=pattern, env_prefix=env_prefix)
        except KeypathException as e:
            ctx.log(
                step_id=self.id,
                level="ERROR",
                message="output.filter failed",
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

        ctx.set_artifact("output.entries", entries)
        ctx.log(
            step_id=self.id,
            level="INFO",
            message="entries selected",
            pattern=pattern,
            selected=len(entries),
            dropped=len(resolved) - len(entries),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(entries)} of {len(resolved)} key-path(s) selected",
            metrics={"selected": len(entries), "dropped": len(resolved) - len(entries)},
            payload={"pattern": pattern, "env_var_prefix": env_prefix},
        )

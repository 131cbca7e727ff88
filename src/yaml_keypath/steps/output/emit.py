"""Step canônico: output.emit (v1).

Responsabilidades:
- entregar ao Emitter, nesta ordem:
  1. linha informativa do padrão em uso (quando há padrão)
  2. saídas `<path>.array` (artifact `keypath.array_outputs`)
  3. para cada entrada de `output.entries`: info + output, e
     info + variável de ambiente quando há `env_key`

Este é o único Step com efeitos externos. Como o Engine é fail-fast,
uma falha anterior impede qualquer emissão (tudo-ou-nada).

Em dry-run o Step é desabilitado via `steps.output.emit.enabled = false`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from yaml_keypath.core.keypath.nodes import stringify
from yaml_keypath.core.output.emitter import Emitter, to_command_value
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus


def _pattern(ctx: RunContext) -> Any:
    steps_cfg = (ctx.config or {}).get("steps") or {}
    return (steps_cfg.get("output.filter") or {}).get("key_path_pattern") or None


def _info_text(value: Any) -> str:
    """Texto das linhas informativas: escalares como `stringify` (None -> "null")."""
    if isinstance(value, (dict, list, tuple)):
        return to_command_value(value)
    return stringify(value)


@dataclass
class OutputEmitStep(Step):
    """Entrega arrays e entradas selecionadas ao Emitter."""

    emitter: Emitter = None  # type: ignore[assignment]
    id: str = "output.emit"
    kind: StepKind = StepKind.EMIT
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["keypath.flatten", "output.filter"]
        if not isinstance(self.emitter, Emitter):
            raise TypeError("OutputEmitStep requer um Emitter")

    def run(self, ctx: RunContext) -> StepResult:
        array_outputs: Dict[str, Any] = ctx.get_artifact("keypath.array_outputs")
        entries = ctx.get_artifact("output.entries")

        pattern = _pattern(ctx)
        if pattern:
            self.emitter.info(f"\n\nkey-path-pattern is :: {pattern}")
            self.emitter.info("\n\n")

        for key, value in array_outputs.items():
            self.emitter.set_output(key, value)

        exported = 0
        for entry in entries:
            text = _info_text(entry.value)
            self.emitter.info(f"{entry.output_key} : {text}")
            self.emitter.set_output(entry.output_key, entry.value)
            if entry.env_key:
                self.emitter.info(f"{entry.env_key}={text}")
                self.emitter.export_env(entry.env_key, entry.value)
                exported += 1

        ctx.log(
            step_id=self.id,
            level="INFO",
            message="outputs emitted",
            arrays=len(array_outputs),
            outputs=len(entries),
            env=exported,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(entries) + len(array_outputs)} output(s) emitted",
            metrics={
                "arrays": len(array_outputs),
                "outputs": len(entries),
                "env": exported,
            },
        )

"""
Engine de execução da run de resolução.

Política de execução:
- Steps são executados na ordem produzida pelo planner.
- Steps desabilitados em `config["steps"][<id>]["enabled"]` são SKIPPED
  (ex.: `output.emit` em dry-run).
- Steps cujas dependências falharam são SKIPPED.
- Qualquer exceção vira StepResult FAILED com `payload["error"]` (ErrorPayload
  serializável, sem stack trace cru) e a run é encerrada imediatamente:
  fail-fast é obrigatório, pois a emissão é tudo-ou-nada.

O Engine **não** muta instâncias de StepResult in-place; enriquecimentos
(warnings do RunContext) são feitos via `dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

from yaml_keypath.core.errors import (
    ErrorPayload,
    engine_configuration_error,
    engine_execution_error,
)
from yaml_keypath.core.exceptions import KeypathException
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus

from .planner import plan_execution


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma run (RunResult v1)."""

    steps: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def status(self) -> StepStatus:
        if any(r.status == StepStatus.FAILED for r in self.steps.values()):
            return StepStatus.FAILED
        return StepStatus.SUCCESS

    @property
    def ok(self) -> bool:
        return self.status == StepStatus.SUCCESS

    @property
    def failure(self) -> Optional[Dict[str, Any]]:
        """Payload de erro do primeiro Step FAILED (ou None)."""
        for r in self.steps.values():
            if r.status == StepStatus.FAILED:
                return r.payload.get("error")
        return None


class StepReturnTypeError(TypeError):
    """Step.run(ctx) retornou algo que não é StepResult."""


class Engine:
    """Engine canônico do yaml-keypath (planner + executor fail-fast)."""

    def __init__(self, *, steps: Sequence[Step], ctx: RunContext):
        self.steps: List[Step] = list(steps)
        self.ctx: RunContext = ctx

    def _is_enabled(self, step_id: str) -> bool:
        steps_cfg = (self.ctx.config or {}).get("steps", {}) or {}
        step_cfg = steps_cfg.get(step_id, {}) or {}
        return bool(step_cfg.get("enabled", True))

    # ------------------------------------------------------------------
    # Guardrails: exceção -> ErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, step_id: str, exc: Exception) -> ErrorPayload:
        if isinstance(exc, KeypathException):
            return exc.to_payload()

        if isinstance(exc, StepReturnTypeError):
            return engine_configuration_error(
                message="Step retornou tipo inválido",
                details={
                    "step_id": step_id,
                    "expected": "StepResult",
                    "received": str(exc),
                },
            )

        return engine_execution_error(
            step=step_id,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc) or None,
        )

    def _enrich(self, result: StepResult) -> StepResult:
        """Retorna uma NOVA instância com os warnings do RunContext incorporados."""
        merged: List[str] = []
        for msg in list(result.warnings) + list(self.ctx.warnings.get(result.step_id, [])):
            if msg not in merged:
                merged.append(msg)
        return replace(result, warnings=merged)

    def _mk_result(
        self,
        *,
        step: Step,
        status: StepStatus,
        summary: str,
        payload: Dict[str, Any] | None = None,
    ) -> StepResult:
        kind = getattr(step, "kind", None) or StepKind.TRANSFORM
        return self._enrich(
            StepResult(
                step_id=step.id,
                kind=kind,
                status=status,
                summary=summary,
                payload=dict(payload or {}),
            )
        )

    def run(self) -> RunResult:
        ordered = plan_execution(self.steps)

        results: Dict[str, StepResult] = {}
        for step in ordered:
            sid = step.id

            if not self._is_enabled(sid):
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary="skipped by config",
                )
                self.ctx.log(step_id=sid, level="INFO", message="step skipped by config")
                continue

            deps = list(getattr(step, "depends_on", []) or [])
            if any(results.get(d) and results[d].status != StepStatus.SUCCESS for d in deps):
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary="skipped due to unavailable dependency",
                )
                continue

            try:
                step_result = step.run(self.ctx)
                if not isinstance(step_result, StepResult):
                    raise StepReturnTypeError(type(step_result).__name__)
                results[sid] = self._enrich(step_result)
                if step_result.status == StepStatus.FAILED:
                    break

            except Exception as e:
                error = self._exception_to_error(sid, e)
                self.ctx.log(
                    step_id=sid,
                    level="ERROR",
                    message=error.message,
                    error_type=error.type,
                )
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.FAILED,
                    summary=error.message,
                    payload={"error": error.to_dict()},
                )
                break

        return RunResult(steps=results)

# src/yaml_keypath/runner.py
"""
Runner canônico de uma run do yaml-keypath.

Monta explicitamente a run padrão

    document.load → document.merge → keypath.flatten → output.filter → output.emit

cria o RunContext a partir de `RunSettings`, executa o Engine e reporta
a falha (se houver) através de `Emitter.set_failed`.

Invariantes:
    - Uma run que falha produz exatamente uma chamada `set_failed` e
      nenhuma chamada de output/env
    - Nenhum estado global: cada chamada de `run` cria seu próprio contexto

Limites explícitos:
    - Não lê argumentos de linha de comando (ver `yaml_keypath.cli`)
    - Não decide qual Emitter usar
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from yaml_keypath.core.engine.engine import Engine, RunResult
from yaml_keypath.core.output.emitter import Emitter
from yaml_keypath.core.pipeline.context import RunContext
from yaml_keypath.core.pipeline.step import Step
from yaml_keypath.core.settings import RunSettings
from yaml_keypath.steps.document.load import DocumentLoadStep
from yaml_keypath.steps.document.merge import DocumentMergeStep
from yaml_keypath.steps.keypath.flatten import KeypathFlattenStep
from yaml_keypath.steps.output.emit import OutputEmitStep
from yaml_keypath.steps.output.filter import OutputFilterStep


def build_steps(emitter: Emitter) -> List[Step]:
    """Steps da run padrão, em ordem de declaração."""
    return [
        DocumentLoadStep(),
        DocumentMergeStep(),
        KeypathFlattenStep(),
        OutputFilterStep(),
        OutputEmitStep(emitter=emitter),
    ]


def build_context(settings: RunSettings, *, run_id: Optional[str] = None) -> RunContext:
    return RunContext(
        run_id=run_id or uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=settings.to_config(),
        meta={"sources": list(settings.sources)},
    )


def run(
    settings: RunSettings,
    emitter: Emitter,
    *,
    run_id: Optional[str] = None,
    ctx: Optional[RunContext] = None,
) -> RunResult:
    """
    Executa uma run completa.

    Args:
        settings (RunSettings): Configuração da run.
        emitter (Emitter): Sink dos outputs.
        run_id (Optional[str]): Identificador explícito (default: uuid4).
        ctx (Optional[RunContext]): Contexto pré-construído (ex.: para inspecionar eventos em testes).

    Returns:
        RunResult: Resultado agregado por step.
    """
    if ctx is None:
        ctx = build_context(settings, run_id=run_id)

    result = Engine(steps=build_steps(emitter), ctx=ctx).run()

    failure = result.failure
    if failure is not None:
        emitter.set_failed(failure.get("message") or "yaml-keypath run failed")

    return result

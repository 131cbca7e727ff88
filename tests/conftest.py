# tests/conftest.py
"""
Fixtures compartilhados para testes do yaml-keypath.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML de exemplo, próximos do uso real (infra / ambientes)
- um escritor de documentos em `tmp_path`
- contexto de execução controlado (RunContext)
- Steps dummy para testes estruturais do planner e do Engine

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Steps dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa uma run real
    - I/O acontece apenas dentro de `tmp_path`

Este módulo existe como infraestrutura de teste e não
como validação funcional da biblioteca.
"""

from datetime import datetime, timezone

import pytest


# =====================================================
# Documentos
# =====================================================

@pytest.fixture
def infra_yaml() -> str:
    """
    Documento típico de infraestrutura, com referências `$(name)` a chaves anteriores.

    Usado por:
        - Testes do loader
        - Testes de flatten / resolução
        - Testes E2E da run
    """
    return """\
environment: prod
location: eastus
resource_group_name: rg-$(environment)-$(location)
storage:
  account: st$(environment)
  containers:
    - logs
    - data
"""


@pytest.fixture
def override_yaml() -> str:
    """Override local: troca o ambiente e a lista de containers."""
    return """\
environment: dev
storage:
  containers:
    - scratch
"""


@pytest.fixture
def write_doc(tmp_path):
    """
    Factory que materializa um documento em `tmp_path`.

    Returns:
        Callable[[str, str], Path]: (nome do arquivo, conteúdo) -> caminho escrito.
    """

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =====================================================
# Pipeline fixtures (Step + RunContext)
# =====================================================

@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima, já materializada, no formato de `RunSettings.to_config()`.

    Não referencia arquivos reais: testes de Engine e RunContext não leem documentos.
    """
    return {
        "run": {"sources": ["config.yaml"], "string_scalars": False, "dry_run": False},
        "steps": {"output.emit": {"enabled": True}},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    Decisões arquiteturais:
        - `run_id` e `created_at` são fixos para garantir determinismo
        - Config é injetada explicitamente via fixture

    Returns:
        RunContext: Contexto de execução isolado e previsível para testes.
    """
    from yaml_keypath.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def DummyStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Step.

    A implementação retornada:
    - expõe os atributos obrigatórios (`id`, `kind`, `depends_on`)
    - registra um artefato `<id>.ok` no RunContext
    - sempre retorna StepResult SUCCESS

    Returns:
        type: Classe _DummyStep que pode ser instanciada pelos testes.
    """
    from yaml_keypath.core.pipeline.types import StepKind, StepResult, StepStatus

    class _DummyStep:
        def __init__(
            self,
            step_id: str = "document.load",
            kind: StepKind = StepKind.LOAD,
            depends_on=None,
        ):
            self.id = step_id
            self.kind = kind
            self.depends_on = depends_on or []
            self.calls = 0

        def run(self, ctx):
            self.calls += 1
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
                artifacts={"ok": f"{self.id}.ok"},
                payload={"note": "dummy"},
            )

    return _DummyStep

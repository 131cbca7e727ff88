# tests/adapters/test_github_actions.py
"""
Testes do emitter do GitHub Actions e do emitter de console.

Os testes asseguram que:
- outputs e env são anexados como registros delimitados aos arquivos do runner
- na ausência dos arquivos, os workflow commands legados são usados (com escape)
- a falha vira `::error::` com a mensagem escapada
- o console produz linhas `key=value` e `export NAME=...` avaliáveis por shell
"""

import io

import pytest

try:
    from yaml_keypath.adapters.console import ConsoleEmitter
    from yaml_keypath.adapters.github_actions import (
        GitHubActionsEmitter,
        escape_data,
        format_file_command,
    )
    from yaml_keypath.core.output.emitter import Emitter
except Exception as e:
    GitHubActionsEmitter = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"""Missing adapters. Implement:
- src/yaml_keypath/adapters/github_actions.py (GitHubActionsEmitter)
- src/yaml_keypath/adapters/console.py (ConsoleEmitter)
Import error: {_IMPORT_ERR}
""")


def test_emitters_conform_to_protocol():
    _require_imports()
    assert isinstance(GitHubActionsEmitter(environ={}, stream=io.StringIO()), Emitter)
    assert isinstance(ConsoleEmitter(stdout=io.StringIO(), stderr=io.StringIO()), Emitter)


def test_file_command_format():
    _require_imports()
    assert format_file_command("k", "multi\nline", delimiter="EOF") == "k<<EOF\nmulti\nline\nEOF\n"

    with pytest.raises(ValueError):
        format_file_command("k", "contains EOF", delimiter="EOF")


def test_outputs_and_env_are_appended_to_runner_files(tmp_path):
    _require_imports()
    output_file = tmp_path / "output"
    env_file = tmp_path / "env"
    environ = {"GITHUB_OUTPUT": str(output_file), "GITHUB_ENV": str(env_file)}
    stream = io.StringIO()
    emitter = GitHubActionsEmitter(environ=environ, stream=stream)

    emitter.set_output("a.b.array", [{"c": 1}])
    emitter.set_output("name", "svc")
    emitter.export_env("APP_name", "svc")

    out_lines = output_file.read_text(encoding="utf-8").splitlines()
    assert out_lines[0].startswith("a.b.array<<ghadelimiter_")
    assert out_lines[1] == '[{"c":1}]'
    assert out_lines[2] == out_lines[0].split("<<", 1)[1]
    assert out_lines[3].startswith("name<<ghadelimiter_")
    assert out_lines[4] == "svc"

    env_lines = env_file.read_text(encoding="utf-8").splitlines()
    assert env_lines[0].startswith("APP_name<<")
    assert env_lines[1] == "svc"

    assert environ["APP_name"] == "svc"
    assert stream.getvalue() == ""


def test_legacy_commands_without_runner_files():
    _require_imports()
    environ = {}
    stream = io.StringIO()
    emitter = GitHubActionsEmitter(environ=environ, stream=stream)

    emitter.set_output("key:1", "50%\nnext")
    emitter.export_env("P_key", "v")
    emitter.info("key : v")

    assert stream.getvalue().splitlines() == [
        "::set-output name=key%3A1::50%25%0Anext",
        "::set-env name=P_key::v",
        "key : v",
    ]
    assert environ == {"P_key": "v"}


def test_set_failed_writes_escaped_error(monkeypatch):
    _require_imports()
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    stream = io.StringIO()
    emitter = GitHubActionsEmitter(stream=stream)

    emitter.set_failed('Variable "x" is not defined\r\n')

    assert emitter.failed is True
    assert stream.getvalue() == '::error::Variable "x" is not defined%0D%0A\n'
    assert escape_data("100%") == "100%25"


def test_console_emitter_lines():
    _require_imports()
    stdout, stderr = io.StringIO(), io.StringIO()
    emitter = ConsoleEmitter(stdout=stdout, stderr=stderr)

    emitter.set_output("name", "my app")
    emitter.export_env("APP_name", "my app")
    emitter.export_env("APP_port", 8080)
    emitter.info("name : my app")
    emitter.set_failed("boom")

    assert stdout.getvalue().splitlines() == [
        "name=my app",
        "export APP_name='my app'",
        "export APP_port=8080",
    ]
    assert stderr.getvalue().splitlines() == ["name : my app", "error: boom"]
    assert emitter.failed is True

# src/yaml_keypath/core/settings.py
"""
Settings canônicos de uma run do yaml-keypath.

Este módulo define `RunSettings`, a configuração explícita e imutável de
uma run de resolução, e os builders que a produzem a partir das fontes
suportadas (argumentos de CLI ou inputs de um workflow do GitHub Actions).

Campos (v1):
    - sources: documentos a carregar; a ordem define a precedência do merge
    - key_path_pattern: expressão regular de seleção/reescrita (opcional)
    - env_var_prefix: prefixo das variáveis de ambiente exportadas (opcional)
    - string_scalars: carrega todo escalar como o texto de origem
    - dry_run: resolve e filtra, mas não emite nada

Decisões arquiteturais:
    - String vazia em padrão/prefixo equivale a ausente
    - Inputs `config` e `config-files` podem coexistir; `config` vem
      primeiro e `config-files` sobrepõe na ordem declarada
    - Booleanos de input aceitam apenas true/True/TRUE/false/False/FALSE

Invariantes:
    - Settings válidos sempre têm ao menos uma fonte
    - `to_config()` produz um dicionário puro, serializável

Limites explícitos:
    - Não lê documentos
    - Não valida o padrão (isso é papel do filtro, antes de emitir)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from yaml_keypath.core.exceptions import SettingsError


_TRUE_INPUTS = {"true", "True", "TRUE"}
_FALSE_INPUTS = {"false", "False", "FALSE"}


def _action_input(environ: Mapping[str, str], name: str) -> str:
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return (environ.get(key) or "").strip()


def _action_bool_input(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = _action_input(environ, name)
    if not raw:
        return default
    if raw in _TRUE_INPUTS:
        return True
    if raw in _FALSE_INPUTS:
        return False
    raise SettingsError(
        message=f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}",
        details={"input": name, "value": raw},
        hint="Use true ou false.",
    )


def _split_lines(raw: str) -> List[str]:
    return [line.strip() for line in raw.splitlines() if line.strip()]


@dataclass(frozen=True)
class RunSettings:
    """Configuração imutável de uma run."""

    sources: List[str] = field(default_factory=list)
    key_path_pattern: Optional[str] = None
    env_var_prefix: Optional[str] = None
    string_scalars: bool = False
    dry_run: bool = False

    def __post_init__(self) -> None:
        sources = [str(s) for s in (self.sources or []) if str(s).strip()]
        if not sources:
            raise SettingsError(
                message="No source documents given",
                details={"sources": list(self.sources or [])},
                hint="Informe ao menos um arquivo YAML/JSON (input `config` ou `config-files`).",
            )
        object.__setattr__(self, "sources", sources)
        object.__setattr__(self, "key_path_pattern", self.key_path_pattern or None)
        object.__setattr__(self, "env_var_prefix", self.env_var_prefix or None)

    @classmethod
    def from_sources(
        cls,
        sources: Sequence[str],
        *,
        key_path_pattern: Optional[str] = None,
        env_var_prefix: Optional[str] = None,
        string_scalars: bool = False,
        dry_run: bool = False,
    ) -> "RunSettings":
        return cls(
            sources=list(sources),
            key_path_pattern=key_path_pattern,
            env_var_prefix=env_var_prefix,
            string_scalars=string_scalars,
            dry_run=dry_run,
        )

    @classmethod
    def from_action_inputs(cls, environ: Mapping[str, str]) -> "RunSettings":
        """
        Constrói settings a partir dos inputs de uma action (`INPUT_<NAME>`).

        Inputs lidos:
            - config: um único documento
            - config-files: documentos separados por linha (trim, linhas vazias ignoradas)
            - key-path-pattern, env-var-prefix
            - string-scalars (booleano)

        Raises:
            SettingsError: Se nenhuma fonte for informada ou um booleano for inválido.
        """
        sources: List[str] = []
        single = _action_input(environ, "config")
        if single:
            sources.append(single)
        sources.extend(_split_lines(_action_input(environ, "config-files")))

        return cls(
            sources=sources,
            key_path_pattern=_action_input(environ, "key-path-pattern") or None,
            env_var_prefix=_action_input(environ, "env-var-prefix") or None,
            string_scalars=_action_bool_input(environ, "string-scalars"),
        )

    def to_config(self) -> Dict[str, Any]:
        """Dicionário armazenado em `RunContext.config`."""
        return {
            "run": {
                "sources": list(self.sources),
                "string_scalars": self.string_scalars,
                "dry_run": self.dry_run,
            },
            "steps": {
                "document.load": {
                    "sources": list(self.sources),
                    "string_scalars": self.string_scalars,
                },
                "output.filter": {
                    "key_path_pattern": self.key_path_pattern,
                    "env_var_prefix": self.env_var_prefix,
                },
                "output.emit": {
                    "enabled": not self.dry_run,
                },
            },
        }

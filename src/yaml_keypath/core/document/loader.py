# src/yaml_keypath/core/document/loader.py
"""
Loader canônico de documentos do yaml-keypath.

Este módulo é responsável por ler documentos de configuração do disco e
validar seus requisitos estruturais mínimos antes do merge e do flatten.

Formatos suportados (v1):
    - JSON (.json)
    - YAML (qualquer outra extensão, inclusive nenhuma)

No modo tipado o YAML segue o core schema do YAML 1.2 para booleanos:
on/off/yes/no continuam strings.

Modos de escalar:
    - tipado (padrão): escalares preservam o tipo codificado pelo formato
      (str, int, float, bool, null, datas YAML)
    - string (`string_scalars=True`): todo escalar é carregado como o texto
      que aparece na fonte (equivalente ao schema failsafe do YAML)

Invariantes:
    - O retorno é sempre um dicionário
    - Arquivos vazios são interpretados como dicionários vazios
    - Cada documento é lido por completo antes de ser devolvido
    - Documentos são lidos de forma independente (nenhum estado compartilhado)

Limites explícitos:
    - Não realiza merge
    - Não resolve variáveis
    - Não infere formato por conteúdo
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List
import json
import re

import yaml  # PyYAML

from yaml_keypath.core.exceptions import (
    DocumentNotFoundError,
    DocumentParseError,
    InvalidDocumentRootTypeError,
)


JSON_SUFFIXES = {".json"}

_BOOL_TAG = "tag:yaml.org,2002:bool"


class CoreSchemaLoader(yaml.SafeLoader):
    """
    SafeLoader cujos booleanos seguem o core schema do YAML 1.2.

    Apenas true/True/TRUE/false/False/FALSE viram bool; on/off/yes/no
    (YAML 1.1) permanecem strings, inclusive quando usados como chave.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _json_scalar_text(value: Any) -> Any:
    """Converte escalares JSON remanescentes (bool/null) em seu texto de origem."""
    if isinstance(value, dict):
        return {k: _json_scalar_text(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_scalar_text(v) for v in value]
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return value


def _parse_yaml(raw: str, *, string_scalars: bool) -> Any:
    if string_scalars:
        return yaml.load(raw, Loader=yaml.BaseLoader)
    return yaml.load(raw, Loader=CoreSchemaLoader)


def _parse_json(raw: str, *, string_scalars: bool) -> Any:
    if not raw.strip():
        return None
    if string_scalars:
        data = json.loads(raw, parse_float=str, parse_int=str, parse_constant=str)
        return _json_scalar_text(data)
    return json.loads(raw)


def load_document(path: str, *, string_scalars: bool = False) -> Dict[str, Any]:
    """
    Carrega um documento de configuração e valida sua estrutura básica.

    Args:
        path (str): Caminho para o documento (.json é lido como JSON; o resto, como YAML).
        string_scalars (bool): Carrega todo escalar como texto.

    Returns:
        Dict[str, Any]: Árvore do documento (mapping na raiz).

    Raises:
        DocumentNotFoundError: Se o arquivo não existir ou não puder ser lido.
        DocumentParseError: Se a sintaxe do documento for inválida.
        InvalidDocumentRootTypeError: Se a raiz não for um mapping.
    """
    p = Path(path)
    if not p.is_file():
        raise DocumentNotFoundError(
            message=f"Documento não encontrado: {p}",
            details={"path": str(p)},
            hint="Verifique o caminho informado em config/config-files.",
        )

    is_json = p.suffix.lower() in JSON_SUFFIXES

    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFoundError(
            message=f"Documento ilegível: {p} ({e})",
            details={"path": str(p), "reason": str(e)},
        ) from e

    try:
        if is_json:
            data = _parse_json(raw, string_scalars=string_scalars)
        else:
            data = _parse_yaml(raw, string_scalars=string_scalars)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DocumentParseError(
            message=f"Sintaxe inválida em {p}: {e}",
            details={"path": str(p), "reason": str(e)},
        ) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidDocumentRootTypeError(
            message=f"Raiz do documento deve ser um mapping, recebido: {type(data).__name__}",
            details={"path": str(p), "root_type": type(data).__name__},
        )

    return data


def load_documents(paths: Iterable[str], *, string_scalars: bool = False) -> List[Dict[str, Any]]:
    """Carrega documentos na ordem informada (a ordem define a precedência do merge)."""
    return [load_document(path, string_scalars=string_scalars) for path in paths]

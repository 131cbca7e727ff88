# src/yaml_keypath/core/keypath/variables.py
"""
Substituição de variáveis `$(name)` em valores string.

Regra de resolução (v1):
    - procura, da esquerda para a direita, a primeira ocorrência de
      `$(` + um ou mais caracteres diferentes de `)` + `)`
    - `name` é buscado no Resolved Map **no estado atual** (apenas chaves
      já visitadas pelo flatten)
    - a primeira ocorrência do texto casado é substituída pela forma
      textual do valor, e a busca recomeça sobre a string atualizada
    - termina quando nenhuma referência resta

Ordem de documento:
    Uma chave só pode referenciar chaves que aparecem antes dela na
    travessia. Referências à frente e auto-referências falham como
    "não definida", o que dispensa detecção de ciclos. Autores de
    documentos devem declarar dependências antes dos dependentes.

Valores falsy:
    Um valor vazio ("", 0, false, null, NaN) é tratado como ausente e falha
    como UndefinedVariableError, em vez de produzir substituição vazia.
    Esse comportamento é herdado dos consumidores existentes e é
    preservado deliberadamente; mudanças exigem alinhamento com os
    donos do formato.
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional

from yaml_keypath.core.exceptions import SubstitutionLimitError, UndefinedVariableError

from .nodes import stringify


VARIABLE_PATTERN = re.compile(r"\$\(([^)]+)\)")

# Cada substituição consome uma referência; um valor cujo texto substituído
# volta a formar uma referência (ex.: "$(a" + ")") não termina sozinho.
DEFAULT_MAX_SUBSTITUTIONS = 10_000


def find_references(text: str) -> List[str]:
    """Nomes referenciados em `text`, na ordem em que aparecem."""
    return VARIABLE_PATTERN.findall(text)


def resolve_vars(
    text: str,
    resolved: Mapping[str, Any],
    *,
    key_path: Optional[str] = None,
    max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS,
) -> str:
    """
    Substitui todas as referências `$(name)` de `text` usando `resolved`.

    Args:
        text (str): Valor string da chave sendo visitada.
        resolved (Mapping[str, Any]): Resolved Map no estado atual da travessia.
        key_path (Optional[str]): Key-path dono do valor (apenas diagnóstico).
        max_substitutions (int): Limite de substituições por valor.

    Returns:
        str: Valor totalmente substituído.

    Raises:
        UndefinedVariableError: Se `name` estiver ausente ou for falsy.
        SubstitutionLimitError: Se o limite de substituições for excedido.
    """
    substitutions = 0
    match = VARIABLE_PATTERN.search(text)

    while match is not None:
        name = match.group(1)
        value = resolved.get(name)

        if not value or (isinstance(value, float) and math.isnan(value)):
            raise UndefinedVariableError(
                message=f'Variable "{name}" is not defined',
                details={
                    "variable": name,
                    "key_path": key_path,
                    "empty_value": name in resolved,
                },
                hint="Declare a chave referenciada antes da chave que a utiliza, com valor não vazio.",
            )

        substitutions += 1
        if substitutions > max_substitutions:
            raise SubstitutionLimitError(
                message=f"Substitution limit exceeded while resolving {key_path or text!r}",
                details={"key_path": key_path, "limit": max_substitutions},
            )

        text = text.replace(match.group(0), stringify(value), 1)
        match = VARIABLE_PATTERN.search(text)

    return text

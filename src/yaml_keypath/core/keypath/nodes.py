# src/yaml_keypath/core/keypath/nodes.py
"""
Classificação canônica dos valores de uma árvore de documento.

Uma árvore é uma união etiquetada (tagged union) de quatro formas:

    - MAPPING  → descida com prefixo `p.`; nenhuma entrada para `p`
    - SEQUENCE → marca de array + descida por índice (`p.0`, `p.1`, ...)
    - STRING   → escalar sujeito a substituição de variáveis
    - SCALAR   → demais escalares (número, booleano, null, data), gravados sem alteração

A classificação acontece em um único ponto (`kind_of`); o flatten despacha
por `NodeKind` através de uma tabela de handlers, o que mantém a
ramificação explícita e exaustiva.

Este módulo também define a forma textual canônica de escalares
(`stringify`), usada tanto na renderização de segmentos de key-path
quanto na substituição de `$(name)`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    SCALAR = "scalar"


def kind_of(value: Any) -> NodeKind:
    """Classifica um valor da árvore em exatamente um `NodeKind`."""
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, str):
        return NodeKind.STRING
    return NodeKind.SCALAR


def stringify(value: Any) -> str:
    """
    Forma textual de um escalar.

    Segue a representação usada pelos consumidores originais dos outputs:
        - booleanos → "true" / "false"
        - null      → "null"
        - floats integrais → sem ".0" (ex.: 2.0 → "2")
        - infinitos / NaN → "Infinity" / "-Infinity" / "NaN"
        - datas     → ISO 8601
    """
    if isinstance(value, str):
        return value
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def render_segment(key: Any) -> str:
    """Renderiza uma chave de mapping ou índice de sequência como segmento de key-path."""
    return stringify(key)

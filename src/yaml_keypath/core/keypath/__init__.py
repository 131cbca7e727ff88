"""
Flatten e resolução de key-paths.

    - nodes     → união etiquetada dos valores da árvore + forma textual de escalares
    - variables → substituição `$(name)` contra o Resolved Map corrente
    - flatten   → travessia em profundidade que constrói o Resolved Map
    - hashing   → fingerprint ordenado do Resolved Map
"""

from .flatten import ARRAY_SUFFIX, FlattenResult, flatten
from .hashing import compute_resolved_hash
from .nodes import NodeKind, kind_of, stringify
from .variables import VARIABLE_PATTERN, find_references, resolve_vars

__all__ = [
    "ARRAY_SUFFIX",
    "FlattenResult",
    "flatten",
    "compute_resolved_hash",
    "NodeKind",
    "kind_of",
    "stringify",
    "VARIABLE_PATTERN",
    "find_references",
    "resolve_vars",
]

# src/yaml_keypath/core/keypath/hashing.py
"""
Fingerprint canônico do Resolved Map.

O hash identifica o resultado de uma run para fins de rastreabilidade
(ex.: comparar duas execuções sobre os mesmos documentos).

Política de hashing (v1):
    - Serialização JSON da lista ordenada de pares [key, value]
    - A ordem de travessia faz parte da identidade (não há sort de chaves)
    - Separadores compactos, UTF-8, SHA-256
    - Escalares não serializáveis em JSON (ex.: datas) usam `str()`
"""

import hashlib
import json
from typing import Any, Mapping


def compute_resolved_hash(resolved: Mapping[str, Any]) -> str:
    """
    Gera o SHA-256 hexadecimal (64 caracteres) de um Resolved Map.

    Raises:
        TypeError: Se o objeto fornecido não for um mapping.
    """
    if not isinstance(resolved, Mapping):
        raise TypeError(
            f"Resolved Map para hashing deve ser mapping, recebido: {type(resolved).__name__}"
        )

    canonical_json = json.dumps(
        [[key, value] for key, value in resolved.items()],
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

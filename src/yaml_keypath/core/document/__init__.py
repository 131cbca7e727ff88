# src/yaml_keypath/core/document/__init__.py

"""
Camada de documentos do yaml-keypath.

Este pacote carrega documentos YAML/JSON do disco e os combina em uma
única árvore via deep-merge determinístico.

Responsabilidades do pacote:
    - Carregamento de documentos (YAML ou JSON, raiz obrigatoriamente mapping)
    - Combinação ordenada de múltiplos documentos (last-document-wins)

Invariantes:
    - A árvore final é um dicionário puro (dict)
    - A mesma sequência de entradas sempre produz a mesma árvore
    - Árvores carregadas nunca são mutadas após o load
"""

from .loader import load_document, load_documents
from .merge import deep_merge, merge_documents

__all__ = ["load_document", "load_documents", "deep_merge", "merge_documents"]

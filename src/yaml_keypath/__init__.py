"""
yaml-keypath

Achata documentos YAML/JSON hierárquicos em key-paths pontuados,
resolvendo referências `$(name)` na ordem de documento, e entrega os
pares resultantes a um Emitter (outputs nomeados e variáveis de ambiente).
"""

__version__ = "0.1.0"

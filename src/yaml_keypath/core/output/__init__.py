"""
Seleção de entradas e contrato de emissão.

    - filter  → padrão de key-path, reescrita de chaves, nomes de env
    - emitter → Protocol do sink externo + emitter em memória
"""

from .emitter import Emitter, MemoryEmitter, to_command_value
from .filter import OutputEntry, compile_key_path_pattern, env_var_name, filter_entries

__all__ = [
    "Emitter",
    "MemoryEmitter",
    "to_command_value",
    "OutputEntry",
    "compile_key_path_pattern",
    "env_var_name",
    "filter_entries",
]

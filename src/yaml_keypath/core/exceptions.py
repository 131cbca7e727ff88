"""
yaml-keypath: Canonical Exceptions (v1)

Este módulo define as exceções tipadas do yaml-keypath.

Objetivo:
- Permitir que loader, resolver, filtro e settings levantem falhas semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nas fronteiras da run

Regras:
- Toda exceção carrega um código estável do catálogo em `core.errors`.
- Exceções devem carregar apenas dados estruturados (serializáveis) em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from yaml_keypath.core import errors as catalog
from yaml_keypath.core.errors import ErrorPayload


@dataclass(frozen=True)
class KeypathException(Exception):
    """Base class para exceções internas do yaml-keypath.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana (é ela que chega ao emitter)
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    error_type: ClassVar[str] = catalog.ENGINE_EXECUTION_ERROR

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.error_type,
            message=self.message,
            details=dict(self.details or {}),
            hint=self.hint,
            decision_required=False,
        )


# ---------------------------------------------------------------------------
# Documento / Loader
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadError(KeypathException):
    """Documento não pôde ser carregado (base de todas as falhas do loader)."""

    error_type: ClassVar[str] = catalog.DOCUMENT_LOAD_ERROR


@dataclass(frozen=True)
class DocumentNotFoundError(LoadError):
    """Arquivo inexistente ou ilegível."""

    error_type: ClassVar[str] = catalog.DOCUMENT_NOT_FOUND


@dataclass(frozen=True)
class DocumentParseError(LoadError):
    """Sintaxe YAML/JSON inválida."""

    error_type: ClassVar[str] = catalog.DOCUMENT_PARSE_ERROR


@dataclass(frozen=True)
class InvalidDocumentRootTypeError(LoadError):
    """Raiz do documento não é um mapeamento."""

    error_type: ClassVar[str] = catalog.DOCUMENT_INVALID_ROOT


# ---------------------------------------------------------------------------
# Resolução de variáveis
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UndefinedVariableError(KeypathException):
    """Referência `$(name)` ausente (ou com valor falsy) no Resolved Map."""

    error_type: ClassVar[str] = catalog.UNDEFINED_VARIABLE

    @property
    def variable(self) -> Optional[str]:
        return (self.details or {}).get("variable")


@dataclass(frozen=True)
class SubstitutionLimitError(KeypathException):
    error_type: ClassVar[str] = catalog.SUBSTITUTION_LIMIT_EXCEEDED


# ---------------------------------------------------------------------------
# Filtro / Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PatternError(KeypathException):
    """Padrão de key-path não compila."""

    error_type: ClassVar[str] = catalog.INVALID_KEY_PATH_PATTERN


@dataclass(frozen=True)
class SettingsError(KeypathException):
    """Configuração da run inválida ou incompleta."""

    error_type: ClassVar[str] = catalog.INVALID_SETTINGS

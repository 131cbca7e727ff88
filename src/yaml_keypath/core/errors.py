"""
yaml-keypath: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do yaml-keypath.
Erros fazem parte do contrato operacional da resolução e devem ser:

- explícitos
- serializáveis
- acionáveis

Toda falha é terminal para a run: não existe recuperação parcial,
e a mensagem do payload é a única mensagem reportada ao emitter.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do yaml-keypath.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do documento (onde corrigir)
    - decision_required: indica que a run não pode prosseguir sem ação humana
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Documento / Loader
DOCUMENT_LOAD_ERROR = "DOCUMENT_LOAD_ERROR"
DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
DOCUMENT_INVALID_ROOT = "DOCUMENT_INVALID_ROOT"

# Resolução de variáveis
UNDEFINED_VARIABLE = "UNDEFINED_VARIABLE"
SUBSTITUTION_LIMIT_EXCEEDED = "SUBSTITUTION_LIMIT_EXCEEDED"

# Filtro / Settings
INVALID_KEY_PATH_PATTERN = "INVALID_KEY_PATH_PATTERN"
INVALID_SETTINGS = "INVALID_SETTINGS"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace e os documentos de entrada. Nenhum fallback é aplicado automaticamente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante a resolução",
        details={
            "step": step,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
        decision_required=False,
    )


def engine_configuration_error(
    *,
    message: str = "Configuração inválida para execução da run",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Ajuste o Step para retornar StepResult.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
        decision_required=False,
    )

"""
LLAP Packager — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do LLAP Packager.
Erros são considerados artefatos de execução e fazem parte do contrato
operacional do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PackagerErrorPayload:
    """
    Payload canônico de erro do LLAP Packager.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Preflight / ambiente
CONFIG_RESOURCE_MISSING = "CONFIG_RESOURCE_MISSING"
LOGGING_CONFIG_MISSING = "LOGGING_CONFIG_MISSING"
INSTALL_ROOT_MISSING = "INSTALL_ROOT_MISSING"

# Orçamento de recursos
RESOURCE_BUDGET_VIOLATION = "RESOURCE_BUDGET_VIOLATION"
CONTAINER_BELOW_MINIMUM = "CONTAINER_BELOW_MINIMUM"

# Staging
JAVA_HOME_UNRESOLVED = "JAVA_HOME_UNRESOLVED"
LIBRARY_STAGING_FAILED = "LIBRARY_STAGING_FAILED"
STORAGE_INTEGRATION_FAILED = "STORAGE_INTEGRATION_FAILED"
CONFIG_STAGING_FAILED = "CONFIG_STAGING_FAILED"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"


# Mapeamento estável exceção -> código (nome da classe como chave).
EXCEPTION_CODES: Dict[str, str] = {
    "MissingConfigResource": CONFIG_RESOURCE_MISSING,
    "MissingLoggingConfig": LOGGING_CONFIG_MISSING,
    "InstallRootNotFound": INSTALL_ROOT_MISSING,
    "ResourceBudgetViolation": RESOURCE_BUDGET_VIOLATION,
    "ContainerBelowMinimum": CONTAINER_BELOW_MINIMUM,
    "JavaHomeUnresolved": JAVA_HOME_UNRESOLVED,
    "LibraryStagingError": LIBRARY_STAGING_FAILED,
    "StorageIntegrationStagingError": STORAGE_INTEGRATION_FAILED,
    "ConfigStagingError": CONFIG_STAGING_FAILED,
}


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_resource_missing(
    *,
    resource: str,
    searched: List[str],
    hint: str = "Inclua o diretório que contém o arquivo em --conf-dir ou instale a configuração do cluster.",
) -> PackagerErrorPayload:
    return PackagerErrorPayload(
        type=CONFIG_RESOURCE_MISSING,
        message=f"Unable to find required config file: {resource}",
        details={"resource": resource, "searched": list(searched)},
        hint=hint,
    )


def logging_config_missing(
    *,
    resource: str,
    searched: List[str],
    hint: str = "Disponibilize o arquivo de logging do daemon em um dos diretórios de configuração.",
) -> PackagerErrorPayload:
    return PackagerErrorPayload(
        type=LOGGING_CONFIG_MISSING,
        message=f"Unable to find required config file: {resource}",
        details={"resource": resource, "searched": list(searched)},
        hint=hint,
    )


def resource_budget_violation(
    *,
    message: str,
    container_bytes: int,
    cache_bytes: int,
    heap_bytes: int,
    hint: str = "Reduza cache/heap ou aumente o tamanho do container antes de reexecutar.",
) -> PackagerErrorPayload:
    return PackagerErrorPayload(
        type=RESOURCE_BUDGET_VIOLATION,
        message=message,
        details={
            "container_bytes": container_bytes,
            "cache_bytes": cache_bytes,
            "heap_bytes": heap_bytes,
        },
        hint=hint,
    )


def container_below_minimum(
    *,
    container_mb: int,
    min_allocation_mb: int,
    hint: str = "Solicite um container maior ou ajuste yarn.scheduler.minimum-allocation-mb no cluster.",
) -> PackagerErrorPayload:
    return PackagerErrorPayload(
        type=CONTAINER_BELOW_MINIMUM,
        message=f"Container size should be greater than minimum allocation({min_allocation_mb}m)",
        details={"container_mb": container_mb, "min_allocation_mb": min_allocation_mb},
        hint=hint,
    )


def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o event log do run para diagnosticar a falha. Nenhum fallback é aplicado automaticamente.",
) -> PackagerErrorPayload:
    return PackagerErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante o empacotamento",
        details={
            "step": step,
            "exc_type": exc_type,
        },
        hint=hint,
    )

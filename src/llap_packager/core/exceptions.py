"""
LLAP Packager — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do LLAP Packager.

Objetivo:
- Permitir que Steps, validador e resolver levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para PackagerErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Mensagens são curtas, humanas e carregam os valores ofensores.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PackagerException(Exception):
    """Base class para exceções internas do packager.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Preflight / ambiente
# ---------------------------------------------------------------------------

class MissingConfigResource(PackagerException):
    """Arquivo de configuração obrigatório não é localizável."""


class MissingLoggingConfig(PackagerException):
    """Recurso de configuração de logging do daemon não é localizável."""


class InstallRootNotFound(PackagerException):
    """Diretório raiz de instalação não existe localmente."""


# ---------------------------------------------------------------------------
# Orçamento de recursos
# ---------------------------------------------------------------------------

class ResourceBudgetViolation(PackagerException):
    """Cache/heap inconsistentes com o tamanho do container."""


class ContainerBelowMinimum(ResourceBudgetViolation):
    """Container menor que a alocação mínima reportada pelo cluster."""


# ---------------------------------------------------------------------------
# Staging
# ---------------------------------------------------------------------------

class JavaHomeUnresolved(PackagerException):
    """Nenhuma instalação Java pôde ser determinada."""


class LibraryStagingError(PackagerException):
    """Falha ao copiar ou extrair uma biblioteca para o diretório lib."""


class StorageIntegrationStagingError(LibraryStagingError):
    """Falha ao localizar a biblioteca de integração de storage solicitada."""


class ConfigStagingError(PackagerException):
    """Falha ao copiar ou gerar um arquivo no diretório conf."""

# src/llap_packager/core/pipeline/types.py
"""
Tipos canônicos do pipeline de empacotamento.

Este módulo define as estruturas e enums fundamentais que padronizam
a comunicação entre Steps, Engine e o relatório final da run.

Componentes principais:
    - StepStatus → enum de estados finais (SUCCESS, SKIPPED, FAILED)
    - StepKind   → enum de classificação semântica de Steps
    - StepPolicy → enum que marca o Step como obrigatório ou opcional
    - StepResult → estrutura imutável de resultado de execução

Princípios fundamentais:
    - Tipos são estáveis e serializáveis
    - Nenhuma lógica de execução vive neste módulo

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepResult é imutável e seguro contra mutação acidental
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps no pipeline.

    Tipos definidos:
        - PREFLIGHT: verificações de pré-condição sem efeitos colaterais
        - ENVIRONMENT: checagens do ambiente local (home, scripts, logging)
        - LIBRARY: staging de bibliotecas no diretório lib
        - CONFIG: staging de arquivos no diretório conf
        - EXPORT: emissão de artefatos finais (manifest)

    Decisões arquiteturais:
        - O tipo é puramente informativo e semântico
        - O Engine não utiliza `StepKind` para decidir execução
    """

    PREFLIGHT = "preflight"
    ENVIRONMENT = "environment"
    LIBRARY = "library"
    CONFIG = "config"
    EXPORT = "export"


class StepPolicy(str, Enum):
    """
    Política de falha de um Step.

        - MANDATORY: falha interrompe a run imediatamente
        - OPTIONAL: falha é registrada como warning e a run continua
    """

    MANDATORY = "mandatory"
    OPTIONAL = "optional"


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um Step.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: execução pulada por decisão explícita
        - FAILED: execução interrompida por erro
    """

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id: identificador único do Step
        - kind: tipo semântico do Step
        - status: estado final da execução do Step
        - summary: resumo textual da execução
        - policy: política de falha do Step
        - metrics: contagens produzidas pelo Step (ex.: arquivos copiados)
        - warnings: avisos não fatais gerados durante a execução
        - artifacts: caminhos produzidos no staging
        - payload: dados adicionais (ex.: `error` serializado)

    Invariantes:
        - Uma instância de StepResult nunca é alterada após criada
        - `step_id`, `kind` e `status` estão sempre presentes
    """

    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    policy: StepPolicy = StepPolicy.MANDATORY
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, Any] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

# src/llap_packager/core/pipeline/__init__.py
"""
Pipeline de empacotamento: contrato de Step, tipos canônicos, registro
e contexto de execução.

Componentes principais:
    - types    → StepKind, StepPolicy, StepStatus, StepResult
    - step     → protocolo Step (duck typing)
    - registry → ordem de declaração + unicidade de ids
    - context  → PackagingContext (estado explícito de uma run)
"""

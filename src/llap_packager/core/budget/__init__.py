# src/llap_packager/core/budget/__init__.py
"""
Orçamento de recursos (ResourceBudget) do LLAP Packager.

Este pacote reúne:
    - budget    → modelo do orçamento e projeção em direct overrides
    - validator → regras de consistência memória/heap/cache e mínimo do cluster

Invariantes:
    - Nenhuma escrita de configuração ocorre antes da validação
    - O sentinela -1 significa "não definido" e pula a regra correspondente
"""

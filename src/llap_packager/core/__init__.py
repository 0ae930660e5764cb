# src/llap_packager/core/__init__.py
"""
Core do LLAP Packager.

Componentes principais:
    - config       → camadas de configuração, allow-list e resolução
    - budget       → ResourceBudget e regras de validação
    - pipeline     → protocolos de Step, contexto de execução e registry
    - engine       → execução ordenada com política mandatory/optional
    - traceability → Manifest consumido pelo tooling de launch
    - errors / exceptions → catálogo de erros e exceções tipadas

Princípios fundamentais:
    - Nenhuma decisão silenciosa: chaves descartadas viram diagnostics
    - Valores de configuração nunca são mutados in-place
    - Falhas fatais interrompem a run antes de qualquer escrita parcial

Limites explícitos:
    - Não lê argv nem variáveis de ambiente
    - Não acessa disco diretamente fora dos colaboradores
"""

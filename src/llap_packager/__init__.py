# src/llap_packager/__init__.py
"""
LLAP Packager — montagem do pacote implantável de uma instância do daemon LLAP.

Uma invocação resolve a configuração efetiva a partir de camadas com
precedência fixa, valida o orçamento de recursos solicitado contra o
mínimo do cluster e monta um staging directory autocontido
(bibliotecas, configuração resolvida e um manifest) que um orquestrador
externo distribui aos nós do cluster.

Arquitetura em alto nível:
    - core.config       → carregamento, merge de server properties, resolução e hashing
    - core.budget       → orçamento de recursos e validador
    - core.pipeline     → protocolo de Step, contexto de execução e registry
    - core.engine       → execução ordenada mandatory/optional
    - core.traceability → Manifest do daemon (`config.json`)
    - environment       → colaboradores externos (filesystem, artefatos, framework, java)
    - steps             → um módulo por estágio do assembly
    - packager / driver → assembly e execução de ponta a ponta
    - cli               → comando `llap-package`

Limites explícitos:
    - Um único pacote de instância por invocação
    - Não lança daemons no cluster
    - Não observa mudanças de configuração
"""

__version__ = "0.1.0"

# src/llap_packager/core/config/__init__.py

"""
Camada de configuração do LLAP Packager.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, filtrar e identificar a configuração de uma instância do daemon.

A configuração no LLAP Packager é:
    - declarativa
    - determinística
    - imutável entre estágios (cada estágio devolve um valor novo)

Responsabilidades do pacote:
    - Lookup de recursos de configuração do cluster
    - Carregamento de site XML, profiles YAML/JSON e mapas planos
    - Merge de server properties com allow-list e warn-on-unknown
    - Resolução das camadas de override (profile < direct)
    - Escrita do site file do daemon e hash canônico

Invariantes:
    - A precedência entre camadas é fixa (base < profile < direct)
    - Chaves desconhecidas sem prefixo reconhecido nunca são externalizadas

Limites explícitos:
    - Não valida orçamento de recursos
    - Não executa staging
"""

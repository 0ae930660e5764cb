# src/llap_packager/core/config/errors.py
"""
Exceções canônicas da camada de configuração do LLAP Packager.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento e a validação estrutural de arquivos de configuração
(site XML do cluster, profiles e mapeamentos de artefatos).

As exceções aqui definidas representam **violações estruturais
explícitas** de arquivos, e não falhas de empacotamento.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Chaves desconhecidas NÃO são erro (ver resolver: warn-and-drop)

Limites explícitos:
    - Não executa o pipeline de staging
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados a arquivos de configuração.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas estruturais e falhas de staging
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração explicitamente
    informado (profiles, mapeamento de artefatos) não existe.

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - Hadoop XML (.xml)
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo YAML/JSON
    não é um dicionário (`dict`).

    Decisões arquiteturais:
        - A configuração é sempre um mapa chave-valor plano
        - Listas ou valores escalares no root são inválidos
    """


class MalformedSiteFileError(ConfigError):
    """
    Exceção levantada quando um arquivo Hadoop XML não segue a estrutura
    `<configuration><property><name/><value/></property></configuration>`.
    """


class UnknownProfileError(ConfigError):
    """
    Exceção levantada quando o profile nomeado não existe no arquivo de profiles.
    """

# src/llap_packager/core/config/loader.py
"""
Loader canônico de configuração do LLAP Packager.

Este módulo é responsável por carregar e validar estruturalmente os
arquivos que alimentam a configuração de uma run:

    - arquivos do cluster (`*-site.xml`), que formam a configuração base
    - arquivo de profiles nomeados (YAML/JSON), fonte do profile-override
    - mapas planos auxiliares (ex.: mapeamento de artefatos)

Responsabilidades do módulo:
    - Carregar arquivos em Hadoop XML, YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz, mapa plano)
    - Montar a configuração base respeitando a ordem de carregamento
    - Garantir que a ausência de um arquivo obrigatório seja fatal

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Nenhuma heurística implícita é aplicada
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - Arquivos obrigatórios são sempre carregados antes dos opcionais
    - Arquivos posteriores sobrescrevem anteriores, chave a chave
    - O resultado é sempre uma `Configuration` nova

Limites explícitos:
    - Não aplica allow-list de chaves do daemon
    - Não valida orçamento de recursos
    - Não copia arquivos para o staging
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from . import keys
from .configuration import Configuration
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnknownProfileError,
    UnsupportedConfigFormatError,
)
from .resources import ConfigurationResources, locate_optional, locate_required
from .site_xml import read_site_file


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - Hadoop XML (.xml)
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios
        - Formatos não suportados geram erro explícito

    Args:
        path (Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix == ".xml":
        return dict(read_site_file(path))

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _flatten_scalars(data: Dict[str, Any], *, origin: Path) -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise InvalidConfigRootTypeError(
                f"Propriedade '{key}' em {origin.name} deve ser escalar, "
                f"recebido: {type(value).__name__}"
            )
        if isinstance(value, bool):
            flat[str(key)] = "true" if value else "false"
        elif value is None:
            flat[str(key)] = ""
        else:
            flat[str(key)] = str(value)
    return flat


def load_document(path: str | Path) -> Dict[str, Any]:
    """Carrega um documento YAML/JSON/XML cujo root é um mapa (sem achatamento)."""
    return _load_file(Path(path))


def load_base_configuration(resources: ConfigurationResources) -> Configuration:
    """
    Carrega a configuração base a partir dos arquivos do cluster.

    Política de resolução:
        - Todos os arquivos de `keys.DAEMON_CONFIGS` são obrigatórios
        - `keys.OPTIONAL_CONFIGS` são carregados quando presentes
        - A ordem de carregamento é a ordem declarada
        - Cada valor carrega o nome do arquivo como provenance

    Raises:
        MissingConfigResource: Se algum arquivo obrigatório não for localizável.
        MalformedSiteFileError: Se algum XML for estruturalmente inválido.
    """
    required = locate_required(resources, keys.DAEMON_CONFIGS)
    optional = locate_optional(resources, keys.OPTIONAL_CONFIGS)

    conf = Configuration()
    for name, path in list(required.items()) + list(optional.items()):
        conf = conf.with_values(read_site_file(path), source=name)
    return conf


def load_profile(path: Optional[str | Path], name: Optional[str]) -> Dict[str, str]:
    """
    Retorna as propriedades do profile nomeado.

    O arquivo de profiles é um mapa `nome -> {chave: valor}`. Sem nome de
    profile, retorna mapa vazio (o arquivo nem é lido).

    Raises:
        ConfigFileNotFoundError: Se o profile foi pedido mas o arquivo não existe.
        UnknownProfileError: Se o nome não existir no arquivo.
    """
    if not name:
        return {}
    if path is None:
        raise ConfigFileNotFoundError(f"Profile '{name}' solicitado sem arquivo de profiles")

    p = Path(path)
    profiles = _load_file(p)
    if name not in profiles:
        raise UnknownProfileError(
            f"Profile '{name}' não encontrado em {p.name}; disponíveis: {sorted(profiles)}"
        )

    selected = profiles[name] or {}
    if not isinstance(selected, dict):
        raise InvalidConfigRootTypeError(
            f"Profile '{name}' deve ser dict, recebido: {type(selected).__name__}"
        )
    return _flatten_scalars(selected, origin=p)

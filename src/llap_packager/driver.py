# src/llap_packager/driver.py
"""
Driver de ponta a ponta de uma invocação do packager.

Sequência de uma run:

    1. carrega a configuração base a partir dos arquivos do cluster
    2. monta as server properties (profile nomeado < property bag)
       e as escreve na base, respeitando a allow-list
    3. deriva o ResourceBudget das opções e o valida contra o mínimo
       do cluster (antes de qualquer escrita no staging)
    4. projeta o orçamento na camada direct-override e a aplica na base
    5. resolve a configuração autoritativa do daemon
    6. executa o assembly do staging directory

`main` traduz o resultado em código de saída:
    0 → sucesso
    1 → falha de empacotamento ou de configuração
    3 → exceção inesperada
"""

from __future__ import annotations

import traceback
from typing import Dict, Optional

import typer

from llap_packager.core.budget.budget import (
    ResourceBudget,
    apply_direct_overrides,
    direct_overrides_for,
)
from llap_packager.core.budget.validator import validate_budget
from llap_packager.core.config import keys
from llap_packager.core.config.errors import ConfigError
from llap_packager.core.config.loader import load_base_configuration, load_profile
from llap_packager.core.config.resolver import merge_server_properties, resolve
from llap_packager.core.exceptions import PackagerException
from llap_packager.environment.collaborators import Collaborators, local_collaborators
from llap_packager.options import PackageOptions
from llap_packager.packager import PackagingReport, assemble

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_UNEXPECTED = 3


def server_properties(options: PackageOptions) -> Dict[str, str]:
    """Profile nomeado por baixo, property bag por cima (bag vence)."""
    props = load_profile(options.profiles_file, options.profile)
    props.update(options.properties)
    return props


def budget_from(options: PackageOptions, *, allocator_direct: bool) -> ResourceBudget:
    return ResourceBudget(
        container_bytes=options.size,
        cache_bytes=options.cache,
        heap_bytes=options.xmx,
        executors=options.executors,
        allocator_direct=allocator_direct,
    )


def run(options: PackageOptions, env: Optional[Collaborators] = None) -> PackagingReport:
    """
    Executa uma invocação completa e retorna o relatório.

    Raises:
        PackagerException: Falhas de validação, preflight ou staging.
        ConfigError: Arquivos de configuração/profile inválidos.
    """
    if env is None:
        env = local_collaborators(
            conf_dirs=options.conf_dirs,
            artifacts_file=options.artifacts_file,
        )

    base = load_base_configuration(env.resources)

    profile_props = server_properties(options)
    merged = merge_server_properties(base, profile_props)
    conf = merged.configuration

    budget = budget_from(
        options,
        allocator_direct=conf.get_bool(keys.ALLOCATOR_DIRECT, keys.ALLOCATOR_DIRECT_DEFAULT),
    )
    validate_budget(budget, min_allocation_mb=conf.get_int(keys.MIN_ALLOCATION_MB))

    direct = direct_overrides_for(budget, instance_name=options.name)
    conf = apply_direct_overrides(conf, direct)

    resolved = resolve(conf, profile_props, direct, diagnostics=merged.diagnostics)
    return assemble(resolved, budget, options, env=env)


def _echo_error(exc: Exception) -> None:
    typer.echo(f"ERROR: {exc}", err=True)
    hint = getattr(exc, "hint", None)
    if hint:
        typer.echo(f"hint: {hint}", err=True)


def main(options: PackageOptions, env: Optional[Collaborators] = None) -> int:
    try:
        report = run(options, env)
    except (PackagerException, ConfigError) as e:
        _echo_error(e)
        return EXIT_FAILURE
    except Exception as e:
        _echo_error(e)
        typer.echo(traceback.format_exc(), err=True)
        return EXIT_UNEXPECTED

    for warning in report.warnings():
        typer.echo(f"WARN: {warning}", err=True)
    typer.echo(f"Package staged at {report.staging.root}")
    return EXIT_OK

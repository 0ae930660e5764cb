# src/llap_packager/cli.py
"""Comando `llap-package`: camada fina de CLI sobre `driver.main`."""

from __future__ import annotations

from typing import Dict, List, Optional

import typer

from llap_packager.core.config.sizes import parse_size
from llap_packager.driver import main
from llap_packager.options import UNSET, PackageOptions

app = typer.Typer(help="llap-package: stage a deployable LLAP daemon package")


def _size(value: Optional[str], flag: str) -> int:
    if value is None:
        return UNSET
    try:
        return parse_size(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=flag) from e


def _properties(pairs: Optional[List[str]]) -> Dict[str, str]:
    props: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected key=value, got '{pair}'", param_hint="--hiveconf")
        props[key.strip()] = value.strip()
    return props


@app.command()
def package(
    directory: str = typer.Option(..., "--directory", "-d", help="Staging directory to create"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Instance name (service hosts @name)"),
    size: Optional[str] = typer.Option(None, "--size", "-s", help="Container size, e.g. 8g"),
    cache: Optional[str] = typer.Option(None, "--cache", "-c", help="Cache size, e.g. 2g"),
    xmx: Optional[str] = typer.Option(None, "--xmx", help="Working memory size, e.g. 4g"),
    executors: int = typer.Option(UNSET, "--executors", "-e", help="Executors per instance"),
    java_home: Optional[str] = typer.Option(None, "--java-home", help="Java installation for the daemon"),
    aux_jars: Optional[str] = typer.Option(None, "--auxjars", help="Comma-separated extra jar paths"),
    aux_hbase: bool = typer.Option(False, "--auxhbase/--no-auxhbase", help="Stage the HBase storage handler"),
    hiveconf: Optional[List[str]] = typer.Option(None, "--hiveconf", help="key=value daemon property (repeatable)"),
    conf_dir: Optional[List[str]] = typer.Option(None, "--conf-dir", help="Cluster configuration directory (repeatable)"),
    profile: Optional[str] = typer.Option(None, "--profile", help="Named profile to apply"),
    profiles_file: Optional[str] = typer.Option(None, "--profiles-file", help="YAML/JSON file with named profiles"),
    artifacts_file: Optional[str] = typer.Option(None, "--artifacts-file", help="YAML/JSON library → artifact mapping"),
    home: Optional[str] = typer.Option(None, "--home", envvar="HIVE_HOME", help="Local installation root"),
) -> None:
    options = PackageOptions(
        directory=directory,
        name=name,
        size=_size(size, "--size"),
        cache=_size(cache, "--cache"),
        xmx=_size(xmx, "--xmx"),
        executors=executors,
        java_home=java_home,
        aux_jars=aux_jars,
        include_hbase=aux_hbase,
        properties=_properties(hiveconf),
        profile=profile,
        profiles_file=profiles_file,
        conf_dirs=tuple(conf_dir or ()),
        artifacts_file=artifacts_file,
        home=home,
    )
    code = main(options)
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":  # pragma: no cover
    app()

# src/llap_packager/core/config/site_xml.py
"""
Leitura e escrita de arquivos Hadoop XML (`*-site.xml`).

Formato:

    <configuration>
      <property>
        <name>hive.llap.daemon.num.executors</name>
        <value>4</value>
        <source>command-line direct</source>
      </property>
    </configuration>

Decisões arquiteturais:
    - Propriedades sem `<name>` são ignoradas; `<value>` ausente vira string vazia
    - A escrita é determinística: chaves em ordem lexicográfica
    - `<source>` é emitido quando há provenance conhecida
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, Dict, Mapping, Optional

from .errors import MalformedSiteFileError


def read_site_file(path: Path) -> Dict[str, str]:
    try:
        root = ET.parse(str(path)).getroot()
    except ET.ParseError as e:
        raise MalformedSiteFileError(f"XML inválido em {path}: {e}") from e

    if root.tag != "configuration":
        raise MalformedSiteFileError(
            f"Root de {path.name} deve ser <configuration>, recebido: <{root.tag}>"
        )

    props: Dict[str, str] = {}
    for prop in root.iter("property"):
        name = (prop.findtext("name") or "").strip()
        if not name:
            continue
        props[name] = (prop.findtext("value") or "").strip()
    return props


def render_site_xml(
    values: Mapping[str, str],
    sources: Optional[Mapping[str, str]] = None,
) -> bytes:
    root = ET.Element("configuration")
    for key in sorted(values):
        prop = ET.SubElement(root, "property")
        ET.SubElement(prop, "name").text = key
        ET.SubElement(prop, "value").text = str(values[key])
        source = (sources or {}).get(key)
        if source:
            ET.SubElement(prop, "source").text = source
    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def write_site_xml(
    stream: IO[bytes],
    values: Mapping[str, str],
    sources: Optional[Mapping[str, str]] = None,
) -> None:
    stream.write(render_site_xml(values, sources))

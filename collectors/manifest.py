"""Erzeugt die Liste der geladenen Komponenten fuer den Log-Kopf."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from pydantic import TypeAdapter, ValidationError

from models.errors import LogCollectionError
from models.types import ComponentDescriptor

MANIFEST_HEADER = "Loaded mods:\n"
NO_ASSEMBLIES = "(no assemblies)"

_COMPONENT_LIST = TypeAdapter(List[ComponentDescriptor])


def build_manifest(components: Iterable[ComponentDescriptor]) -> str:
    """Rendert eine Zeile pro Komponente in Ladereihenfolge.

    Format: `Name[Override]: Asm(1.0), Other(2.0)` bzw. `Name: (no assemblies)`.
    """

    lines = [MANIFEST_HEADER]
    for component in components:
        line = component.name
        if component.override_version is not None:
            line += f"[{component.override_version}]: "
        else:
            line += ": "
        if component.assemblies:
            line += ", ".join(f"{assembly.name}({assembly.version})" for assembly in component.assemblies)
        else:
            line += NO_ASSEMBLIES
        lines.append(line + "\n")
    return "".join(lines)


def load_components(path: str | Path) -> list[ComponentDescriptor]:
    """Liest Komponentenbeschreibungen aus einer JSON-Datei.

    Raises:
        LogCollectionError: Wenn die Datei fehlt oder nicht dem Schema entspricht.
    """

    try:
        raw = Path(path).read_text(encoding="utf-8")
        return _COMPONENT_LIST.validate_python(json.loads(raw))
    except (OSError, ValueError, ValidationError) as error:
        raise LogCollectionError(f"Komponentenliste ungueltig: {path}") from error


__all__ = ["MANIFEST_HEADER", "NO_ASSEMBLIES", "build_manifest", "load_components"]

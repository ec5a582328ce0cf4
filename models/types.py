"""Gemeinsame Pydantic-Typen fuer Manifest, Bundle und Upload-Ergebnis."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoadedAssembly(BaseModel):
    """Geladene Binaer-Einheit einer Komponente samt Version."""

    name: str
    version: str


class ComponentDescriptor(BaseModel):
    """Metadaten einer geladenen Erweiterung in Ladereihenfolge."""

    name: str
    override_version: str | None = None
    assemblies: list[LoadedAssembly] = Field(default_factory=list)


class LogBundle(BaseModel):
    """Pro Publish-Versuch erzeugtes Paket aus Zeitstempel, Manifest und Log.

    Attributes:
        timestamp: Kopfzeile mit Datum und Uhrzeit des Uploads.
        active_components: Gerendertes Manifest der geladenen Komponenten.
        log_body: Bereits redigierter Loginhalt.
    """

    timestamp: str
    active_components: str
    log_body: str

    def render(self) -> str:
        """Setzt das Bundle zum hochzuladenden Text zusammen."""

        return "".join((self.timestamp, self.active_components, "\n", self.log_body))


class GistResponse(BaseModel):
    """Rohantwort des Gist-Endpunkts (Statuszeile plus Body)."""

    status_line: str
    body: str = ""


__all__ = ["LoadedAssembly", "ComponentDescriptor", "LogBundle", "GistResponse"]

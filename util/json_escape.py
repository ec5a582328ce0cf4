"""JSON-Kodierung des Gist-Payloads.

Der Payload wird als strukturiertes Dokument mit `json` serialisiert. Zusaetzlich
wird `/` als `\\/` maskiert, damit Pfade im Log identisch zum bisherigen
Upload-Format kodiert werden. Steuerzeichen ohne Kurzform erscheinen als
`\\u00XX`."""

from __future__ import annotations

import json
from typing import Any, Optional


def _dumps(document: Any) -> str:
    # `/` kommt in JSON-Ausgabe nur innerhalb von Strings vor.
    return json.dumps(document, ensure_ascii=False, separators=(",", ":")).replace("/", "\\/")


def escape_json_string(value: Optional[str]) -> str:
    """Maskiert einen String fuer die Einbettung in ein JSON-Stringliteral.

    Returns:
        Den maskierten Inhalt ohne umschliessende Anfuehrungszeichen;
        `""` fuer leere Eingaben oder `None`.
    """

    if not value:
        return ""
    return _dumps(value)[1:-1]


def build_gist_document(description: str, filename: str, content: str) -> dict[str, Any]:
    """Erzeugt das Dokument fuer die Gist-Erstellung."""

    return {
        "description": description,
        "public": True,
        "files": {filename: {"content": content}},
    }


def encode_gist_payload(description: str, filename: str, content: str) -> str:
    """Serialisiert das Gist-Dokument mit den Maskierungsregeln von `escape_json_string`."""

    return _dumps(build_gist_document(description, filename, content))


__all__ = ["build_gist_document", "encode_gist_payload", "escape_json_string"]

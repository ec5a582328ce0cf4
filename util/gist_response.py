"""Extrahiert die Gist-URL aus der Rohantwort der API."""

from __future__ import annotations

import re
from typing import Optional

_HTML_URL_PATTERN = re.compile(r'"html_url"\s*:\s*"(https://gist\.github\.com/\w+)"')


def extract_gist_url(response_body: str) -> Optional[str]:
    """Liefert den Wert von `html_url` oder `None`, wenn kein gueltiger Treffer existiert."""

    if not response_body:
        return None
    match = _HTML_URL_PATTERN.search(response_body)
    if match is None:
        return None
    return match.group(1)


__all__ = ["extract_gist_url"]

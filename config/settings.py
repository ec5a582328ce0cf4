"""Liest Konfigurationswerte aus der .env-Datei und stellt sie zentral bereit.

Das Modul nutzt `python-dotenv`, damit Publisher, CLI und API mit identischen
Werten arbeiten. Alle Konstanten werden beim Import berechnet."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv  # type: ignore[import]

CONFIG_DIR = Path(__file__).resolve().parent
ROOT_ENV_FILE = CONFIG_DIR.parent / ".env"
EXAMPLE_ENV_FILE = CONFIG_DIR / ".env.example"

# Prioritaet: Projektweite .env > Beispieldatei (nur als Fallback).
if ROOT_ENV_FILE.exists():
    load_dotenv(ROOT_ENV_FILE)
elif EXAMPLE_ENV_FILE.exists():
    load_dotenv(EXAMPLE_ENV_FILE)


def _as_bool(value: str | None, default: bool = False) -> bool:
    """Interpretation einer Umgebungsvariable als boolescher Wert."""

    if value is None:
        return default
    return str(value).lower() in {"1", "true", "yes", "on"}


# --- Gist-Endpunkt ---
GIST_API_URL = os.getenv("GIST_API_URL", "https://api.github.com/gists")
GIST_AUTH_TOKEN = os.getenv("GIST_AUTH_TOKEN", "")
GIST_USER_AGENT = os.getenv("GIST_USER_AGENT", "log_publisher_uploader")
GIST_DESCRIPTION = os.getenv("GIST_DESCRIPTION", "Output log published using log-publisher")
GIST_FILENAME = os.getenv("GIST_FILENAME", "output_log.txt")

# Zertifikatspruefung ist bewusst abschaltbar, da Host-Umgebungen oft defekte CA-Stores haben.
GIST_INSECURE_SKIP_VERIFY = _as_bool(os.getenv("GIST_INSECURE_SKIP_VERIFY"), default=True)
GIST_MOCK_UPLOAD = _as_bool(os.getenv("GIST_MOCK_UPLOAD", "false"))

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
DEFAULT_TIMEOUT = REQUEST_TIMEOUT

# --- Quellen fuer Log und Manifest ---
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "")
INSTALL_DIR = os.getenv("INSTALL_DIR", "")
COMPONENTS_FILE = os.getenv("COMPONENTS_FILE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

"""Zentrale Konfiguration (siehe `config.settings`)."""

from .settings import (
    COMPONENTS_FILE,
    DEFAULT_TIMEOUT,
    GIST_API_URL,
    GIST_AUTH_TOKEN,
    GIST_DESCRIPTION,
    GIST_FILENAME,
    GIST_INSECURE_SKIP_VERIFY,
    GIST_MOCK_UPLOAD,
    GIST_USER_AGENT,
    INSTALL_DIR,
    LOG_FILE_PATH,
    LOG_LEVEL,
    REQUEST_TIMEOUT,
)

__all__ = [
    "COMPONENTS_FILE",
    "DEFAULT_TIMEOUT",
    "GIST_API_URL",
    "GIST_AUTH_TOKEN",
    "GIST_DESCRIPTION",
    "GIST_FILENAME",
    "GIST_INSECURE_SKIP_VERIFY",
    "GIST_MOCK_UPLOAD",
    "GIST_USER_AGENT",
    "INSTALL_DIR",
    "LOG_FILE_PATH",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
]

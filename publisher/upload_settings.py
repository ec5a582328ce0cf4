"""Verbindungsparameter fuer den Gist-Upload.

Die Defaults stammen aus `config`; das Token wird nie im Quelltext hinterlegt."""

from __future__ import annotations

from pydantic import BaseModel, Field

from config import (
    DEFAULT_TIMEOUT,
    GIST_API_URL,
    GIST_AUTH_TOKEN,
    GIST_DESCRIPTION,
    GIST_FILENAME,
    GIST_INSECURE_SKIP_VERIFY,
    GIST_MOCK_UPLOAD,
    GIST_USER_AGENT,
)

SUCCESS_STATUS_LINE = "201 Created"


class UploadSettings(BaseModel):
    """Kapselt Endpunkt, Zugangsdaten und TLS-Verhalten eines Uploads.

    Attributes:
        api_url: Endpunkt zur Gist-Erstellung.
        auth_token: Zugangstoken fuer den Authorization-Header.
        user_agent: Fester User-Agent der Anfrage.
        description: Beschreibung des erzeugten Gists.
        filename: Dateiname des Logs innerhalb des Gists.
        insecure_skip_verify: Deaktiviert die Zertifikatspruefung.
        timeout: Timeout der Anfrage in Sekunden.
        mock_upload: Simuliert den Upload ohne Netzwerkzugriff.
    """

    api_url: str = GIST_API_URL
    auth_token: str = Field(default=GIST_AUTH_TOKEN, repr=False)
    user_agent: str = GIST_USER_AGENT
    description: str = GIST_DESCRIPTION
    filename: str = GIST_FILENAME
    insecure_skip_verify: bool = GIST_INSECURE_SKIP_VERIFY
    timeout: float = DEFAULT_TIMEOUT
    mock_upload: bool = GIST_MOCK_UPLOAD

    def to_headers(self) -> dict[str, str]:
        """Liefert die Header fuer die Gist-Anfrage."""

        return {
            "Authorization": f"Bearer {self.auth_token}",
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }


__all__ = ["SUCCESS_STATUS_LINE", "UploadSettings"]

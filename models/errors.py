"""Fehlertypen fuer die Datensammlung vor dem Upload."""

from __future__ import annotations


class LogPublisherError(Exception):
    """Basisklasse fuer alle Fehler des Log-Publishers."""


class LogCollectionError(LogPublisherError):
    """Log oder Manifest konnten nicht gelesen werden."""


class LogNotFoundError(LogCollectionError, FileNotFoundError):
    """Es existiert kein Logpfad oder die Datei fehlt."""


__all__ = ["LogPublisherError", "LogCollectionError", "LogNotFoundError"]

"""Modelldatentypen fuer gemeinsam genutzte Strukturen."""

from .errors import LogCollectionError, LogNotFoundError, LogPublisherError
from .types import ComponentDescriptor, GistResponse, LoadedAssembly, LogBundle

__all__ = [
    "ComponentDescriptor",
    "GistResponse",
    "LoadedAssembly",
    "LogBundle",
    "LogCollectionError",
    "LogNotFoundError",
    "LogPublisherError",
]

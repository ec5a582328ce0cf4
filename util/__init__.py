"""Hilfsfunktionen fuer Payload-Kodierung und Antwortauswertung."""

from .gist_response import extract_gist_url
from .json_escape import build_gist_document, encode_gist_payload, escape_json_string

__all__ = ["build_gist_document", "encode_gist_payload", "escape_json_string", "extract_gist_url"]

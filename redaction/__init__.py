"""Redaktionsregeln fuer den Loginhalt vor dem Upload."""

from .rules import (
    apply_redactions,
    normalize_install_dir,
    redact_home_directory,
    redact_host_identifier,
    redact_install_paths,
    redact_player_connect_info,
    redact_renderer_info,
    redact_span,
)

__all__ = [
    "apply_redactions",
    "normalize_install_dir",
    "redact_home_directory",
    "redact_host_identifier",
    "redact_install_paths",
    "redact_player_connect_info",
    "redact_renderer_info",
    "redact_span",
]

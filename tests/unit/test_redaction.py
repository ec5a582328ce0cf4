"""Tests fuer die Redaktionsregeln."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from redaction import rules
from redaction.rules import (
    apply_redactions,
    normalize_install_dir,
    redact_home_directory,
    redact_host_identifier,
    redact_install_paths,
    redact_player_connect_info,
    redact_renderer_info,
    redact_span,
)


def test_redact_span_keeps_markers_and_replaces_content() -> None:
    text = "head START secret content END tail"

    result = redact_span(text, "START", "END", "[X]")

    assert result == "head START[X]END tail"


@pytest.mark.parametrize(
    "text",
    ["", "nothing to see", "only START here", "only END here", "END before START"],
)
def test_redact_span_without_marker_pair_is_identity(text: str) -> None:
    assert redact_span(text, "START", "END", "[X]") == text


def test_redact_span_uses_end_marker_after_start() -> None:
    text = "END early START secret END late"

    assert redact_span(text, "START", "END", "[X]") == "END early START[X]END late"


def test_renderer_info_is_redacted() -> None:
    log = "GfxDevice: opengl\nRenderer: GeForce 1080\nVendor: NVIDIA\nBegin MonoManager ReloadAssembly\n"

    result = redact_renderer_info(log)

    assert result == "GfxDevice: [Renderer information redacted]\nBegin MonoManager ReloadAssembly\n"
    assert redact_renderer_info(result) == result


def test_player_connect_info_is_redacted() -> None:
    log = "PlayerConnection initialized from /home/alice (debug = 0)\n10.0.0.5\nInitialize engine version: 2019.2\n"

    result = redact_player_connect_info(log)

    assert result == "PlayerConnection [PlayerConnect information redacted]\nInitialize engine version: 2019.2\n"


def test_host_identifier_is_redacted_to_line_end() -> None:
    log = "before\nSteam_SetMinidumpSteamID:  76561198000000000\nafter\n"

    assert redact_host_identifier(log) == "before\n[Steam Id redacted]\nafter\n"


def test_host_identifier_without_terminator_runs_to_end() -> None:
    log = "before\nSteam_SetMinidumpSteamID: 7656"

    assert redact_host_identifier(log) == "before\n[Steam Id redacted]"


def test_install_paths_with_mixed_separators() -> None:
    install_dir = "C:\\Games\\App"
    log = "Loading C:\\Games\\App\\Mods and C:/Games/App/Data"

    result = redact_install_paths(log, install_dir, sep="\\")

    assert result == "Loading [Install_dir]\\Mods and [Install_dir]/Data"
    assert redact_install_paths(result, install_dir, sep="\\") == result


def test_install_paths_posix_is_idempotent() -> None:
    log = "Mono path[0] = '/opt/app/Data/Managed'"

    once = redact_install_paths(log, "/opt/app", sep="/")

    assert once == "Mono path[0] = '[Install_dir]/Data/Managed'"
    assert redact_install_paths(once, "/opt/app", sep="/") == once


def test_install_paths_without_install_dir_is_identity() -> None:
    assert redact_install_paths("/opt/app/log", None) == "/opt/app/log"
    assert redact_install_paths("/opt/app/log", "") == "/opt/app/log"


def test_home_directory_redacted_on_linux() -> None:
    assert redact_home_directory("/home/alice/.config", "/home/alice", "Linux") == "[Home_dir]/.config"


@pytest.mark.parametrize(
    ("home", "system"),
    [("/home/alice", "Windows"), (None, "Linux"), ("", "Darwin")],
)
def test_home_directory_noop_cases(home: str | None, system: str) -> None:
    assert redact_home_directory("/home/alice/.config", home, system) == "/home/alice/.config"


def test_apply_redactions_runs_all_rules() -> None:
    log = (
        "Log file contents:\n"
        "Mono path[0] = '/opt/app/Data/Managed'\n"
        "PlayerConnection initialized from /home/alice/.local\n"
        "Initialize engine version: 2019.2\n"
        "GfxDevice: opengl\nRenderer: GPU\n"
        "Begin MonoManager ReloadAssembly\n"
        "Config at /home/alice/.config\n"
        "Steam_SetMinidumpSteamID:  7656119\n"
    )

    result = apply_redactions(log, install_dir="/opt/app", home="/home/alice", system="Linux", sep="/")

    assert "/opt/app" not in result
    assert "/home/alice" not in result
    assert "Renderer: GPU" not in result
    assert "7656119" not in result
    assert "[Home_dir]/.config" in result
    assert "PlayerConnection [PlayerConnect information redacted]\nInitialize engine" in result
    assert apply_redactions(result, install_dir="/opt/app", home="/home/alice", system="Linux", sep="/") == result


def test_apply_redactions_empty_input() -> None:
    assert apply_redactions("", install_dir="/opt/app", home="/home/alice", system="Linux") == ""


def test_apply_redactions_reads_environment_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/bob")
    monkeypatch.setattr(rules.platform, "system", lambda: "Linux")

    assert apply_redactions("/home/bob/x", install_dir=None) == "[Home_dir]/x"


def test_install_paths_trailing_separator_is_normalized() -> None:
    log = "Running from /opt/app\nMono path[0] = '/opt/app/Data/Managed'"

    result = redact_install_paths(log, "/opt/app/", sep="/")

    assert result == "Running from [Install_dir]\nMono path[0] = '[Install_dir]/Data/Managed'"


def test_install_paths_relative_dir_is_resolved(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    log = f"Loading {os.getcwd()}/app/Mods"

    assert redact_install_paths(log, "app", sep="/") == "Loading [Install_dir]/Mods"


def test_install_paths_windows_trailing_separator() -> None:
    log = "Loading C:\\Games\\App\\Mods and C:/Games/App/Data"

    result = redact_install_paths(log, "C:\\Games\\App\\", sep="\\")

    assert result == "Loading [Install_dir]\\Mods and [Install_dir]/Data"


@pytest.mark.parametrize(("install_dir", "sep"), [("/", "/"), ("C:\\", "\\")])
def test_normalize_install_dir_rejects_root(install_dir: str, sep: str) -> None:
    assert normalize_install_dir(install_dir, sep) == ""

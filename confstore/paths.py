"""Resolve where an application's configuration files live."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from .errors import ApplicationNameError


def extension_of(relative_path: str | PurePath) -> str:
    """Return the text after the last ``.`` of the file name, or ``""``."""
    name = PurePath(relative_path).name
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def config_root() -> Path:
    """Return the per-user configuration root for the current platform."""
    if os.name == "nt":
        base = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base)
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    home = os.getenv("HOME")
    return (Path(home) if home else Path.home()) / ".config"


def resolve_app_dir(application_name: str) -> Path:
    """Return the absolute configuration directory for ``application_name``.

    ``%APPDATA%/<name>`` on Windows, ``$XDG_CONFIG_HOME/<name>`` when that
    variable is set and non-empty, ``$HOME/.config/<name>`` otherwise.
    """
    if not application_name:
        raise ApplicationNameError("Application name is not defined.")
    return (config_root().expanduser() / application_name).absolute()


def resolve_path(application_name: str, relative_path: str | PurePath) -> Path:
    """Join ``relative_path`` under the app directory, dropping any anchor."""
    relative = PurePath(relative_path)
    if relative.anchor:
        relative = PurePath(*relative.parts[1:])
    return resolve_app_dir(application_name) / relative

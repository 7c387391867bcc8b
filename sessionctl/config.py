"""
Configuration paths and environment switches
"""

from __future__ import annotations

import os
import typing as ty

from xdg import BaseDirectory

PACKAGE_NAME = "sessionctl"
ENV_PREFIX = "SESSIONCTL_"

__all__ = (
    "get_config_file",
    "get_env",
    "has_capability",
    "save_config_file",
)


def has_capability(cap: str, environ: ty.Mapping[str, str] | None = None) -> bool:
    """Check is @cap capability is not disabled by environment variable
    SESSIONCTL_NO_<cap>"""
    environ = os.environ if environ is None else environ
    return not bool(environ.get(f"{ENV_PREFIX}NO_{cap}"))


def get_env(
    name: str, default: str = "", environ: ty.Mapping[str, str] | None = None
) -> str:
    """Get value of SESSIONCTL_<name> environment variable or default"""
    environ = os.environ if environ is None else environ
    return environ.get(f"{ENV_PREFIX}{name}", default)


def get_config_file(filename: str, package: str = PACKAGE_NAME) -> str | None:
    """Return path to @package/@filename if it exists anywhere in the config
    paths, else return None"""
    return ty.cast(
        ty.Union[str, None], BaseDirectory.load_first_config(package, filename)
    )


def save_config_file(filename: str) -> str | None:
    """Return filename in the XDG config home directory, where the directory
    is guaranteed to exist."""
    if direc := BaseDirectory.save_config_path(PACKAGE_NAME):
        return os.path.join(direc, filename)

    return None

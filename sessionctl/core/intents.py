"""
Supported session-control intents and their static metadata.
"""

from __future__ import annotations

import enum
import typing as ty
from gettext import gettext as _

__all__ = (
    "CommandSpec",
    "Intent",
    "check_specs",
    "make_spec",
)


class Intent(enum.Enum):
    """Session action; the value is used to derive configuration keys and
    must never change."""

    LOCK = "lock"
    LOGOUT = "logout"
    SUSPEND = "suspend"
    HIBERNATE = "hibernate"
    REBOOT = "reboot"
    POWEROFF = "poweroff"


class CommandSpec(ty.NamedTuple):
    id: Intent
    enabled_key: str
    title_key: str
    command_key: str
    # candidate icon names, first available wins
    icon_names: tuple[str, ...]
    default_title: str
    description: str
    default_command: str


class _Meta(ty.NamedTuple):
    icon_name: str
    title: str
    description: str


# display order
_METADATA: ty.Final[dict[Intent, _Meta]] = {
    Intent.LOCK: _Meta(
        "system-lock-screen", _("Lock"), _("Lock the session")
    ),
    Intent.LOGOUT: _Meta(
        "system-log-out", _("Logout"), _("Quit the session")
    ),
    Intent.SUSPEND: _Meta(
        "system-suspend", _("Suspend"), _("Suspend to memory")
    ),
    Intent.HIBERNATE: _Meta(
        "system-suspend-hibernate", _("Hibernate"), _("Suspend to disk")
    ),
    Intent.REBOOT: _Meta(
        "system-reboot", _("Reboot"), _("Restart the machine")
    ),
    Intent.POWEROFF: _Meta(
        "system-shutdown", _("Poweroff"), _("Shut down the machine")
    ),
}


def make_spec(intent: Intent, default_command: str) -> CommandSpec:
    """Create the catalog entry for @intent.

    >>> make_spec(Intent.LOCK, "xflock4").command_key
    'command_lock'
    """
    meta = _METADATA[intent]
    name = intent.value
    return CommandSpec(
        id=intent,
        enabled_key=f"{name}_enabled",
        title_key=f"title_{name}",
        command_key=f"command_{name}",
        icon_names=(meta.icon_name, name),
        default_title=meta.title,
        description=meta.description,
        default_command=default_command,
    )


def check_specs(specs: ty.Sequence[CommandSpec]) -> None:
    """Raise ValueError when an intent is listed twice or configuration
    keys collide."""
    ids = [spec.id for spec in specs]
    if len(set(ids)) != len(ids):
        raise ValueError(f"duplicated intents in catalog: {ids}")

    keys = [
        key
        for spec in specs
        for key in (spec.enabled_key, spec.title_key, spec.command_key)
    ]
    if len(set(keys)) != len(keys):
        raise ValueError(f"configuration keys are not unique: {keys}")

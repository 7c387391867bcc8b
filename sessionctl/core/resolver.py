"""
Default session commands for the running platform and desktop.

On Apple systems a fixed table is used.  On Unix-like systems each entry of
XDG_CURRENT_DESKTOP is tried in order and the first desktop that knows a
command for the intent wins; this is decided independently for every intent,
so one desktop may provide the lock command while suspend falls through to
the next entry or to the generic commands.

Everything here is a pure function of `Environment`; nothing is executed.
"""

from __future__ import annotations

import enum
import os
import sys
import typing as ty

from sessionctl import config
from sessionctl.core.intents import Intent

__all__ = (
    "APPLE_COMMANDS",
    "DESKTOP_ALIASES",
    "DESKTOP_COMMANDS",
    "Environment",
    "GENERIC_COMMANDS",
    "Platform",
    "available_intents",
    "desktop_for",
    "detect_platform",
    "resolve",
)

CommandMap = ty.Mapping[Intent, str]


class Platform(enum.Enum):
    APPLE = "apple"
    UNIX = "unix"
    OTHER = "other"


_UNIX_PLATFORMS: ty.Final = (
    "linux",
    "freebsd",
    "openbsd",
    "netbsd",
    "dragonfly",
    "sunos",
    "aix",
    "cygwin",
    "gnu",
)


def detect_platform(name: str = sys.platform) -> Platform:
    """Map a `sys.platform` value to `Platform`.

    >>> detect_platform("darwin")
    <Platform.APPLE: 'apple'>
    >>> detect_platform("linux")
    <Platform.UNIX: 'unix'>
    >>> detect_platform("win32")
    <Platform.OTHER: 'other'>
    """
    if name == "darwin":
        return Platform.APPLE

    if name.startswith(_UNIX_PLATFORMS):
        return Platform.UNIX

    return Platform.OTHER


class Environment(ty.NamedTuple):
    """Platform and ordered desktop identifiers the commands are resolved
    for."""

    platform: Platform
    desktops: tuple[str, ...] = ()

    @classmethod
    def from_environ(
        cls,
        environ: ty.Mapping[str, str] | None = None,
        platform: Platform | None = None,
    ) -> Environment:
        """Read the desktop list from SESSIONCTL_DESKTOP, or from
        XDG_CURRENT_DESKTOP when it is not set."""
        environ = os.environ if environ is None else environ
        desktops = config.get_env("DESKTOP", environ=environ) or environ.get(
            "XDG_CURRENT_DESKTOP", ""
        )
        return cls(
            platform=platform or detect_platform(),
            desktops=split_desktops(desktops),
        )


def split_desktops(value: str) -> tuple[str, ...]:
    """Split colon-separated desktop list, dropping empty entries.

    >>> split_desktops("ubuntu:GNOME")
    ('ubuntu', 'GNOME')
    >>> split_desktops("")
    ()
    """
    return tuple(filter(None, value.split(":")))


APPLE_COMMANDS: ty.Final[CommandMap] = {
    Intent.LOCK: "pmset displaysleepnow",
    Intent.LOGOUT: """osascript -e 'tell app "System Events" to log out'""",
    Intent.SUSPEND: """osascript -e 'tell app "System Events" to sleep'""",
    Intent.REBOOT: """osascript -e 'tell app "System Events" to restart'""",
    Intent.POWEROFF: (
        """osascript -e 'tell app "System Events" to shut down'"""
    ),
}

# XDG_CURRENT_DESKTOP entry -> key in DESKTOP_COMMANDS; matched exactly
DESKTOP_ALIASES: ty.Final[ty.Mapping[str, str]] = {
    "GNOME": "gnome",
    "Unity": "gnome",
    "Pantheon": "gnome",
    "KDE": "kde",
    "kde-plasma": "kde",
    "X-Cinnamon": "cinnamon",
    "Cinnamon": "cinnamon",
    "MATE": "mate",
    "XFCE": "xfce",
    "LXQt": "lxqt",
}

_KDE_SHUTDOWN = (
    "dbus-send --session --type=method_call --dest=org.kde.Shutdown "
    "/Shutdown org.kde.Shutdown."
)

# Suspend and hibernate are missing where the desktop leaves them to the
# power daemon; those intents fall through to the next desktop entry.
DESKTOP_COMMANDS: ty.Final[ty.Mapping[str, CommandMap]] = {
    "gnome": {
        Intent.LOCK: (
            "dbus-send --type=method_call --dest=org.gnome.ScreenSaver "
            "/org/gnome/ScreenSaver org.gnome.ScreenSaver.Lock"
        ),
        Intent.LOGOUT: "gnome-session-quit --logout --no-prompt",
        Intent.REBOOT: "gnome-session-quit --reboot --no-prompt",
        Intent.POWEROFF: "gnome-session-quit --power-off --no-prompt",
    },
    "kde": {
        Intent.LOCK: (
            "dbus-send --type=method_call --dest=org.freedesktop.ScreenSaver "
            "/ScreenSaver org.freedesktop.ScreenSaver.Lock"
        ),
        Intent.LOGOUT: _KDE_SHUTDOWN + "logout",
        Intent.REBOOT: _KDE_SHUTDOWN + "logoutAndReboot",
        Intent.POWEROFF: _KDE_SHUTDOWN + "logoutAndShutdown",
    },
    "cinnamon": {
        Intent.LOCK: "cinnamon-screensaver-command --lock",
        Intent.LOGOUT: "cinnamon-session-quit --logout",
        Intent.REBOOT: "cinnamon-session-quit --reboot",
        Intent.POWEROFF: "cinnamon-session-quit --power-off",
    },
    "mate": {
        Intent.LOCK: "mate-screensaver-command --lock",
        Intent.LOGOUT: "mate-session-save --logout-dialog",
        Intent.SUSPEND: (
            'sh -c "mate-screensaver-command --lock && systemctl suspend -i"'
        ),
        Intent.HIBERNATE: (
            'sh -c "mate-screensaver-command --lock && systemctl hibernate -i"'
        ),
        Intent.REBOOT: "mate-session-save --shutdown-dialog",
        Intent.POWEROFF: "mate-session-save --shutdown-dialog",
    },
    "xfce": {
        Intent.LOCK: "xflock4",
        Intent.LOGOUT: "xfce4-session-logout --logout",
        Intent.SUSPEND: "xfce4-session-logout --suspend",
        Intent.HIBERNATE: "xfce4-session-logout --hibernate",
        Intent.REBOOT: "xfce4-session-logout --reboot",
        Intent.POWEROFF: "xfce4-session-logout --halt",
    },
    "lxqt": {
        Intent.LOCK: "lxqt-leave --lockscreen",
        Intent.LOGOUT: "lxqt-leave --logout",
        Intent.SUSPEND: "lxqt-leave --suspend",
        Intent.HIBERNATE: "lxqt-leave --hibernate",
        Intent.REBOOT: "lxqt-leave --reboot",
        Intent.POWEROFF: "lxqt-leave --shutdown",
    },
}


def _not_set(action: str, icon_name: str) -> str:
    return f'notify-send "Error." "{action} command is not set." --icon={icon_name}'


# There is no portable way to log out, reboot or power off without the
# session manager, so those only tell the user to configure a command.
GENERIC_COMMANDS: ty.Final[CommandMap] = {
    Intent.LOCK: "xdg-screensaver lock",
    Intent.LOGOUT: _not_set("Logout", "system-log-out"),
    Intent.SUSPEND: "systemctl suspend -i",
    Intent.HIBERNATE: "systemctl hibernate -i",
    Intent.REBOOT: _not_set("Reboot", "system-reboot"),
    Intent.POWEROFF: _not_set("Poweroff", "system-shutdown"),
}

GENERIC: ty.Final = "generic"


def available_intents(platform: Platform) -> list[Intent]:
    """Intents that make sense on @platform, in display order.

    >>> Intent.HIBERNATE in available_intents(Platform.APPLE)
    False
    """
    if platform == Platform.APPLE:
        return [intent for intent in Intent if intent != Intent.HIBERNATE]

    return list(Intent)


def _lookup(intent: Intent, env: Environment) -> tuple[str | None, str]:
    """Return (source, command); source is the desktop key, GENERIC, or
    None when nothing is known."""
    if env.platform == Platform.APPLE:
        if command := APPLE_COMMANDS.get(intent):
            return "apple", command

        return None, ""

    if env.platform != Platform.UNIX:
        return None, ""

    for desktop in env.desktops:
        key = DESKTOP_ALIASES.get(desktop)
        if key and (command := DESKTOP_COMMANDS[key].get(intent)):
            return key, command

    return GENERIC, GENERIC_COMMANDS[intent]


def resolve(intent: Intent, env: Environment) -> str:
    """Return the default command for @intent in @env, or empty string
    when there is none.

    >>> resolve(Intent.LOCK, Environment(Platform.UNIX, ("XFCE",)))
    'xflock4'
    >>> resolve(Intent.SUSPEND, Environment(Platform.UNIX, ("GNOME",)))
    'systemctl suspend -i'
    >>> resolve(Intent.LOCK, Environment(Platform.OTHER, ("XFCE",)))
    ''
    """
    return _lookup(intent, env)[1]


def desktop_for(intent: Intent, env: Environment) -> str | None:
    """Return name of the command table that provides the command for
    @intent: desktop key, "apple", "generic" or None.

    >>> desktop_for(Intent.SUSPEND, Environment(Platform.UNIX, ("GNOME", "MATE")))
    'mate'
    """
    return _lookup(intent, env)[0]

"""
Desktop notifications over D-Bus (org.freedesktop.Notifications).
"""

from __future__ import annotations

import typing as ty

from sessionctl import config, version
from sessionctl.support import pretty

__all__ = ("show_notification",)

_SERVICE_NAME = "org.freedesktop.Notifications"
_OBJECT_PATH = "/org/freedesktop/Notifications"
_IFACE_NAME = "org.freedesktop.Notifications"


def _get_notification_obj() -> ty.Any:
    "we will activate it over d-bus (start if not running)"
    # pylint: disable=import-outside-toplevel
    import dbus

    try:
        bus = dbus.SessionBus()
        proxy_obj = bus.get_object(_SERVICE_NAME, _OBJECT_PATH)
    except dbus.DBusException as exc:
        pretty.print_debug(__name__, exc)
        return None

    return proxy_obj


def show_notification(
    title: str, text: str = "", icon_name: str = "", nid: int = 0
) -> int | None:
    """
    @nid: If not 0, the id of the notification to replace.

    Returns the id of the displayed notification, or None when
    notifications are disabled (SESSIONCTL_NO_NOTIFY) or unavailable.
    """
    if not config.has_capability("NOTIFY"):
        return None

    if not (notifications := _get_notification_obj()):
        return None

    # pylint: disable=import-outside-toplevel
    import dbus

    hints = {
        "desktop-entry": version.DESKTOP_ID,
    }
    try:
        rid = notifications.Notify(
            version.PACKAGE_NAME,
            nid,
            icon_name,
            title,
            text,
            (),
            hints,
            -1,
            dbus_interface=_IFACE_NAME,
        )
    except dbus.DBusException:
        pretty.print_exc(__name__)
        return None

    return int(rid)

"""This module implement `SettingsController`, the key-value store that keeps
per-intent user state: enabled flags, title and command overrides.

Values are kept as given (str or bool) in memory and persisted as strings in
a `configparser` file in the XDG config directory.  Missing keys are never
written; readers always pass the default they want.

Every change emits ``value-changed`` detailed by the key, so listeners can
connect to e.g. ``value-changed::command_lock`` only.
"""

from __future__ import annotations

import configparser
import locale
import os
import typing as ty

from gi.repository import GObject

from sessionctl import config
from sessionctl.support import pretty
from sessionctl.support.types import StoreValue

__all__ = (
    "ConfigparserAdapter",
    "SettingsController",
)


def _strbool(value: ty.Any, default: bool = False) -> bool:
    """Coerce bool from string value or bool

    >>> _strbool("yes"), _strbool("False"), _strbool("maybe", True)
    (True, False, True)
    """
    if isinstance(value, bool):
        return value

    value = str(value).lower()
    if value in ("no", "false", "0"):
        return False

    if value in ("yes", "true", "1"):
        return True

    return default


def _convert(value: StoreValue, default: StoreValue) -> StoreValue:
    """Convert stored `value` to the type of `default`."""
    if value is None:
        return default

    if isinstance(default, bool):
        return _strbool(value, default)

    if isinstance(default, str):
        return str(value)

    return value


def _override_encoding(name: str) -> str | None:
    """Return a new encoding name if we want to override it, else return None.

    This is used to “upgrade” ascii to UTF-8 since the latter is a superset.
    """
    if name.lower() in ("ascii", "ANSI_X3.4-1968".lower()):
        return "UTF-8"

    return None


class ConfigparserAdapter(pretty.OutputMixin):
    """Load and save flat key-value settings in one configparser section."""

    config_filename = "sessionctl.cfg"
    section = "Commands"

    def __init__(self, config_path: str | None = None) -> None:
        # explicit path (tests, --config); else looked up in XDG dirs
        self.config_path = config_path
        self.encoding = _override_encoding(locale.getpreferredencoding())
        self.output_debug("Using", self.encoding)

    def _load_path(self) -> str | None:
        if self.config_path:
            return self.config_path

        return config.get_config_file(self.config_filename)

    def _save_path(self) -> str | None:
        if self.config_path:
            return self.config_path

        return config.save_config_file(self.config_filename)

    def load(self) -> dict[str, str]:
        config_file = self._load_path()
        if not config_file or not os.path.exists(config_file):
            return {}

        parser = configparser.RawConfigParser()
        try:
            parser.read(config_file, encoding=self.encoding)
        except (OSError, UnicodeDecodeError, configparser.Error) as exc:
            self.output_error(
                f"Error reading configuration file {config_file}: {exc}"
            )
            return {}

        if not parser.has_section(self.section):
            return {}

        return dict(parser.items(self.section))

    def save(self, values: ty.Mapping[str, StoreValue]) -> None:
        config_path = self._save_path()
        if not config_path:
            self.output_info("Unable to save settings, can't find config dir")
            return

        self.output_debug("Saving config", config_path)
        parser = configparser.RawConfigParser()
        parser.add_section(self.section)
        for key, value in sorted(values.items()):
            if value is not None:
                parser.set(self.section, key, str(value))

        ## Write to tmp then rename over for it to be atomic
        temp_config_path = f"{config_path}.{os.getpid()}"
        try:
            with open(temp_config_path, "w", encoding="UTF_8") as out:
                parser.write(out)

            os.rename(temp_config_path, config_path)
        except OSError:
            self.output_error("Error saving configuration to", config_path)
            self.output_exc()
            if os.path.exists(temp_config_path):
                os.unlink(temp_config_path)


class SettingsController(GObject.GObject, pretty.OutputMixin):  # type: ignore
    """Key-value store with change notification.

    Signals:

        value-changed: key, value (None when the key was removed)
    """

    __gtype_name__ = "SessionSettingsController"

    def __init__(self, adapter: ConfigparserAdapter | None = None) -> None:
        GObject.GObject.__init__(self)
        self._adapter = adapter or ConfigparserAdapter()
        self._values: dict[str, StoreValue] = dict(self._adapter.load())
        self.output_debug("config", self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: StoreValue = None) -> StoreValue:
        """Return value for @key converted to the type of @default, or
        @default when it is not set."""
        return _convert(self._values.get(key), default)

    def set(self, key: str, value: StoreValue) -> None:
        if value is None:
            self.remove(key)
            return

        if self._values.get(key) == value:
            return

        self.output_debug("set", key, value)
        self._values[key] = value
        self._save_config()
        self.emit(f"value-changed::{key.lower()}", key, value)

    def remove(self, key: str) -> None:
        if key not in self._values:
            return

        self.output_debug("remove", key)
        del self._values[key]
        self._save_config()
        self.emit(f"value-changed::{key.lower()}", key, None)

    def _save_config(self) -> None:
        self._adapter.save(self._values)


# Arguments: Key, Value
# Detailed by 'key' in lowercase
GObject.signal_new(
    "value-changed",
    SettingsController,
    GObject.SignalFlags.RUN_LAST | GObject.SignalFlags.DETAILED,
    GObject.TYPE_BOOLEAN,
    (GObject.TYPE_STRING, GObject.TYPE_PYOBJECT),
)


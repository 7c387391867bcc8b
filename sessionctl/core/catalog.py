"""
The ordered set of session commands together with the user's enable flags
and overrides.

Static data (`CommandSpec`) is created once from an `Environment`; user state
lives in a key-value store and is read on every call.
"""

from __future__ import annotations

import typing as ty

from sessionctl.core import resolver
from sessionctl.core.intents import CommandSpec, Intent, check_specs, make_spec
from sessionctl.support import pretty
from sessionctl.support.types import StoreValue

__all__ = (
    "Catalog",
    "EditorRow",
    "Store",
    "build_specs",
)


class Store(ty.Protocol):
    """Key-value configuration store used by `Catalog`."""

    def get(self, key: str, default: StoreValue = None) -> StoreValue:
        ...

    def set(self, key: str, value: StoreValue) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class EditorRow(ty.NamedTuple):
    """State for one row of a settings editor: the stored override texts
    are empty when unset, placeholders come from `spec`."""

    spec: CommandSpec
    enabled: bool
    title: str
    command: str


def build_specs(env: resolver.Environment) -> tuple[CommandSpec, ...]:
    """Create catalog entries for @env in display order, resolving the
    default commands."""
    specs = tuple(
        make_spec(intent, resolver.resolve(intent, env))
        for intent in resolver.available_intents(env.platform)
    )
    check_specs(specs)
    return specs


class Catalog(pretty.OutputMixin):
    def __init__(
        self,
        specs: ty.Iterable[CommandSpec],
        store: Store,
    ) -> None:
        self._specs = tuple(specs)
        check_specs(self._specs)
        self._by_id = {spec.id: spec for spec in self._specs}
        self.store = store

    @classmethod
    def for_environment(
        cls, env: resolver.Environment, store: Store
    ) -> Catalog:
        return cls(build_specs(env), store)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, intent: Intent) -> bool:
        return intent in self._by_id

    def list(self) -> tuple[CommandSpec, ...]:
        return self._specs

    def get(self, intent: Intent) -> CommandSpec:
        """Return spec for @intent; raise KeyError when @intent is not
        available on this platform."""
        return self._by_id[intent]

    def _get_str(self, key: str) -> str:
        value = str(self.store.get(key, "") or "")
        return value if value.strip() else ""

    def is_enabled(self, intent: Intent) -> bool:
        spec = self.get(intent)
        return bool(self.store.get(spec.enabled_key, True))

    def set_enabled(self, intent: Intent, enabled: bool) -> None:
        """Enable or disable @intent.  Disabling also drops the title and
        command overrides, so enabling again starts from the defaults."""
        spec = self.get(intent)
        self.output_debug("set_enabled", intent, enabled)
        self.store.set(spec.enabled_key, enabled)
        if not enabled:
            self.store.remove(spec.title_key)
            self.store.remove(spec.command_key)

    def effective_title(self, intent: Intent) -> str:
        spec = self.get(intent)
        return self._get_str(spec.title_key) or spec.default_title

    def set_title(self, intent: Intent, title: str) -> None:
        """Store title override; empty @title removes it."""
        self._set_override(self.get(intent).title_key, title)

    def effective_command(self, intent: Intent) -> str:
        spec = self.get(intent)
        return self._get_str(spec.command_key) or spec.default_command

    def set_command(self, intent: Intent, command: str) -> None:
        """Store command override; empty @command removes it."""
        self._set_override(self.get(intent).command_key, command)

    def _set_override(self, key: str, value: str) -> None:
        if value and value.strip():
            self.store.set(key, value)
        else:
            self.store.remove(key)

    def enabled_specs(self) -> list[CommandSpec]:
        return [spec for spec in self._specs if self.is_enabled(spec.id)]

    def editor_rows(self) -> ty.Iterator[EditorRow]:
        for spec in self._specs:
            yield EditorRow(
                spec,
                self.is_enabled(spec.id),
                self._get_str(spec.title_key),
                self._get_str(spec.command_key),
            )

"""
Session command items for the host launcher.
"""

from __future__ import annotations

import typing as ty
from gettext import gettext as _

from gi.repository import GObject

from sessionctl import launch
from sessionctl.core.catalog import Catalog
from sessionctl.core.intents import CommandSpec, Intent
from sessionctl.obj.base import Action, Leaf, Source
from sessionctl.support import pretty
from sessionctl.ui import notification

__all__ = (
    "IndexItem",
    "ItemAction",
    "Perform",
    "SessionLeaf",
    "SessionSource",
)


class ItemAction(ty.NamedTuple):
    label: str
    description: str
    trigger: ty.Callable[[], ty.Any]


class IndexItem(ty.NamedTuple):
    """Plain representation of a leaf for search indexes."""

    id: str
    text: str
    subtext: str
    icon_names: tuple[str, ...]
    actions: list[ItemAction]


class SessionLeaf(Leaf):
    """The represented object is the Intent; the command is looked up in
    the catalog when run, so a changed override is used immediately."""

    def __init__(self, spec: CommandSpec, catalog: Catalog) -> None:
        super().__init__(spec.id, catalog.effective_title(spec.id))
        self.spec = spec
        self.catalog = catalog

    @property
    def index_id(self) -> str:
        return self.spec.default_title

    def repr_key(self) -> ty.Any:
        return self.spec.id.value

    def get_description(self) -> str:
        return self.spec.description

    def get_icon_name(self) -> str:
        return self.spec.icon_names[0]

    def get_icon_names(self) -> tuple[str, ...]:
        return self.spec.icon_names

    def get_actions(self) -> ty.Iterator[Action]:
        yield Perform(self.spec.default_title, self.spec.description)

    def get_command(self) -> str:
        return self.catalog.effective_command(self.spec.id)

    def run(self) -> bool:
        """Launch the command detached.  Without a command, tell the user
        instead."""
        if not (command := self.get_command()):
            pretty.print_error(__name__, "No command for", self.spec.id.value)
            notification.show_notification(
                _("Error."),
                _("%s command is not set.") % self.name,
                self.get_icon_name(),
            )
            return False

        return launch.spawn_shell_command(command)


class Perform(Action):
    """Run the command of a SessionLeaf"""

    def __init__(self, name: str = _("Run"), description: str = "") -> None:
        super().__init__(name)
        self._description = description

    def get_description(self) -> str:
        return self._description

    def activate(self, leaf: Leaf) -> ty.Any:
        assert isinstance(leaf, SessionLeaf)
        return leaf.run()


class SessionSource(Source):
    """One leaf per enabled intent, in catalog order.  When the catalog
    store emits ``value-changed`` the items are rebuilt on next use and
    @changed_callback (if any) is called."""

    def __init__(
        self,
        catalog: Catalog,
        changed_callback: ty.Callable[[SessionSource], None] | None = None,
    ) -> None:
        super().__init__(_("Session Commands"))
        self.catalog = catalog
        self._changed_callback = changed_callback
        self._signal_id: int | None = None

    def initialize(self) -> None:
        store = self.catalog.store
        if isinstance(store, GObject.GObject):
            self._signal_id = store.connect(
                "value-changed", self._on_value_changed
            )

    def finalize(self) -> None:
        if self._signal_id is not None:
            self.catalog.store.disconnect(self._signal_id)  # type: ignore
            self._signal_id = None

    def _on_value_changed(
        self, _store: ty.Any, key: str, value: ty.Any
    ) -> None:
        self.output_debug("value changed", key, value)
        self.mark_for_update()
        if self._changed_callback:
            self._changed_callback(self)

    def get_items(self) -> ty.Iterator[SessionLeaf]:
        for spec in self.catalog.enabled_specs():
            yield SessionLeaf(spec, self.catalog)

    def get_description(self) -> str:
        return _("Lock, log out, suspend or shut down")

    def get_icon_name(self) -> str:
        return "system-shutdown"

    def find(self, intent: Intent) -> SessionLeaf | None:
        for leaf in self.get_leaves():
            if leaf.object == intent:
                assert isinstance(leaf, SessionLeaf)
                return leaf

        return None

    def as_index_items(self) -> list[IndexItem]:
        items = []
        for leaf in self.get_leaves():
            assert isinstance(leaf, SessionLeaf)
            actions = [
                ItemAction(
                    str(act),
                    act.get_description() or "",
                    lambda act=act, leaf=leaf: act.activate(leaf),
                )
                for act in leaf.get_actions()
            ]
            items.append(
                IndexItem(
                    leaf.index_id,
                    str(leaf),
                    leaf.get_description(),
                    leaf.get_icon_names(),
                    actions,
                )
            )

        return items

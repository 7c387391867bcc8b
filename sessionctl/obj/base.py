"""
Base objects handed to the host launcher: Leaf, Action and Source.

The host only needs a name, a description, icon names and a way to run the
item, so icons are plain freedesktop icon names rather than loaded images.
"""

from __future__ import annotations

import typing as ty

from sessionctl.support import pretty

__all__ = [
    "Action",
    "Leaf",
    "SessionObject",
    "Source",
]


class SessionObject:
    """Base class for the data model

    This class provides a way to get at an object's:

    * name with str()
    * description with get_description
    * icon names with get_icon_names, most specific first

    @fallback_icon_name is a class attribute for the last fallback
    icon; it must always be accessible.
    """

    fallback_icon_name: str = "system-run"

    def __init__(self, name: str | None = None) -> None:
        self.name: str = name or self.__class__.__name__

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        if key := self.repr_key():
            return f"<{self.__module__}.{self.__class__.__name__} {key}>"

        return f"<{self.__module__}.{self.__class__.__name__}>"

    def repr_key(self) -> ty.Any:
        """Return an object whose str() will be used in the __repr__,
        self is returned by default."""
        return self

    def get_description(self) -> str | None:
        """Return a description of the specific item."""
        return None

    def get_icon_name(self) -> str:
        """Return icon name. All items should have at least a generic icon name
        to return."""
        return self.fallback_icon_name

    def get_icon_names(self) -> tuple[str, ...]:
        """Candidate icon names; the first one available in the icon
        theme should be used."""
        return (self.get_icon_name(), self.fallback_icon_name)


class Leaf(SessionObject):
    """Base class for objects

    Leaf.object is the represented object (data)
    """

    def __init__(self, obj: ty.Any, name: str) -> None:
        """Represented object @obj and its @name"""
        super().__init__(name)
        self.object = obj

    def get_actions(self) -> ty.Iterable[Action]:
        """Default (builtin) actions for this Leaf"""
        return ()


class Action(SessionObject):
    """Base class for all actions."""

    def repr_key(self) -> ty.Any:
        """by default, actions of one type are all the same"""
        return None

    def activate(self, leaf: Leaf) -> ty.Any:
        """Use this action with @leaf"""
        raise NotImplementedError


class Source(SessionObject, pretty.OutputMixin):
    """Source: Data provider for the host launcher

    Subclasses implement `get_items`; `get_leaves` caches the result until
    `mark_for_update` is called.
    """

    def __init__(self, name: str) -> None:
        SessionObject.__init__(self, name)
        self.cached_items: list[Leaf] | None = None

    def repr_key(self) -> ty.Any:
        return None

    def initialize(self) -> None:
        """Called when a Source enters the host's system for real."""

    def finalize(self) -> None:
        """Called before a source is deactivated."""

    def get_items(self) -> ty.Iterable[Leaf]:
        """Internal method to compute and return the needed items."""
        return []

    def mark_for_update(self) -> None:
        """Mark source as changed; items are computed again on next use."""
        self.cached_items = None

    def get_leaves(self) -> list[Leaf]:
        """Return a list of leaves, from cache when possible."""
        if self.cached_items is None:
            self.cached_items = list(self.get_items())
            self.output_debug(f"Loaded {len(self.cached_items)} items")

        return self.cached_items

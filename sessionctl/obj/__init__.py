"""
This file import most common objects, so can they can be imported
directly from sessionctl.obj
"""

from sessionctl.obj.base import Action, Leaf, SessionObject, Source
from sessionctl.obj.session import (
    IndexItem,
    ItemAction,
    Perform,
    SessionLeaf,
    SessionSource,
)

__all__ = (
    "Action",
    "IndexItem",
    "ItemAction",
    "Leaf",
    "Perform",
    "SessionLeaf",
    "SessionObject",
    "SessionSource",
    "Source",
)

"""Lazily fetched, paginated views over remote sub-collections.

A collection is bound to one parent entity (the tracker root, a project, an
issue) and fetches its items on demand. Each ``list()`` or ``query()`` call is
an independent round trip; the collection only remembers what it has already
seen so callers can inspect it without another request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from .errors import NotFound

P = TypeVar("P")
T = TypeVar("T")

logger = logging.getLogger(__name__)


def _item_id(item) -> str | None:
    return getattr(item, "id", None)


class RemoteCollection(ABC, Generic[P, T]):
    def __init__(self, parent: P, name: str):
        self.parent = parent
        self.name = name
        self._fetched: dict[str, T] = {}

    @abstractmethod
    def _list(self) -> list[T]: ...

    @abstractmethod
    def _query(self, filter_text: str, start: int, page_size: int) -> list[T]: ...

    def list(self) -> list[T]:
        """Fetch every item of the collection."""
        items = self._list()
        self._remember(items)
        return items

    def query(self, filter_text: str, start: int, page_size: int) -> list[T]:
        """Fetch one window of at most ``page_size`` items from ``start`` (0-based)."""
        items = self._query(filter_text or "", max(int(start), 0), int(page_size))
        items = items[: max(int(page_size), 0)]
        self._remember(items)
        return items

    def get(self, item_id: str) -> T:
        """Fetch a single item by id, raising ``NotFound`` when absent."""
        for item in self.list():
            if _item_id(item) == item_id:
                return item
        raise NotFound(self.name, item_id)

    def fetched(self) -> list[T]:
        return list(self._fetched.values())

    def _remember(self, items: list[T]) -> None:
        for item in items:
            key = _item_id(item)
            if key is not None:
                self._fetched[key] = item

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, parent={self.parent!r})"


class CommandCollection(RemoteCollection[P, T]):
    """Collection whose fetches are delegated to commands supplied by the client."""

    def __init__(
        self,
        parent: P,
        name: str,
        *,
        list_command: Callable[[], list[T]],
        query_command: Callable[[str, int, int], list[T]] | None = None,
        item_command: Callable[[str], T] | None = None,
    ):
        super().__init__(parent, name)
        self._list_command = list_command
        self._query_command = query_command
        self._item_command = item_command

    def _list(self) -> list[T]:
        return list(self._list_command())

    def _query(self, filter_text: str, start: int, page_size: int) -> list[T]:
        if self._query_command is None:
            # No server-side windowing: slice the full listing
            logger.debug("Collection %s has no query command; slicing full list", self.name)
            return self._list()[start : start + page_size]
        return list(self._query_command(filter_text, start, page_size))

    def get(self, item_id: str) -> T:
        if self._item_command is None:
            return super().get(item_id)
        item = self._item_command(item_id)
        self._remember([item])
        return item

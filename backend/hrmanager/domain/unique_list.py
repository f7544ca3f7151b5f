"""Uniqueness-constrained repository with a live, read-only filtered view."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Generic, Iterable, Iterator, TypeVar, overload

from ..core.errors import DuplicateEntityError, EntityNotFoundError

T = TypeVar("T")

Predicate = Callable[[T], bool]
Listener = Callable[[], None]


def match_all(_: object) -> bool:
    return True


class FilteredList(Sequence, Generic[T]):
    """Projection of a ``UniqueList`` through its current predicate.

    The view always reads through to the owning repository, so holders of it
    see every later mutation and filter change. It cannot be modified
    directly.
    """

    def __init__(self, source: UniqueList[T]):
        self._source = source
        self._listeners: list[Listener] = []

    def _visible(self) -> list[T]:
        predicate = self._source.predicate
        return [item for item in self._source if predicate(item)]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._visible()[index]

    def __len__(self) -> int:
        return len(self._visible())

    def __iter__(self) -> Iterator[T]:
        return iter(self._visible())

    def __repr__(self) -> str:
        return f"FilteredList({self._visible()!r})"

    def add_listener(self, listener: Listener) -> None:
        """Call ``listener`` after every mutation or filter change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _read_only(self, *args, **kwargs):
        raise TypeError("filtered view is read-only")

    __setitem__ = _read_only
    __delitem__ = _read_only
    __iadd__ = _read_only
    append = _read_only
    extend = _read_only
    insert = _read_only
    remove = _read_only
    pop = _read_only
    clear = _read_only
    sort = _read_only
    reverse = _read_only


class UniqueList(Generic[T]):
    """Ordered collection in which no two items are the same under ``is_same``.

    ``is_same`` is the entity's weak identity, so two entities that differ
    only in fields outside it still count as duplicates.
    """

    def __init__(self, is_same: Callable[[T, T], bool], label: str):
        self._items: list[T] = []
        self._is_same = is_same
        self.label = label
        self.predicate: Predicate = match_all
        self.filtered = FilteredList(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self.label}, {self._items!r})"

    def as_list(self) -> list[T]:
        return list(self._items)

    def contains(self, item: T) -> bool:
        return any(self._is_same(existing, item) for existing in self._items)

    def find(self, predicate: Predicate) -> T | None:
        return next((item for item in self._items if predicate(item)), None)

    def add(self, item: T) -> None:
        if self.contains(item):
            raise DuplicateEntityError(self.label)
        self._items.append(item)
        self.filtered._notify()

    def set_entity(self, target: T, edited: T) -> None:
        """Replace ``target`` with ``edited`` in place."""
        index = self._index_of(target)
        if not self._is_same(target, edited) and self.contains(edited):
            raise DuplicateEntityError(self.label)
        self._items[index] = edited
        self.filtered._notify()

    def remove(self, item: T) -> None:
        self._items.pop(self._index_of(item))
        self.filtered._notify()

    def set_all(self, items: Iterable[T]) -> None:
        items = list(items)
        for i, item in enumerate(items):
            if any(self._is_same(item, other) for other in items[i + 1:]):
                raise DuplicateEntityError(self.label)
        self._items = items
        self.filtered._notify()

    def notify_changed(self) -> None:
        """Tell view listeners that a stored item changed in place."""
        self.filtered._notify()

    def update_filter(self, predicate: Predicate | None) -> None:
        self.predicate = predicate or match_all
        self.filtered._notify()

    def _index_of(self, item: T) -> int:
        for index, existing in enumerate(self._items):
            if existing is item or existing == item:
                return index
        raise EntityNotFoundError(self.label)

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Bag (multiset) backed by a singly linked list.

Elements are kept in insertion order and compared by value, so they do not need
to be hashable. Lookups are linear scans. The container does no locking and
takes no snapshot while iterating: mutating a bag during a traversal has
unspecified effect on that traversal.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Callable, Collection, Iterable, Iterator, MutableSequence
from typing import Any, Generic, TypeVar

from .config import load_bag_settings
from .errors import HashNotSupportedError, IndexOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_equals(left: Any, right: Any) -> bool:
    return left == right


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T):
        self.value = value
        self.next: _Node[T] | None = None


class LinkedBag(Collection[T], Generic[T]):
    """Insertion-ordered multiset with O(1) append and linear lookup."""

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        *,
        equals: Callable[[T, T], bool] | None = None,
    ):
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._count = 0
        self._equals = equals or _default_equals
        if iterable is not None:
            for item in iterable:
                self.add(item)

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_read_only(self) -> bool:
        return False

    def add(self, item: T) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def clear(self) -> None:
        logger.debug("Clearing bag with %d item(s)", self._count)
        self._head = None
        self._tail = None
        self._count = 0

    def contains(self, item: T) -> bool:
        current = self._head
        while current is not None:
            if self._equals(current.value, item):
                return True
            current = current.next
        return False

    def copy_to(self, destination: MutableSequence[T] | None, start_index: int = 0) -> None:
        """
        Copy every element, in insertion order, into ``destination`` at ``start_index``.

        The destination is never resized and slots outside the written range are left
        alone. Arguments are validated before the first write, so a rejected call does
        not modify the destination.
        """
        if destination is None:
            logger.debug("copy_to rejected: destination is None")
            raise InvalidArgumentError("destination must not be None")
        if start_index < 0:
            logger.debug("copy_to rejected: negative start_index %d", start_index)
            raise IndexOutOfRangeError(f"start_index must be non-negative, got {start_index}")
        available = len(destination) - start_index
        if available < self._count:
            logger.debug("copy_to rejected: %d slot(s) available for %d item(s)", available, self._count)
            raise InvalidArgumentError(
                f"destination has {max(available, 0)} slot(s) from index {start_index}, "
                f"{self._count} required"
            )

        index = start_index
        current = self._head
        while current is not None:
            destination[index] = current.value
            index += 1
            current = current.next

    def remove(self, item: T) -> bool:
        """Remove the first occurrence of ``item``; return False if it is absent."""
        previous: _Node[T] | None = None
        current = self._head
        while current is not None:
            if self._equals(current.value, item):
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                if current is self._tail:
                    self._tail = previous
                self._count -= 1
                return True
            previous = current
            current = current.next
        return False

    def iterate(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def to_list(self) -> list[T]:
        return list(self.iterate())

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        """
        Multiset equality: same elements with the same multiplicities, in any order.

        Bags built with different equality strategies never compare equal.
        """
        if not isinstance(other, LinkedBag):
            return NotImplemented
        if self is other:
            return True
        if self._equals is not other._equals:
            return False
        if self._count != other._count:
            return False
        unmatched = other.to_list()
        for value in self.iterate():
            for index, candidate in enumerate(unmatched):
                if self._equals(value, candidate):
                    del unmatched[index]
                    break
            else:
                return False
        return True

    def __hash__(self) -> int:
        raise HashNotSupportedError("LinkedBag is mutable and does not support hashing")

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        limit = load_bag_settings().repr_limit
        shown = []
        for index, value in enumerate(self.iterate()):
            if index >= limit:
                shown.append("...")
                break
            shown.append(repr(value))
        return f"LinkedBag([{', '.join(shown)}])"


__all__ = ["LinkedBag"]

"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list that keeps references to its head and tail."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> None:
        """Insert content at the start of the list."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append content at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each content to delete first when given."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func raises, the contents already produced are passed to delete
        before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
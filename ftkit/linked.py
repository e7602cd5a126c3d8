"""A singly linked list with a tail pointer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list of arbitrary contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_back(self, content: Any) -> None:
        """Append ``content`` at the end."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_front(self, content: Any) -> None:
        """Insert ``content`` at the start."""
        self._head = _Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, calling ``delete`` on each content in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.content)
            node = node.next

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def last(self) -> Any:
        """Return the content of the last node."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` returns None, the contents mapped so far are passed to
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function returned None")
            result.add_back(mapped)
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
"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that grows and shrinks at its front."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        if items is not None:
            for item in reversed(list(items)):
                self.push_front(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        self.head = Node(content, self.head)
        self._size += 1
        return self.head

    def pop_front(self) -> Any:
        """Remove the first element and return its content."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        self._size -= 1
        return node.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on every element's content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding *func* applied to every element, in order."""
        return LinkedList(func(node.content) for node in self._nodes())

    def clear(self) -> None:
        """Remove every element."""
        while self.head is not None:
            self.pop_front()

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
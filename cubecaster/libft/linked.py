"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, values: Optional[Any] = None) -> None:
        self.head: Optional[Node] = None
        for value in values or ():
            self.add_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, value: Any) -> Node:
        """Put ``value`` at the start of the list and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def add_back(self, value: Any) -> Node:
        """Put ``value`` at the end of the list and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing each value to ``delete`` first when given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.add_back(func(value))
        except Exception:
            result.clear(delete)
            raise
        return result
"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node(Generic[T]):
    """One link of the list: its content and the node that follows it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append content at the back and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Deleter = None) -> T:
        """Remove the first node and return its content.

        The content is handed to delete, when one is given, before it is
        returned. An empty list raises IndexError.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, handing each content to delete in order."""
        while self.head is not None:
            self.pop_front(delete)

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U], delete: Deleter = None) -> "LinkedList[U]":
        """Return a new list of func applied to every content.

        If func raises, the contents already produced are handed to delete
        and the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result
"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a list: its content and the link that follows it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list that keeps its first and last links."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first link, or None when the list is empty."""
        return self._head

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the front and return its new link."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the end and return its new link."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """The last link, or None when the list is empty."""
        return self._tail

    def clear(self, deleter: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every link, handing each content to ``deleter`` first, in order."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if deleter is not None:
                deleter(node.content)
            node = following

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, from front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to every content."""
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
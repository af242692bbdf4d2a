"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the start and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], object] | None) -> None:
        """Hand every non-None content to ``delete`` and empty the list.

        Without ``delete`` the list is left as it is.
        """
        if self.head is None or delete is None:
            return
        for node in list(self._nodes()):
            if node.content is not None:
                delete(node.content)
        self.head = None

    def for_each(self, f: Callable[[Any], object] | None) -> None:
        """Call ``f`` on each content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any] | None,
        delete: Callable[[Any], object] | None,
    ) -> LinkedList | None:
        """A new list of ``f(content)`` for each content.

        Returns None when the list is empty or either function is missing.
        If ``f`` fails, the contents already made are handed to ``delete``
        and the error is raised again.
        """
        if self.head is None or f is None or delete is None:
            return None
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result
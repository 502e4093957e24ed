"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list held by its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    @staticmethod
    def _require_node(node: object) -> Node:
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        return node

    def push_front(self, node: Node) -> None:
        """Make node the first of the list; any chain it carried is replaced."""
        node = self._require_node(node)
        node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Attach node, with any chain following it, after the last node."""
        node = self._require_node(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def delete_node(self, node: Node, delete: Deleter = None) -> None:
        """Unlink node from the list and hand its content to delete.

        Raises ValueError when node is not part of the list.
        """
        node = self._require_node(node)
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                if delete is not None:
                    delete(current.content)
                return
            previous = current
        raise ValueError("node is not in this list")

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, handing every content to delete in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def iterate(self, f: Callable[[Any], object]) -> None:
        """Call f on the content of every node, first to last."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list holding f(content) for every node.

        If f raises, the contents already produced are handed to delete and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(Node(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result
"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """One link of the list."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list; iterating yields the contents from the head."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> LinkedList:
        """A list holding the items in order."""
        result = cls()
        tail: ListNode | None = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result

    def nodes(self) -> Iterator[ListNode]:
        """The nodes from the head."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def push_front(self, content: Any) -> ListNode:
        """Add content at the head and return its node."""
        self.head = ListNode(content, self.head)
        return self.head

    def push_back(self, content: Any) -> ListNode:
        """Add content at the end and return its node."""
        node = ListNode(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> ListNode | None:
        """The last node, or None for an empty list."""
        last = None
        for last in self.nodes():
            pass
        return last

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every content in order."""
        for content in self:
            func(content)

    def remove_first(self, delete: Callable[[Any], object] | None = None) -> Any:
        """Unlink the head, pass its content to delete if given, and return the content."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to delete in order if given."""
        while self.head is not None:
            self.remove_first(delete)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """A new list of func applied to every content.

        If func raises, the contents already made are passed to delete and
        the error propagates.
        """
        result = LinkedList()
        tail: ListNode | None = None
        try:
            for content in self:
                node = ListNode(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result
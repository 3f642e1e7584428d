"""A minimal singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any = None
    next: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        """Yield this node and every node after it, in order."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.next


def lstnew(content: Any) -> Node:
    """Return a detached node holding *content*."""
    return Node(content)


def lstadd(head: Node | None, node: Node | None) -> Node | None:
    """Put *node* in front of the list at *head* and return the new head.

    When *node* is None the list is left as it was.
    """
    if node is None:
        return head
    node.next = head
    return node


def lstdelone(node: Node | None, delete: Callable[[Any], object] | None) -> None:
    """Hand the content of *node* to *delete* and detach the node."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lstdel(head: Node | None, delete: Callable[[Any], object] | None) -> Node | None:
    """Delete every node of the list, returning the new (empty) head.

    Without a *delete* callable nothing happens and *head* is returned.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node = following
    return None


def lstiter(head: Node | None, func: Callable[[Node], object] | None) -> None:
    """Call *func* on each node of the list, in order."""
    if head is None or func is None:
        return
    for node in head:
        func(node)


def lstmap(head: Node | None, func: Callable[[Node], Node | None] | None) -> Node | None:
    """Build a new list from the nodes that *func* returns for each node.

    If *func* returns None for a node that is followed by others, the whole
    result is None.
    """
    if head is None or func is None:
        return None
    first = func(head)
    tail = first
    node = head.next
    while node is not None:
        if tail is None:
            return None
        tail.next = func(node)
        tail = tail.next
        node = node.next
    return first
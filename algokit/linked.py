"""Singly linked lists and a few in-place list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; empty input gives ``None``."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode.from_values({list(self)!r})"


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways. An empty list is not."""
    if head is None:
        return False
    values = list(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list this way")
    node.val = successor.val
    node.next = successor.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink so nodes at odd positions come first, then those at even ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head
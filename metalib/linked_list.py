"""A singly linked list of integers."""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Node:
    """One cell of a linked list."""

    data: int
    next: "Node | None" = None


class LinkedList:
    """A singly linked list that grows at its head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, data: int) -> Node:
        """Insert ``data`` at the head and return the new head node."""
        self.head = Node(data, self.head)
        return self.head

    def __iter__(self) -> Iterator[int]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def dump(self, stream: TextIO | None = None) -> None:
        """Write every value on its own line, followed by a blank line."""
        out = stream or sys.stdout
        for data in self:
            out.write(f"data == {data}\n")
        out.write("\n")
from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")
    def __init__(self, v: T):
        self.value: T = v
        self.prev: Optional["_Node[T]"] = None
        self.next: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """Append-only doubly-linked list that is also its own single-pass iterator.

    Iterating the list consumes a cursor stored on the list itself, so only
    one traversal can be in flight at a time. Use `values()` for a
    traversal that leaves the cursor alone.
    """

    def __init__(self, values: Optional[Iterable[T]] = None):
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._cursor: Optional[_Node[T]] = None
        self._size: int = 0
        if values is not None:
            # copying another list must not consume its cursor
            if isinstance(values, DoublyLinkedList):
                values = values.values()
            for v in values:
                self.append(v)

    # ---- basics ----
    def empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    # ---- insertion ----
    def append(self, v: T) -> None:
        n = _Node(v)
        if self._tail is None:
            self._head = self._tail = self._cursor = n
        else:
            self._tail.next = n
            n.prev = self._tail
            self._tail = n
            # an exhausted cursor picks up from the new node
            if self._cursor is None:
                self._cursor = n
        self._size += 1

    # ---- lookup ----
    def _find(self, v: T) -> Optional[_Node[T]]:
        n = self._head
        while n is not None:
            if n.value == v:
                return n
            n = n.next
        return None

    def contains(self, v: T) -> bool:
        return self._find(v) is not None

    def __contains__(self, v: object) -> bool:
        return self.contains(v)

    # ---- access ----
    def front(self) -> T:
        if self._head is None:
            raise IndexError("front from empty list")
        return self._head.value

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back from empty list")
        return self._tail.value

    # ---- iteration ----
    def __iter__(self) -> "DoublyLinkedList[T]":
        return self

    def __next__(self) -> T:
        n = self._cursor
        if n is None:
            raise StopIteration
        # None once the tail has been handed out
        self._cursor = n.next
        return n.value

    def _nodes(self) -> Iterator[_Node[T]]:
        n = self._head
        while n is not None:
            yield n
            n = n.next

    def values(self) -> Iterator[T]:
        """Fresh forward traversal; does not move the shared cursor."""
        for n in self._nodes():
            yield n.value

    # ---- utils ----
    def to_list(self, reverse: bool = False) -> List[T]:
        out: List[T] = []
        if reverse:
            n = self._tail
            while n is not None:
                out.append(n.value)
                n = n.prev
        else:
            n = self._head
            while n is not None:
                out.append(n.value)
                n = n.next
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

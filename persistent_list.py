"""
Persistent List

An immutable singly-linked list with two shapes, Empty and Node, plus the
structural-recursion combinators over it: folds, map, reverse, append,
concat, drop, init and friends.

Nodes are never mutated after construction, so a tail may be shared by any
number of lists. Every traversal here is an explicit loop unless its name
ends in ``_recursive``; those use one Python frame per element and raise
RecursionError once a list outgrows ``sys.getrecursionlimit()``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T", covariant=True)


# ============================================================================
# Data type
# ============================================================================

@dataclass(frozen=True)
class Empty:
    """The zero-length list."""

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        return "Empty"


@dataclass(frozen=True, eq=False)
class Node(Generic[T]):
    """A non-empty list cell: one element and the rest of the list."""
    head: T
    tail: "PersistentList[T]"

    def __iter__(self) -> Iterator[T]:
        cur = self
        while isinstance(cur, Node):
            yield cur.head
            cur = cur.tail

    def __bool__(self) -> bool:
        return True

    # Generated __eq__/__repr__ would recurse once per node
    def __eq__(self, other):
        if not isinstance(other, (Node, Empty)):
            return NotImplemented
        left, right = self, other
        while isinstance(left, Node) and isinstance(right, Node):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return isinstance(left, Empty) and isinstance(right, Empty)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        parts = []
        count = 0
        for item in self:
            parts.append(f"Node({item!r}, ")
            count += 1
        return "".join(parts) + "Empty" + ")" * count


PersistentList = Union[Empty, Node[T]]

EMPTY = Empty()


# ============================================================================
# Construction
# ============================================================================

def empty() -> "PersistentList[Any]":
    """Return the canonical empty list."""
    return EMPTY


def cons(head: A, tail: "PersistentList[A]") -> "PersistentList[A]":
    return Node(head, tail)


def of(items: Iterable[A]) -> "PersistentList[A]":
    """
    Build a list holding ``items`` in the same order.

    Right-folds ``cons`` over the items, so the last item becomes the
    innermost node.
    """
    result = EMPTY
    for item in reversed(list(items)):
        result = Node(item, result)
    return result


def list_of(*items: A) -> "PersistentList[A]":
    """Variadic form of ``of``: ``list_of(1, 2, 3)``."""
    return of(items)


def to_list(lst: "PersistentList[A]") -> List[A]:
    return list(lst)


# ============================================================================
# Folds
# ============================================================================

def fold_left(lst: "PersistentList[A]", seed: B,
              combine: Callable[[B, A], B]) -> B:
    """
    Reduce front to back, threading the accumulator.

    Args:
        lst: List to fold
        seed: Initial accumulator, returned unchanged for an empty list
        combine: Called as ``combine(acc, elem)`` for each element in order

    Returns:
        The final accumulator
    """
    acc = seed
    cur = lst
    while isinstance(cur, Node):
        acc = combine(acc, cur.head)
        cur = cur.tail
    return acc


def fold_right(lst: "PersistentList[A]", seed: B,
               combine: Callable[[A, B], B]) -> B:
    """
    Reduce back to front: ``combine(x1, combine(x2, ... combine(xn, seed)))``.

    Folds left over the reversed list, so the stack stays flat at the cost of
    one extra pass to build the reversal.
    """
    return fold_left(reverse(lst), seed, lambda acc, elem: combine(elem, acc))


def fold_right_recursive(lst: "PersistentList[A]", seed: B,
                         combine: Callable[[A, B], B]) -> B:
    """Structural-recursion right fold. Stack depth equals list length."""
    if isinstance(lst, Empty):
        return seed
    return combine(lst.head, fold_right_recursive(lst.tail, seed, combine))


def fold_left_via_right(lst: "PersistentList[A]", seed: B,
                        combine: Callable[[B, A], B]) -> B:
    """
    Left fold expressed through ``fold_right``.

    Each element contributes a deferred step ``acc -> rest(combine(acc, x))``;
    the composed function is then applied to ``seed``. Applying it nests one
    call per element.
    """
    def step(elem, rest):
        return lambda acc: rest(combine(acc, elem))

    return fold_right(lst, lambda acc: acc, step)(seed)


def map(lst: "PersistentList[A]", transform: Callable[[A], B]) -> "PersistentList[B]":
    """Apply ``transform`` to every element, preserving order and length."""
    return fold_right(lst, EMPTY, lambda elem, acc: Node(transform(elem), acc))


# ============================================================================
# Arithmetic
# ============================================================================

def sum_list(ints: "PersistentList[int]") -> int:
    total = 0
    cur = ints
    while isinstance(cur, Node):
        total += cur.head
        cur = cur.tail
    return total


def sum_right(ints: "PersistentList[int]") -> int:
    return fold_right(ints, 0, lambda x, acc: x + acc)


def sum_left(ints: "PersistentList[int]") -> int:
    return fold_left(ints, 0, lambda acc, x: acc + x)


def product_list(ds: "PersistentList[float]") -> float:
    """
    Multiply the elements; 1.0 for an empty list.

    Scanning front to back, the moment the next unprocessed element equals
    0.0 the result is 0.0 and nothing after it is inspected.
    """
    result = 1.0
    cur = ds
    while isinstance(cur, Node):
        if cur.head == 0.0:
            return 0.0
        result *= cur.head
        cur = cur.tail
    return result


def product_right(ds: "PersistentList[float]") -> float:
    return fold_right(ds, 1.0, lambda x, acc: x * acc)


def product_left(ds: "PersistentList[float]") -> float:
    return fold_left(ds, 1.0, lambda acc, x: acc * x)


def length(lst: "PersistentList[Any]") -> int:
    return fold_right(lst, 0, lambda _, acc: acc + 1)


def length_left(lst: "PersistentList[Any]") -> int:
    return fold_left(lst, 0, lambda acc, _: acc + 1)


# ============================================================================
# Structure
# ============================================================================

def tail(lst: "PersistentList[A]") -> "PersistentList[A]":
    """Everything after the first element; the tail of Empty is Empty."""
    if isinstance(lst, Empty):
        return EMPTY
    return lst.tail


def set_head(lst: "PersistentList[A]", new_head: A) -> "PersistentList[A]":
    """Replace the first element, sharing the original tail.

    An empty list becomes the single-element list ``[new_head]``.
    """
    if isinstance(lst, Empty):
        return Node(new_head, EMPTY)
    return Node(new_head, lst.tail)


def drop(lst: "PersistentList[A]", n: int) -> "PersistentList[A]":
    """Remove the first ``n`` elements, stopping early at the end of the list."""
    cur = lst
    while n > 0 and isinstance(cur, Node):
        cur = cur.tail
        n -= 1
    return cur


def drop_while(lst: "PersistentList[A]",
               predicate: Callable[[A], bool]) -> "PersistentList[A]":
    cur = lst
    while isinstance(cur, Node) and predicate(cur.head):
        cur = cur.tail
    return cur


def init(lst: "PersistentList[A]") -> "PersistentList[A]":
    """
    All elements but the last; Empty for an empty or single-element list.

    Heads are collected into a Python list and the result is built once, so
    the whole operation is linear.
    """
    buffer = []
    cur = lst
    while isinstance(cur, Node) and isinstance(cur.tail, Node):
        buffer.append(cur.head)
        cur = cur.tail
    return of(buffer)


def init_recursive(lst: "PersistentList[A]") -> "PersistentList[A]":
    if isinstance(lst, Empty) or isinstance(lst.tail, Empty):
        return EMPTY
    return Node(lst.head, init_recursive(lst.tail))


def reverse(lst: "PersistentList[A]") -> "PersistentList[A]":
    return fold_left(lst, EMPTY, lambda acc, elem: Node(elem, acc))


def append(a: "PersistentList[A]", b: "PersistentList[A]") -> "PersistentList[A]":
    """All of ``a`` followed by all of ``b``. ``b`` is shared, not copied."""
    return fold_right(a, b, cons)


def append_recursive(a: "PersistentList[A]",
                     b: "PersistentList[A]") -> "PersistentList[A]":
    if isinstance(a, Empty):
        return b
    return Node(a.head, append_recursive(a.tail, b))


def concat(lists: "PersistentList[PersistentList[A]]") -> "PersistentList[A]":
    """Flatten a list of lists, keeping outer and inner order."""
    return fold_right(lists, EMPTY, append)


def stringify(lst: "PersistentList[Any]") -> str:
    """Render elements joined by ", " (no trailing separator)."""
    return ", ".join(str(item) for item in lst)

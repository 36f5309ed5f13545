"""Queues: a FIFO queue tracking its minimum and a queue with middle insertion."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable


class MinQueue:
    """FIFO queue built from two stacks, answering the minimum in O(1)."""

    def __init__(self) -> None:
        self._inbox: list[tuple[int, int]] = []
        self._outbox: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        floor = min(value, self._inbox[-1][1]) if self._inbox else value
        self._inbox.append((value, floor))

    def _refill(self) -> None:
        if self._outbox:
            return
        while self._inbox:
            value, _ = self._inbox.pop()
            floor = min(value, self._outbox[-1][1]) if self._outbox else value
            self._outbox.append((value, floor))

    def pop(self) -> int:
        """Remove and return the oldest element."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from an empty queue")
        return self._outbox.pop()[0]

    def front(self) -> int:
        """Return the oldest element without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("front of an empty queue")
        return self._outbox[-1][0]

    def clear(self) -> None:
        self._inbox.clear()
        self._outbox.clear()

    def minimum(self) -> int:
        floors = [stack[-1][1] for stack in (self._inbox, self._outbox) if stack]
        if not floors:
            raise IndexError("minimum of an empty queue")
        return min(floors)

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class MiddleQueue:
    """Queue that also accepts insertion just past its middle."""

    def __init__(self) -> None:
        self._head: deque[int] = deque()
        self._tail: deque[int] = deque()

    def _rebalance(self) -> None:
        while len(self._head) < len(self._tail):
            self._head.append(self._tail.popleft())
        while len(self._head) > len(self._tail) + 1:
            self._tail.appendleft(self._head.pop())

    def push_back(self, value: int) -> None:
        self._tail.append(value)
        self._rebalance()

    def push_middle(self, value: int) -> None:
        """Insert at position (len + 1) // 2."""
        self._tail.appendleft(value)
        self._rebalance()

    def pop_front(self) -> int:
        if not self._head:
            raise IndexError("pop from an empty queue")
        value = self._head.popleft()
        self._rebalance()
        return value

    def __len__(self) -> int:
        return len(self._head) + len(self._tail)


def _attempt(action: Callable[[], int]) -> str:
    try:
        return str(action())
    except IndexError:
        return "error"


def run_min_queue(commands: Iterable[str]) -> list[str]:
    """Execute enqueue/dequeue/front/size/clear/min commands, returning replies."""
    queue = MinQueue()
    replies: list[str] = []
    for command in commands:
        parts = command.split()
        if not parts:
            continue
        name, args = parts[0], parts[1:]
        if name == "enqueue":
            queue.push(int(args[0]))
            replies.append("ok")
        elif name == "dequeue":
            replies.append(_attempt(queue.pop))
        elif name == "front":
            replies.append(_attempt(queue.front))
        elif name == "size":
            replies.append(str(len(queue)))
        elif name == "clear":
            queue.clear()
            replies.append("ok")
        elif name == "min":
            replies.append(_attempt(queue.minimum))
    return replies


def run_middle_queue(commands: Iterable[str]) -> list[int]:
    """Execute "+ x", "- " and middle-insert commands, returning popped values."""
    queue = MiddleQueue()
    popped: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            continue
        if parts[0] == "+":
            queue.push_back(int(parts[1]))
        elif parts[0] == "-":
            popped.append(queue.pop_front())
        else:
            queue.push_middle(int(parts[1]))
    return popped
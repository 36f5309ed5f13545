"""AVL search tree with ordered lookups, and the query problems built on it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_MODULUS = 1_000_000_000
_NOT_FOUND = "nihya_net"
_NO_BOUND = -1


@dataclass
class _Node:
    key: Any
    value: Any
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    _update(top)
    _update(pivot)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    _update(top)
    _update(pivot)
    return pivot


class AVLTree:
    """Self-balancing binary search tree mapping keys to values.

    Inserting a key that is already present leaves the stored value unchanged.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            return node
        _update(node)
        balance = _balance(node)
        if balance > 1 and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def insert(self, key: Any, value: Any = None) -> None:
        """Add ``key`` with ``value`` unless the key is already stored."""
        self._root = self._insert(self._root, key, value)

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        """Value stored under ``key``, or ``default`` when it is absent."""
        node = self._find(key)
        return node.value if node is not None else default

    def lower_bound(self, key: Any) -> Any:
        """Smallest stored key not less than ``key``, or None if there is none."""
        node = self._root
        result = None
        while node is not None:
            if node.key >= key:
                result = node.key
                node = node.left
            else:
                node = node.right
        return result

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def process_lower_bound_queries(queries: Iterable[tuple[str, int]]) -> list[int]:
    """Run "+ x" / "? x" queries and return the answers to the "?" ones.

    A "+" right after a "?" inserts (x + last answer) mod 10**9; a "?" with
    no key at or above x answers -1.
    """
    tree = AVLTree()
    answers: list[int] = []
    last_value = 0
    last_operation = ""
    for operation, x in queries:
        if operation == "+":
            if last_operation == "?":
                tree.insert(_truncated_mod(x + last_value, _MODULUS))
            else:
                tree.insert(x)
            last_operation = "+"
            last_value = x
        elif operation == "?":
            bound = tree.lower_bound(x)
            last_value = _NO_BOUND if bound is None else bound
            last_operation = "?"
            answers.append(last_value)
    return answers


def lookup_credentials(
    pairs: Iterable[tuple[str, str]], queries: Iterable[str]
) -> list[str]:
    """Answer each query with the partner of a login or of a password.

    Logins are looked up first; unknown strings answer "nihya_net".
    """
    by_password = AVLTree()
    by_login = AVLTree()
    for login, credential in pairs:
        by_password.insert(credential, login)
        by_login.insert(login, credential)
    answers: list[str] = []
    for query in queries:
        result = by_login.get(query, _NOT_FOUND)
        if result == _NOT_FOUND:
            result = by_password.get(query, _NOT_FOUND)
        answers.append(result)
    return answers
"""Sparse table answering the second-smallest value of a range."""

from __future__ import annotations

from collections.abc import Iterable

_Pair = tuple[int, int]
_NONE = -1


class SecondMinSparseTable:
    """Precomputes, for every power-of-two block, its two smallest positions."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        size = len(self._values)
        level: list[_Pair] = [(index, _NONE) for index in range(size)]
        self._levels = [level]
        width = 1
        while width * 2 <= size:
            level = [
                self._combine(level[start], level[start + width])
                for start in range(size - 2 * width + 1)
            ]
            self._levels.append(level)
            width *= 2

    def _combine(self, first: _Pair, second: _Pair) -> _Pair:
        values = self._values
        best = runner_up = _NONE
        for index in (*first, *second):
            if index == _NONE:
                continue
            if best == _NONE or values[index] < values[best]:
                runner_up, best = best, index
            elif index != best and (
                runner_up == _NONE or values[index] < values[runner_up]
            ):
                runner_up = index
        return best, runner_up

    def second_min(self, left: int, right: int) -> int:
        """Second smallest value among positions ``left..right`` (0-based, inclusive)."""
        if not (0 <= left < len(self._values) and 0 <= right < len(self._values)):
            raise IndexError("range out of bounds")
        if right <= left:
            raise ValueError("range must hold at least two elements")
        level = (right - left + 1).bit_length() - 1
        blocks = self._levels[level]
        _, runner_up = self._combine(blocks[left], blocks[right - (1 << level) + 1])
        return self._values[runner_up]
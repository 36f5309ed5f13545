import random

import pytest

from contestlib.sparse_table import SecondMinSparseTable


def test_small_range():
    table = SecondMinSparseTable([5, 1, 4])
    assert table.second_min(0, 2) == 4
    assert table.second_min(0, 1) == 5


def test_duplicates_count_twice():
    table = SecondMinSparseTable([3, 3, 7])
    assert table.second_min(0, 2) == 3


@pytest.mark.parametrize("seed", range(5))
def test_every_range_matches_sorting(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 20) for _ in range(rng.randint(2, 40))]
    table = SecondMinSparseTable(values)
    for left in range(len(values)):
        for right in range(left + 1, len(values)):
            assert table.second_min(left, right) == sorted(values[left:right + 1])[1]


def test_single_element_range_rejected():
    with pytest.raises(ValueError):
        SecondMinSparseTable([1, 2, 3]).second_min(1, 1)


def test_out_of_bounds():
    with pytest.raises(IndexError):
        SecondMinSparseTable([1, 2, 3]).second_min(0, 3)
import random

import pytest

from contestlib.sorting import (
    generate_sequence,
    kth_statistic,
    median_of_medians,
    merge_intervals,
    merge_sort,
    quickselect,
    radix_sort,
)


@pytest.mark.parametrize(
    "items",
    [[], [1], [3, 1, 2], [5, 5, 1, 5], list(range(20, 0, -1)), [(2, 1), (1, 9), (1, 3)]],
)
def test_merge_sort_matches_sorted(items):
    assert merge_sort(items) == sorted(items)


def test_merge_sort_leaves_input_alone():
    items = [4, 2, 3]
    merge_sort(items)
    assert items == [4, 2, 3]


def test_merge_intervals_joins_overlaps():
    assert merge_intervals([(8, 10), (1, 3), (2, 6)]) == [(1, 6), (8, 10)]


def test_merge_intervals_joins_touching():
    assert merge_intervals([(2, 3), (1, 2)]) == [(1, 3)]


def test_merge_intervals_nested():
    assert merge_intervals([(1, 10), (2, 3), (4, 5)]) == [(1, 10)]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_merge_intervals_result_is_disjoint_and_covers_input():
    rng = random.Random(7)
    intervals = []
    for _ in range(60):
        start = rng.randint(0, 200)
        intervals.append((start, start + rng.randint(0, 15)))
    merged = merge_intervals(intervals)
    assert merged
    gaps_ok = [end < next_start for (_, end), (next_start, _) in zip(merged, merged[1:])]
    assert all(gaps_ok)
    covered = [any(a <= start and end <= b for a, b in merged) for start, end in intervals]
    assert len(covered) == 60
    assert all(covered)


def test_median_of_medians_small_takes_middle_position():
    assert median_of_medians([5, 1, 3]) == 1


def test_median_of_medians_result_is_member():
    values = [random.Random(3).randint(0, 100) for _ in range(47)]
    assert median_of_medians(values) in values


def test_median_of_medians_empty():
    with pytest.raises(ValueError):
        median_of_medians([])


def test_quickselect_every_position():
    rng = random.Random(11)
    values = [rng.randint(-50, 50) for _ in range(73)]
    expected = sorted(values)
    selected = [quickselect(values, k) for k in range(len(values))]
    assert selected == expected


@pytest.mark.parametrize("k", [-1, 3])
def test_quickselect_out_of_range(k):
    with pytest.raises(IndexError):
        quickselect([1, 2, 3], k)


def test_generate_sequence_starts_with_seeds():
    sequence = generate_sequence(10, 7, 9)
    assert sequence[:2] == [7, 9]
    assert len(sequence) == 10
    assert all(0 <= v < 10_004_321 for v in sequence)


def test_generate_sequence_third_term():
    assert generate_sequence(3, 1, 1)[2] == 168


def test_generate_sequence_short():
    assert generate_sequence(1, 4, 5) == [4]


def test_kth_statistic_matches_sorted_sequence():
    sequence = sorted(generate_sequence(200, 12345, 678))
    ks = [1, 50, 100, 200]
    results = [kth_statistic(200, k, 12345, 678) for k in ks]
    assert results == [sequence[k - 1] for k in ks]


def test_kth_statistic_rejects_zero():
    with pytest.raises(IndexError):
        kth_statistic(5, 0, 1, 2)


def test_radix_sort_matches_sorted():
    rng = random.Random(5)
    numbers = [rng.getrandbits(64) for _ in range(100)] + [0, 2**64 - 1]
    assert radix_sort(numbers) == sorted(numbers)


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_radix_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        radix_sort([1, bad])
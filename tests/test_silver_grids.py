import pytest

from drillbook.silver.grids import rectangular_pasture, the_lazy_cow

POINTS = [(0, 2), (1, 0), (2, 3), (3, 5), (7, 1)]


def test_rectangular_pasture_single_cow():
    assert rectangular_pasture([(4, 9)]) == 2


def test_rectangular_pasture_two_cows_any_subset():
    assert rectangular_pasture([(0, 0), (5, 5)]) == 4


def test_rectangular_pasture_no_cows_only_empty_set():
    assert rectangular_pasture([]) == 1


def test_rectangular_pasture_order_independent():
    assert rectangular_pasture(POINTS) == rectangular_pasture(list(reversed(POINTS)))


def test_rectangular_pasture_invariant_under_axis_swap():
    swapped = [(y, x) for x, y in POINTS]
    assert rectangular_pasture(swapped) == rectangular_pasture(POINTS)


def test_rectangular_pasture_invariant_under_stretching():
    stretched = [(3 * x + 7, 2 * y - 11) for x, y in POINTS]
    assert rectangular_pasture(stretched) == rectangular_pasture(POINTS)


def test_rectangular_pasture_bounds():
    result = rectangular_pasture(POINTS)
    n = len(POINTS)
    assert n + 1 <= result <= 2**n


def test_rectangular_pasture_duplicate_x_raises():
    with pytest.raises(ValueError):
        rectangular_pasture([(1, 1), (1, 2)])


GRID = [
    [50, 5, 25, 6, 17],
    [14, 3, 2, 7, 21],
    [99, 10, 1, 2, 80],
    [8, 7, 5, 23, 11],
    [10, 0, 78, 1, 9],
]


def test_lazy_cow_zero_steps_is_best_square():
    assert the_lazy_cow(GRID, 0) == max(max(row) for row in GRID)


def test_lazy_cow_enough_steps_takes_everything():
    assert the_lazy_cow(GRID, 2 * len(GRID)) == sum(map(sum, GRID))


def test_lazy_cow_grows_with_steps():
    results = [the_lazy_cow(GRID, k) for k in range(10)]
    assert results == sorted(results)


def test_lazy_cow_single_square():
    assert the_lazy_cow([[42]], 3) == 42


def test_lazy_cow_transpose_invariant():
    transposed = [list(col) for col in zip(*GRID)]
    assert the_lazy_cow(transposed, 2) == the_lazy_cow(GRID, 2)


def test_lazy_cow_not_square_raises():
    with pytest.raises(ValueError):
        the_lazy_cow([[1, 2], [3]], 1)


def test_lazy_cow_negative_k_raises():
    with pytest.raises(ValueError):
        the_lazy_cow([[1]], -1)
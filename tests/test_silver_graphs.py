import pytest

from drillbook.silver.graphs import cover_it, fence_planning, flight_route_check, moocast


def _dominated(n, edges, chosen):
    picked = set(chosen)
    covered = set(picked)
    for a, b in edges:
        if a in picked:
            covered.add(b)
        if b in picked:
            covered.add(a)
    return covered == set(range(1, n + 1))


@pytest.mark.parametrize(
    "n, edges",
    [
        (2, [(1, 2)]),
        (4, [(1, 2), (2, 3), (3, 4)]),
        (5, [(1, 2), (1, 3), (1, 4), (1, 5)]),
        (6, [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 6), (6, 4)]),
    ],
)
def test_cover_it_dominates_graph(n, edges):
    chosen = cover_it(n, edges)
    assert chosen == sorted(chosen)
    assert all(1 <= v <= n for v in chosen)
    assert _dominated(n, edges, chosen)


def test_cover_it_single_edge_picks_root():
    assert cover_it(2, [(1, 2)]) == [1]


def test_cover_it_single_vertex_chooses_nothing():
    assert cover_it(1, []) == []


def test_cover_it_disconnected_raises():
    with pytest.raises(ValueError):
        cover_it(3, [(1, 2)])


def test_cover_it_bad_edge_raises():
    with pytest.raises(ValueError):
        cover_it(2, [(1, 3)])


def test_fence_planning_isolated_cows_need_no_fence():
    assert fence_planning([(0, 0), (5, 5), (9, 1)], []) == 0


def test_fence_planning_connected_pair():
    assert fence_planning([(0, 0), (2, 3)], [(1, 2)]) == 10


def test_fence_planning_picks_smallest_network():
    positions = [(0, 0), (10, 10), (20, 20), (21, 21)]
    edges = [(1, 2), (3, 4)]
    small = fence_planning(positions[2:], [(1, 2)])
    assert fence_planning(positions, edges) == small


def test_fence_planning_no_cows_raises():
    with pytest.raises(ValueError):
        fence_planning([], [])


def test_flight_route_check_cycle_is_fine():
    assert flight_route_check(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_flight_route_check_one_way():
    assert flight_route_check(2, [(1, 2)]) == (2, 1)


def test_flight_route_check_unreachable_city():
    assert flight_route_check(3, [(1, 2), (2, 1)]) == (1, 3)


def test_flight_route_check_bad_city_raises():
    with pytest.raises(ValueError):
        flight_route_check(2, [(1, 4)])


def test_moocast_single_cow():
    assert moocast([(0, 0, 1)]) == 1


def test_moocast_far_apart():
    assert moocast([(0, 0, 1), (100, 100, 1)]) == 1


def test_moocast_one_way_reach():
    cows = [(0, 0, 5), (3, 4, 1), (100, 0, 1)]
    assert moocast(cows) == 2


def test_moocast_relay_chain_reaches_everyone():
    cows = [(0, 0, 2), (2, 0, 2), (4, 0, 2), (6, 0, 2)]
    assert moocast(cows) == len(cows)


def test_moocast_no_cows():
    assert moocast([]) == 0
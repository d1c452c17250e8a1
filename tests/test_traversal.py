import pytest

from algokata.traversal import (
    building_roads,
    building_teams,
    message_route,
    round_trip,
    round_trip_ii,
)


def _components(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for a, b in edges:
        parent[find(a)] = find(b)
    return len({find(x) for x in range(1, n + 1)})


def _check_cycle(cycle, edges, directed):
    allowed = set(edges)
    if not directed:
        allowed |= {(b, a) for a, b in edges}
    assert cycle[0] == cycle[-1]
    assert len(set(cycle[:-1])) == len(cycle) - 1
    for a, b in zip(cycle, cycle[1:]):
        assert (a, b) in allowed


def test_building_roads_connects_everything():
    n, roads = 6, [(1, 2), (3, 4), (5, 4)]
    new = building_roads(n, roads)
    assert len(new) == _components(n, roads) - 1
    assert _components(n, roads + new) == _components(1, [])


def test_building_roads_already_connected():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


def test_building_roads_links_to_first_city():
    new = building_roads(4, [])
    assert new == [(1, 2), (1, 3), (1, 4)]


def test_building_roads_rejects_bad_city():
    with pytest.raises(ValueError):
        building_roads(3, [(1, 4)])


def test_message_route_prefers_shortcut():
    assert message_route(4, [(1, 2), (2, 3), (3, 4), (1, 4)]) == [1, 4]


def test_message_route_is_valid_path():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 2)]
    route = message_route(5, edges)
    allowed = set(edges) | {(b, a) for a, b in edges}
    assert route[0] == 1 and route[-1] == 5
    assert all(step in allowed for step in zip(route, route[1:]))
    assert len(route) == len([1, 2, 5])


def test_message_route_unreachable():
    assert message_route(3, [(1, 2)]) is None


def test_message_route_single_computer():
    assert message_route(1, []) == [1]


def test_building_teams_separates_friends():
    friendships = [(1, 2), (1, 3), (4, 5)]
    teams = building_teams(5, friendships)
    assert set(teams) <= {1, 2}
    assert all(teams[a - 1] != teams[b - 1] for a, b in friendships)
    assert teams[0] == teams[3] == 1


def test_building_teams_odd_cycle():
    assert building_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_building_teams_isolated_pupils():
    assert building_teams(3, []) == [1, 1, 1]


def test_round_trip_example():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]
    cycle = round_trip(5, edges)
    _check_cycle(cycle, edges, directed=False)
    assert len(cycle) >= 4


def test_round_trip_tree_has_none():
    assert round_trip(4, [(1, 2), (2, 3), (2, 4)]) is None


def test_round_trip_double_road_is_not_a_trip():
    assert round_trip(2, [(1, 2), (1, 2)]) is None


def test_round_trip_ii_example():
    edges = [(1, 3), (2, 1), (2, 4), (3, 2), (3, 4)]
    cycle = round_trip_ii(4, edges)
    _check_cycle(cycle, edges, directed=True)


def test_round_trip_ii_dag_has_none():
    assert round_trip_ii(4, [(1, 2), (2, 3), (1, 3), (3, 4)]) is None


def test_round_trip_ii_two_way_pair():
    edges = [(1, 2), (2, 1)]
    cycle = round_trip_ii(2, edges)
    _check_cycle(cycle, edges, directed=True)
    assert len(cycle) == len(edges) + 1
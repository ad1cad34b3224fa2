import math

import pytest

from nigiri.footpaths import (
    EARTH_RADIUS,
    INVALID_TIME,
    NO_COMPONENT,
    WALK_SPEED,
    Footpath,
    distance,
    find_components,
    floyd_warshall,
    footpath_graph,
    link_nearby_stations,
    make_match_pair,
    transitivize_footpaths,
)

INF = INVALID_TIME


def _edge_set(lists):
    return {(i, fp.target, fp.duration) for i, fps in enumerate(lists) for fp in fps}


def test_floyd_warshall_chain():
    mat = [[0, 5, INF], [INF, 0, 3], [INF, INF, 0]]
    result = floyd_warshall(mat)
    assert result is mat
    assert mat[0][2] == 5 + 3
    assert mat[2][0] == INF
    assert mat[1][0] == INF


def test_floyd_warshall_triangle_inequality():
    mat = [
        [0, 4, 10, INF],
        [4, 0, 3, 9],
        [10, 3, 0, 1],
        [INF, 9, 1, 0],
    ]
    floyd_warshall(mat)
    n = len(mat)
    for i in range(n):
        for j in range(n):
            for k in range(n):
                assert mat[i][j] <= min(INF, mat[i][k] + mat[k][j])


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_distance_properties():
    a = (49.87, 8.65)
    b = (49.88, 8.66)
    assert distance(a, a) == 0
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance((0.0, 0.0), (1.0, 0.0)) == pytest.approx(
        math.pi * EARTH_RADIUS / 180
    )


def test_make_match_pair_is_unordered():
    assert make_match_pair(3, 1) == (1, 3)
    assert make_match_pair(1, 3) == make_match_pair(3, 1)


def test_footpath_graph_drops_self_loops_and_duplicates():
    graph = footpath_graph(
        [
            [Footpath(2, 7), Footpath(0, 1), Footpath(1, 4), Footpath(2, 3)],
            [Footpath(1, 2)],
            [],
        ]
    )
    assert graph[0] == [Footpath(1, 4), Footpath(2, 3)]
    assert graph[1] == []
    assert graph[2] == []


def test_find_components():
    graph = [
        [Footpath(1, 2)],
        [],
        [],
        [Footpath(4, 1)],
        [Footpath(3, 1)],
    ]
    components = find_components(graph)
    assert components == [
        (0, 0),
        (0, 1),
        (NO_COMPONENT, 2),
        (3, 3),
        (3, 4),
    ]


def test_link_nearby_stations_links_different_sources():
    coordinates = [(50.0, 8.0), (50.001, 8.0), (50.0005, 8.0), (60.0, 8.0)]
    sources = [0, 1, 0, 1]
    transfer_times = [2, 3, 2, 2]
    out, equivalences = link_nearby_stations(coordinates, sources, transfer_times)
    assert {fp.target for fp in out[0]} == {1}
    assert {fp.target for fp in out[1]} == {0, 2}
    assert out[3] == []
    assert equivalences[1] == [fp.target for fp in out[1]]
    for i, fps in enumerate(out):
        for fp in fps:
            assert fp.duration >= max(transfer_times[i], transfer_times[fp.target])


def test_link_nearby_stations_ignores_origin_and_missing_source():
    coordinates = [(0.5, 0.5), (0.5, 0.5005), (50.0, 8.0), (50.0, 8.0001)]
    sources = [0, 1, 0, None]
    out, _ = link_nearby_stations(coordinates, sources, [1, 1, 1, 1])
    assert out == [[], [], [], []]


def test_link_nearby_stations_duration_is_transfer_time_when_close():
    coordinates = [(50.0, 8.0), (50.0002, 8.0)]
    out, _ = link_nearby_stations(coordinates, [0, 1], [5, 2])
    assert out[0] == [Footpath(1, 5)]
    assert out[1] == [Footpath(0, 5)]


def test_transitivize_two_station_component():
    graph = [[Footpath(1, 4)], [], []]
    out, inc = transitivize_footpaths(graph, [1, 6, 1])
    assert out[0] == [Footpath(1, 6)]
    assert out[1] == []
    assert inc[1] == [Footpath(0, 6)]


def test_transitivize_closes_chain():
    graph = [[Footpath(1, 5)], [Footpath(2, 3)], [], []]
    out, inc = transitivize_footpaths(graph, [0, 0, 0, 0])
    edges = _edge_set(out)
    assert (0, 2, 5 + 3) in edges
    assert (0, 1, 5) in edges
    assert (1, 2, 3) in edges
    assert all(src != 3 and dst != 3 for src, dst, _ in edges)
    assert _edge_set(out) == {(b, a, d) for a, b, d in _edge_set(inc)}


def test_transitivize_respects_transfer_times():
    graph = [[Footpath(1, 1)], [Footpath(2, 1)], [Footpath(0, 1)]]
    transfer_times = [4, 1, 2]
    out, _ = transitivize_footpaths(graph, transfer_times)
    for i, fps in enumerate(out):
        assert {fp.target for fp in fps} == {0, 1, 2} - {i}
        for fp in fps:
            assert fp.duration >= max(transfer_times[i], transfer_times[fp.target])


def test_transitivize_skips_too_long_paths():
    graph = [[Footpath(1, 200)], [Footpath(2, 200)], []]
    out, _ = transitivize_footpaths(graph, [0, 0, 0])
    targets = {(i, fp.target) for i, fps in enumerate(out) for fp in fps}
    assert (0, 2) not in targets
    assert {(0, 1), (1, 2)} <= targets


def test_transitivize_adjusts_to_walking_time():
    coordinates = [(50.0, 8.0), (50.002, 8.0), (50.004, 8.0)]
    graph = [[Footpath(1, 1)], [Footpath(2, 1)], []]
    out, _ = transitivize_footpaths(graph, [0, 0, 0], coordinates, adjust=True)
    for i, fps in enumerate(out):
        for fp in fps:
            walk = int(distance(coordinates[i], coordinates[fp.target]) / WALK_SPEED / 60)
            assert fp.duration >= walk
    assert any(fp.duration > 1 for fps in out for fp in fps)


def test_transitivize_adjust_requires_coordinates():
    graph = [[Footpath(1, 1)], [Footpath(2, 1)], []]
    with pytest.raises(ValueError):
        transitivize_footpaths(graph, [0, 0, 0], None, adjust=True)
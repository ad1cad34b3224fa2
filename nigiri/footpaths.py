"""Footpaths between stations: linking nearby stops and transitive closure."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby
from operator import itemgetter

from nigiri.log import LogLevel, log

WALK_SPEED = 1.5  # metres per second
LINK_NEARBY_MAX_DISTANCE = 300  # metres
EARTH_RADIUS = 6_371_000.0  # metres
NO_COMPONENT = (1 << 32) - 1
INVALID_TIME = (1 << 16) - 1
MAX_FOOTPATH_DURATION = 255  # minutes

Coordinate = tuple[float, float]


@dataclass(frozen=True, order=True)
class Footpath:
    """A walk to location ``target`` taking ``duration`` minutes."""

    target: int
    duration: int


def floyd_warshall(mat: list[list[int]]) -> list[list[int]]:
    """All-pairs shortest paths on a square matrix, in place.

    Entries equal to :data:`INVALID_TIME` mean "no edge"; sums are capped at
    that value. The matrix is returned for convenience.
    """
    n = len(mat)
    if any(len(row) != n for row in mat):
        raise ValueError("floyd_warshall: input is not a square matrix.")
    for k in range(n):
        row_k = mat[k]
        for row_i in mat:
            via = row_i[k]
            for j in range(n):
                d = min(INVALID_TIME, via + row_k[j])
                if row_i[j] > d:
                    row_i[j] = d
    return mat


def distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in metres between two ``(lat, lng)`` points."""
    lat1, lng1 = map(math.radians, a)
    lat2, lng2 = map(math.radians, b)
    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lng2 - lng1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS * math.asin(math.sqrt(min(1.0, h)))


def make_match_pair(a: int, b: int) -> tuple[int, int]:
    """The unordered pair ``{a, b}`` as a sorted tuple."""
    return (min(a, b), max(a, b))


def footpath_graph(out_edges: Sequence[Iterable[Footpath]]) -> list[list[Footpath]]:
    """Per-location edges without self loops, one edge per target, sorted by target.

    Of several edges to the same target the shortest one is kept.
    """
    graph: list[list[Footpath]] = []
    for i, edges in enumerate(out_edges):
        kept: list[Footpath] = []
        for fp in sorted(fp for fp in edges if fp.target != i):
            if not kept or kept[-1].target != fp.target:
                kept.append(fp)
        graph.append(kept)
    return graph


def find_components(graph: Sequence[Sequence[Footpath]]) -> list[tuple[int, int]]:
    """Pairs ``(component, location)`` for every location, in location order.

    A component is named after the smallest location that starts it;
    locations reached by no edge get :data:`NO_COMPONENT`.
    """
    component = [NO_COMPONENT] * len(graph)
    for i, edges in enumerate(graph):
        if component[i] != NO_COMPONENT or not edges:
            continue
        stack = [i]
        while stack:
            j = stack.pop()
            if component[j] == i:
                continue
            component[j] = i
            stack.extend(fp.target for fp in graph[j] if component[fp.target] != i)
    return [(c, i) for i, c in enumerate(component)]


def link_nearby_stations(
    coordinates: Sequence[Coordinate],
    sources: Sequence[int | None],
    transfer_times: Sequence[int],
) -> tuple[list[list[Footpath]], list[list[int]]]:
    """Connect stations of different sources that lie close to each other.

    Returns the new outgoing footpaths and the equivalent locations, both per
    location. Stations near ``(0, 0)`` and those without a source are ignored.
    """
    n = len(sources)
    out: list[list[Footpath]] = [[] for _ in range(n)]
    equivalences: list[list[int]] = [[] for _ in range(n)]
    for l_from, from_pos in enumerate(coordinates[:n]):
        if abs(from_pos[0]) < 2.0 and abs(from_pos[1]) < 2.0:
            continue
        from_src = sources[l_from]
        if from_src is None:
            continue
        for l_to, to_pos in enumerate(coordinates[:n]):
            if l_to == l_from:
                continue
            to_src = sources[l_to]
            if to_src is None or to_src == from_src:
                continue
            dist = distance(from_pos, to_pos)
            if dist > LINK_NEARBY_MAX_DISTANCE:
                continue
            walk = round(dist / (60 * WALK_SPEED))
            duration = max(transfer_times[l_from], transfer_times[l_to], walk)
            out[l_from].append(Footpath(l_to, duration))
            equivalences[l_from].append(l_to)
    return out, equivalences


def _process_component(
    component: int,
    members: list[int],
    fgraph: list[list[Footpath]],
    transfer_times: Sequence[int],
    coordinates: Sequence[Coordinate] | None,
    adjust: bool,
    out: list[list[Footpath]],
    inc: list[list[Footpath]],
) -> None:
    if component == NO_COMPONENT:
        return

    def add(a: int, b: int, duration: int) -> None:
        out[a].append(Footpath(b, duration))
        inc[b].append(Footpath(a, duration))

    size = len(members)
    if size == 2:
        a, b = members
        for x, y in ((a, b), (b, a)):
            edges = fgraph[x]
            if not edges:
                continue
            if len(edges) != 1:
                raise ValueError(
                    f"invalid size: idx_a={x}, size={len(edges)}, idx_b={y}"
                )
            duration = max(edges[0].duration, transfer_times[x], transfer_times[y])
            add(x, y, duration)
        return
    if size <= 2:
        raise ValueError(f"invalid size [id={component}], first={members[0]}")

    position = {loc: i for i, loc in enumerate(members)}
    mat = [[INVALID_TIME] * size for _ in range(size)]
    for i, loc in enumerate(members):
        for edge in fgraph[loc]:
            mat[i][position[edge.target]] = max(
                transfer_times[loc], transfer_times[edge.target], edge.duration
            )

    floyd_warshall(mat)

    for i, a in enumerate(members):
        for j, b in enumerate(members):
            value = mat[i][j]
            if value == INVALID_TIME or i == j:
                continue
            if value > MAX_FOOTPATH_DURATION:
                log(LogLevel.ERROR, "loader.footpath",
                    "footpath {}>256 too long", value)
                continue
            duration = max(value, transfer_times[a], transfer_times[b])
            if adjust:
                if coordinates is None:
                    raise ValueError("adjusting footpaths requires coordinates")
                dist = distance(coordinates[a], coordinates[b])
                duration = max(duration, int(dist / WALK_SPEED / 60))
                if duration > MAX_FOOTPATH_DURATION:
                    log(LogLevel.ERROR, "loader.footpath.adjust",
                        "too long after adjust: {}>256", duration)
            add(a, b, duration)


def transitivize_footpaths(
    graph: Sequence[Iterable[Footpath]],
    transfer_times: Sequence[int],
    coordinates: Sequence[Coordinate] | None = None,
    adjust: bool = False,
) -> tuple[list[list[Footpath]], list[list[Footpath]]]:
    """Close the foot graph transitively within each connected component.

    Returns new outgoing and incoming footpaths per location. Durations are at
    least the transfer times of both ends; with ``adjust`` they are also at
    least the straight-line walking time.
    """
    fgraph = footpath_graph(graph)
    components = sorted(find_components(fgraph))
    out: list[list[Footpath]] = [[] for _ in fgraph]
    inc: list[list[Footpath]] = [[] for _ in fgraph]
    for component, group in groupby(components, key=itemgetter(0)):
        members = [loc for _, loc in group]
        _process_component(
            component, members, fgraph, transfer_times, coordinates, adjust, out, inc
        )
    return out, inc
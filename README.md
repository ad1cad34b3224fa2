# nigiri

Building blocks for working with public transport timetables: time
arithmetic, access to timetable files, transport classes, journey result
sets and footpath graphs between stations. Pure Python, no dependencies.

## Installation

```
pip install .
pip install ".[test]"   # with pytest for the test suite
```

## Modules

- `nigiri.log`: `LogLevel` (`DEBUG`, `INFO`, `ERROR`), `set_verbosity(level)`
  (returns the previous level), `now()` (UTC time as `YYYY-MM-DDTHH:MM:SSZ`)
  and `log(level, ctx, msg, *args)`, which formats `msg` with `str.format`
  and prints `time | [level][ctx] message` to standard error.
- `nigiri.text`: `indent(n)` (two spaces per level), `format_day_list(days, base)`
  (renders an integer bit mask or a sequence of booleans as
  `{YYYY-MM-DD, ...}`), `kilobytes(v)` and `megabytes(v)` (1024-based).
- `nigiri.interval`: the frozen half-open `Interval(start, end)` with
  `contains`, `overlaps`, `clamp` (bounds inclusive), `size`, `shift`,
  iteration (forward and `reversed`), indexing and `len`; and
  `slice_by_interval(seq, interval)`.
- `nigiri.delta`: minutes relative to a base day, kept within the signed
  16-bit range. `Direction`, `invalid_delta(direction)`, `clamp(t)`,
  `unix_to_delta(base, t)`, `delta_to_unix(base, d)`,
  `tt_to_delta(base, day, mam)` and `split_day_mam(base, x)`, which raises
  `ValueError` for the two invalid values.
- `nigiri.containers`: `Dial(max_bucket, get_bucket)`, a bucket priority queue
  (`push`, `top`, `pop`, `len`; last pushed first within a bucket);
  `CachedLookup(mapping, default_factory=None)`, get-or-create access that
  remembers the last key; `linear_lb(items, key, cmp)`; and
  `sort_by(order, *seqs)`, which sorts `order` and reorders the other
  sequences the same way.
- `nigiri.dir`: one interface, `Dir`, over timetable files, with
  `list_files`, `get_file` (returns a `File` whose `data()` is bytes),
  `exists`, `file_size`, `type` (a `DirType`) and `hash` (a 64-bit
  fingerprint of the contents). Implementations: `FsDir` for a directory,
  `ZipDir` for a ZIP archive given as a path or as bytes (usable as a context
  manager, with `close()`), and `MemDir` for files in memory (`add`, and
  `MemDir.read(text)`, where each line `# name` starts a new file).
  `make_dir(path)` opens a `.zip` file or a directory and raises `ValueError`
  otherwise; `normalize(p)` joins path parts with `/`, dropping `.`.
- `nigiri.clasz`: the `Clasz` enumeration, `get_clasz(name)` for service
  category names (unknown names are logged and give `Clasz.OTHER`), and class
  masks: `to_mask`, `is_allowed`, `all_clasz_allowed`.
- `nigiri.routing`: `LocationMatchMode`, `Offset`, `Query` (with its
  defaults, such as at most 7 transfers), `Leg`, `RunEnterExit`, `Journey`
  (`dominates`, `travel_time`, `add`) and `ParetoSet`, which keeps only
  non-dominated elements (`add`, `clear`, `remove_if`, `sort`, indexing,
  iteration, `len`).
- `nigiri.get_index`: `get_index(route_services, service)` gives the position
  at which a service (with a `utc_times` sequence) fits into a route without
  overtaking another service at any stop, or `None`.
- `nigiri.footpaths`: `Footpath(target, duration)`, `distance(a, b)`
  (great-circle metres between `(lat, lng)` points), `floyd_warshall(mat)`,
  `make_match_pair`, `footpath_graph(out_edges)`, `find_components(graph)`,
  `link_nearby_stations(coordinates, sources, transfer_times)` (links stations
  of different sources within 300 m at 1.5 m/s walking speed) and
  `transitivize_footpaths(graph, transfer_times, coordinates, adjust)`
  (returns outgoing and incoming footpaths of the closed graph).

## Examples

```python
from nigiri.clasz import Clasz, get_clasz, is_allowed, to_mask

assert get_clasz("ICE") is Clasz.HIGH_SPEED
assert is_allowed(to_mask(Clasz.BUS), Clasz.BUS)
```

```python
from nigiri.dir import MemDir

d = MemDir.read("# stops.txt\nstop_id\nA\n# trips.txt\ntrip_id\n")
print(d.list_files("."))              # [PurePosixPath('stops.txt'), PurePosixPath('trips.txt')]
print(d.get_file("stops.txt").data())  # b'stop_id\nA'
```

```python
from datetime import datetime
from nigiri.routing import Journey, ParetoSet

results = ParetoSet()
results.add(Journey(datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 9), dest=3, transfers=1))
results.add(Journey(datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 10), dest=3, transfers=1))
assert len(results) == 1  # the slower journey is dominated
```

```python
from nigiri.footpaths import Footpath, transitivize_footpaths

graph = [[Footpath(1, 3)], [Footpath(2, 4)], []]
out, inc = transitivize_footpaths(graph, transfer_times=[2, 2, 2])
print(out[0])  # [Footpath(target=1, duration=3), Footpath(target=2, duration=7)]
```

## What it does not do

The package has no timetable loaders: it does not parse GTFS or HRD feeds
into a timetable, though `nigiri.dir` reads the files such a loader would
use. It has no route search that executes queries — `Query`, `Journey` and
`ParetoSet` describe queries and hold results, but nothing here computes
connections. There is no handling of real-time updates and no command-line
program.

## Tests

```
pytest
```
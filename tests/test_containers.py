import pytest

from nigiri.containers import CachedLookup, Dial, linear_lb, sort_by


def test_dial_pops_in_bucket_order():
    d = Dial(10, lambda x: x)
    values = [7, 3, 9, 0, 3, 10, 5]
    for v in values:
        d.push(v)
    assert len(d) == len(values)
    out = []
    while len(d):
        top = d.top()
        assert d.pop() == top
        out.append(top)
    assert out == sorted(values)


def test_dial_same_bucket_last_in_first_out():
    d = Dial(5, lambda x: x[0])
    d.push((2, "first"))
    d.push((2, "second"))
    assert d.pop() == (2, "second")
    assert d.pop() == (2, "first")


def test_dial_push_lower_after_pop():
    d = Dial(5, lambda x: x)
    d.push(4)
    d.push(2)
    assert d.pop() == 2
    d.push(1)
    assert d.top() == 1


def test_dial_empty_raises():
    d = Dial(3, lambda x: x)
    with pytest.raises(IndexError):
        d.top()
    with pytest.raises(IndexError):
        d.pop()


def test_dial_bucket_out_of_range():
    d = Dial(3, lambda x: x)
    with pytest.raises(ValueError):
        d.push(4)


def test_cached_lookup_creates_once():
    calls = []

    def create():
        calls.append(1)
        return []

    mapping = {}
    lookup = CachedLookup(mapping)
    lookup("a", create).append(1)
    lookup("a", create).append(2)
    lookup("b", create)
    lookup("a", create).append(3)
    assert len(calls) == 2
    assert mapping["a"] == [1, 2, 3]
    assert mapping["b"] == []


def test_cached_lookup_existing_key_and_default():
    mapping = {"x": 5}
    lookup = CachedLookup(mapping, int)
    assert lookup("x") == 5
    assert lookup("y") == 0
    assert set(mapping) == {"x", "y"}


def test_cached_lookup_missing_without_factory():
    with pytest.raises(KeyError):
        CachedLookup({})("missing")


@pytest.mark.parametrize("key", [-1, 0, 3, 4, 8, 100])
def test_linear_lb_invariant(key):
    items = [1, 3, 3, 5, 8]
    idx = linear_lb(items, key, lambda a, b: a < b)
    assert all(x < key for x in items[:idx])
    assert idx == len(items) or items[idx] >= key


def test_linear_lb_empty():
    assert linear_lb([], 5, lambda a, b: a < b) == 0


def test_sort_by_permutes_consistently():
    order = [5, 1, 4, 2]
    names = ["e", "a", "d", "b"]
    weights = [50, 10, 40, 20]
    sorted_order, sorted_names, sorted_weights = sort_by(order, names, weights)
    assert sorted_order == sorted(order)
    assert sorted(zip(sorted_order, sorted_names, sorted_weights)) == sorted(
        zip(order, names, weights)
    )
    assert list(zip(sorted_order, sorted_names)) == sorted(zip(order, names))


def test_sort_by_leaves_inputs_untouched():
    order = [3, 1, 2]
    other = ["c", "a", "b"]
    sort_by(order, other)
    assert order == [3, 1, 2]
    assert other == ["c", "a", "b"]
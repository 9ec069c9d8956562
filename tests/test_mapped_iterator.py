import pytest

from query_iterator.core.exceptions import InvalidArgumentError
from query_iterator.iteration.mapped import MappedIterator
from query_iterator.iteration.query_iterator import QueryIterator

from tests.fakes import CountingSource


class ListIterator:
    """Minimal external iterator, not a QueryIterator."""

    def __init__(self, values):
        self.values = list(values)
        self.pos = 0

    def rewind(self):
        self.pos = 0

    def valid(self):
        return self.pos < len(self.values)

    def current(self):
        return self.values[self.pos]

    def key(self):
        return self.pos

    def next(self):
        self.pos += 1


def test_map_transforms_values_and_keeps_keys():
    plain_src = CountingSource(["a", "b", "c", "d", "e"])
    mapped_src = CountingSource(["a", "b", "c", "d", "e"])

    plain = QueryIterator(plain_src, 3)
    mapped = QueryIterator(mapped_src, 3).map(str.upper)

    mapped_items = list(mapped.items())
    plain_items = list(plain.items())

    assert isinstance(mapped, MappedIterator)
    assert [v for _, v in mapped_items] == ["A", "B", "C", "D", "E"]
    assert [k for k, _ in mapped_items] == [k for k, _ in plain_items]
    # no extra loads caused by the view
    assert mapped_src.pages == plain_src.pages


def test_transforms_compose_in_wrap_order(source):
    it = QueryIterator(source, 2)

    view = it.map(lambda s: s + "1").map(lambda s: s * 2)

    assert list(view) == ["A1A1", "B1B1", "C1C1", "D1D1", "E1E1"]
    assert isinstance(view.inner, MappedIterator)
    assert view.inner.inner is it


def test_navigation_is_delegated(source):
    it = QueryIterator(source, 2)
    view = it.map(str.lower)

    view.rewind()
    assert view.valid()
    view.next()
    view.next()

    assert view.key() == it.key() == 2
    assert view.current() == "c"
    assert it.current() == "C"


def test_current_is_recomputed_every_call(source):
    calls = []

    def track(value):
        calls.append(value)
        return value.lower()

    view = QueryIterator(source, 3).map(track)
    view.rewind()
    view.valid()

    assert view.current() == "a"
    assert view.current() == "a"
    assert calls == ["A", "A"]
    assert source.pages == [(1, 3)]


def test_wraps_any_external_iterator():
    view = MappedIterator(ListIterator([1, 2, 3]), lambda v: v * 10)

    assert list(view) == [10, 20, 30]
    assert list(view.items()) == [(0, 10), (1, 20), (2, 30)]


def test_rejects_non_iterator():
    with pytest.raises(InvalidArgumentError):
        MappedIterator([1, 2, 3], str)


def test_rejects_non_callable_transform():
    with pytest.raises(InvalidArgumentError):
        MappedIterator(ListIterator([1]), "upper")

import copy

import pytest

from optionette import Empty, EmptyValueError, Full, Optional, from_nullable


def test_presence_is_exact_complement():
    assert Full(1).is_present() and not Full(1).is_absent()
    assert Empty().is_absent() and not Empty().is_present()
    # A present None is still present
    assert Optional(None, True).is_present()


@pytest.mark.parametrize(
    "opt, predicate, expected",
    [
        (Full(1), lambda x: x == 1, True),
        (Full(1), lambda x: x == 2, False),
        (Empty(int), lambda x: x == 1, False),
    ],
)
def test_is_present_and(opt, predicate, expected):
    assert opt.is_present_and(predicate) is expected


def test_is_present_and_skips_predicate_when_empty():
    calls = []
    Empty().is_present_and(lambda x: calls.append(x) or True)
    assert calls == []


def test_expect():
    assert Full(1).expect("unused") == 1
    with pytest.raises(EmptyValueError) as exc:
        Empty(int).expect("No value")
    assert exc.value.message == "No value"
    assert str(exc.value) == "No value"


def test_unwrap():
    assert Full(7).unwrap() == 7
    with pytest.raises(EmptyValueError, match="unwrap called on empty Optional"):
        Empty().unwrap()


def test_empty_value_error_is_a_value_error():
    with pytest.raises(ValueError):
        Empty().unwrap()


@pytest.mark.parametrize("opt, fallback, expected", [(Full(1), 2, 1), (Empty(int), 2, 2)])
def test_unwrap_or(opt, fallback, expected):
    assert opt.unwrap_or(fallback) == expected


def test_unwrap_or_else_is_lazy():
    calls = []

    def fallback():
        calls.append(1)
        return 3

    assert Full(1).unwrap_or_else(fallback) == 1
    assert calls == []
    assert Empty(int).unwrap_or_else(fallback) == 3
    assert calls == [1]


@pytest.mark.parametrize(
    "opt, expected",
    [
        (Full(1), 1),
        (Empty(int), 0),
        (Empty(str), ""),
        (Empty(list), []),
        (Empty(), None),
    ],
)
def test_unwrap_or_default(opt, expected):
    assert opt.unwrap_or_default() == expected


def test_to_nullable_and_from_nullable():
    assert Full(3).to_nullable() == 3
    assert Empty().to_nullable() is None
    assert from_nullable(None) == Empty()
    assert from_nullable(0) == Full(0)
    assert from_nullable(None, int).unwrap_or_default() == 0


def test_map():
    assert Full(2).map(lambda x: x * 2) == Full(4)
    assert Full(2).map(str) == Full("2")
    assert Empty(int).map(lambda x: x * 2) == Empty()


def test_inspect_returns_same_container():
    seen = []
    opt = Full(5)
    assert opt.inspect(seen.append) is opt
    assert seen == [5]

    empty = Empty()
    assert empty.inspect(seen.append) is empty
    assert seen == [5]


def test_map_or():
    assert Full(2).map_or(0, lambda x: x + 1) == 3
    assert Empty(int).map_or(0, lambda x: x + 1) == 0
    assert Full(2).map_or("none", str) == "2"


def test_map_or_else_is_lazy():
    calls = []

    def fallback():
        calls.append(1)
        return -1

    assert Full(2).map_or_else(fallback, lambda x: x * 10) == 20
    assert calls == []
    assert Empty(int).map_or_else(fallback, lambda x: x * 10) == -1
    assert calls == [1]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Full(1), Full("x"), Full("x")),
        (Full(1), Empty(str), Empty()),
        (Empty(int), Full("x"), Empty()),
        (Empty(int), Empty(str), Empty()),
    ],
)
def test_and(a, b, expected):
    assert a.and_(b) == expected


def test_and_returns_other_as_is():
    b = Full("x")
    assert Full(1).and_(b) is b


def test_and_then():
    def half(x):
        return Full(x // 2) if x % 2 == 0 else Empty(int)

    assert Full(4).and_then(half) == Full(2)
    assert Full(3).and_then(half) == Empty()
    assert Empty(int).and_then(half) == Empty()


@pytest.mark.parametrize(
    "opt, expected",
    [(Full(4), Full(4)), (Full(3), Empty()), (Empty(int), Empty())],
)
def test_filter(opt, expected):
    assert opt.filter(lambda x: x % 2 == 0) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Full(1), Full(2), Full(1)),
        (Full(1), Empty(int), Full(1)),
        (Empty(int), Full(2), Full(2)),
        (Empty(int), Empty(int), Empty()),
    ],
)
def test_or(a, b, expected):
    assert a.or_(b) == expected


def test_or_else_is_lazy():
    calls = []

    def fallback():
        calls.append(1)
        return Full(9)

    assert Full(1).or_else(fallback) == Full(1)
    assert calls == []
    assert Empty(int).or_else(fallback) == Full(9)
    assert calls == [1]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Full(1), Empty(int), Full(1)),
        (Empty(int), Full(2), Full(2)),
        (Full(1), Full(2), Empty()),
        (Empty(int), Empty(int), Empty()),
    ],
)
def test_xor(a, b, expected):
    assert a.xor(b) == expected


def test_flatten():
    assert Full(Full(1)).flatten() == Full(1)
    assert Full(Empty(int)).flatten() == Empty()
    assert Empty().flatten() == Empty()
    # Only one level is collapsed
    assert Full(Full(Full(1))).flatten() == Full(Full(1))


def test_flatten_rejects_non_nested():
    with pytest.raises(TypeError):
        Full(1).flatten()


@pytest.mark.parametrize(
    "opt, candidate, expected",
    [(Full(3), 3, True), (Full(3), 4, False), (Empty(int), 3, False), (Empty(), None, False)],
)
def test_contains(opt, candidate, expected):
    assert opt.contains(candidate) is expected


def test_equality():
    assert Full(1) == Full(1)
    assert Full(1) != Full(2)
    assert Full(1) != Empty()
    assert Empty(int) == Empty(str)
    assert Full(1) != 1


def test_optional_is_unhashable():
    with pytest.raises(TypeError):
        hash(Full(1))


def test_copy_is_independent():
    original = Full([1, 2])
    dup = original.copy()
    assert dup == original
    dup.unwrap().append(3)
    assert original == Full([1, 2])
    assert dup == Full([1, 2, 3])


def test_copy_module_support():
    original = Full({"k": [1]})
    assert copy.deepcopy(original) == original
    assert copy.deepcopy(original).unwrap()["k"] is not original.unwrap()["k"]
    assert copy.copy(original).unwrap() is original.unwrap()


def test_bool_iter_repr():
    assert bool(Full(0)) is True
    assert bool(Empty()) is False
    assert list(Full(1)) == [1]
    assert list(Empty()) == []
    assert repr(Full("a")) == "Full('a')"
    assert repr(Empty()) == "Empty()"


class Point:
    def __init__(self, x):
        self.x = x


def test_unwrap_or_default_when_type_needs_arguments():
    opt = Full(Point(1))
    opt.take()
    assert opt.unwrap_or_default() is None


def test_constructor_requires_presence_flag():
    with pytest.raises(TypeError):
        Optional(5)
    absent = Optional(5, False)
    assert absent == Empty()
    assert absent.to_nullable() is None
    assert list(absent) == []

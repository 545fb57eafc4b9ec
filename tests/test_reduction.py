import itertools
from operator import add
from random import random

import pytest
import lazyseq
from lazyseq import reduce, reduce_shortcut, scan, scan_shortcut, head, \
    last, find, none, contains, length, merge_all, from_pairs, index_by, \
    take, tap, some, nothing


def add_below_10(acc, x):
    return some(acc + x) if acc + x < 10 else nothing()


def test_reduce():
    data = [random() for _ in range(100)]
    assert reduce(add, 0, data) == sum(data)
    assert reduce(lambda acc, x: acc + [x], [], 'abc') == ['a', 'b', 'c']


def test_reduce_empty():
    def fail(acc, x):
        raise AssertionError("reducer should not be called")

    assert reduce(fail, 42, []) == 42
    assert reduce_shortcut(fail, 42, []) == 42


def test_reduce_shortcut():
    seen = []
    calls = []

    def reducer(acc, x):
        calls.append(x)
        return add_below_10(acc, x)

    result = reduce_shortcut(reducer, 0, tap(seen.append, [1, 2, 3, 4, 5]))
    assert result == 6
    assert calls == [1, 2, 3, 4]
    assert seen == [1, 2, 3, 4]

    assert reduce_shortcut(lambda acc, x: nothing(), 'init', [1, 2]) == 'init'

    with pytest.raises(TypeError):
        reduce_shortcut(lambda acc, x: acc + x, 0, [1, 2])


def test_scan():
    assert list(scan(add, 0, [1, 2, 3, 4])) == [1, 3, 6, 10]
    assert list(scan(add, 0, [])) == []


def test_scan_shortcut():
    assert list(scan_shortcut(add_below_10, 0, [1, 2, 3, 4, 5])) == [1, 3, 6]
    assert list(scan_shortcut(add_below_10, 0, [])) == []
    assert list(scan_shortcut(add_below_10, 20, [1])) == []

    seen = []
    list(scan_shortcut(add_below_10, 0, tap(seen.append, [1, 2, 3, 4, 5])))
    assert seen == [1, 2, 3, 4]


def test_scan_shortcut_carries_accumulator():
    result = scan_shortcut(lambda acc, x: some(acc * 10 + x), 0, [1, 2, 3])
    assert list(result) == [1, 12, 123]


@pytest.mark.timeout(3)
def test_scan_infinite():
    assert list(take(2, scan(add, 0, itertools.count(1)))) == [1, 3, 6]


def test_head_last():
    assert head([4, 5]) == some(4)
    assert head([]) == nothing()
    assert last([4, 5]) == some(5)
    assert last([]) == nothing()
    assert last(iter([None])) == some(None)

    seen = []
    assert head(tap(seen.append, [4, 5, 6])) == some(4)
    assert seen == [4]


@pytest.mark.timeout(3)
def test_head_infinite():
    assert head(itertools.count(3)) == some(3)


def test_find():
    data = [1, 2, 3, 4]
    assert find(lambda x: x > 2, data) == some(3)
    assert find(lambda x: x > 5, data) == nothing()
    assert find(lambda x: True, []) == nothing()


def test_boolean_scans():
    def positive(x):
        return x > 0

    assert lazyseq.any(positive, [-1, 2])
    assert not lazyseq.any(positive, [-1, -2])
    assert not lazyseq.any(positive, [])

    assert lazyseq.all(positive, [1, 2])
    assert not lazyseq.all(positive, [1, -2])
    assert lazyseq.all(positive, [])

    assert none(positive, [-1, -2])
    assert not none(positive, [-1, 2])
    assert none(positive, [])

    assert contains(2, [1, 2, 3])
    assert not contains(4, [1, 2, 3])
    assert not contains(1, [])


@pytest.mark.timeout(3)
def test_boolean_scans_short_circuit():
    assert lazyseq.any(lambda x: x > 10, itertools.count())
    assert not lazyseq.all(lambda x: x < 10, itertools.count())
    assert not none(lambda x: x > 10, itertools.count())
    assert contains(100, itertools.count())


def test_length():
    assert length([]) == 0
    assert length([1, 2, 3]) == 3
    assert length(x for x in 'abcd') == 4


def test_merge_all():
    records = [{'a': 1, 'b': 2}, {'b': 3}, {'c': 4}]
    assert merge_all(records) == {'a': 1, 'b': 3, 'c': 4}
    assert records == [{'a': 1, 'b': 2}, {'b': 3}, {'c': 4}]
    assert merge_all([]) == {}


def test_from_pairs():
    assert from_pairs([('a', 1), ('b', 2), ('a', 3)]) == {'a': 3, 'b': 2}
    assert from_pairs([]) == {}


def test_index_by():
    assert index_by(len, ['a', 'bb', 'cc']) == {1: 'a', 2: 'cc'}
    assert index_by(len, []) == {}

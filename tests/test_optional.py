import pickle

import pytest
from lazyseq import Optional, Some, Nothing, some, nothing, is_some, is_nothing


def test_constructors():
    x = some(3)
    assert isinstance(x, Some)
    assert isinstance(x, Optional)
    assert x.value == 3

    assert isinstance(nothing(), Nothing)
    assert isinstance(nothing(), Optional)
    assert nothing() is nothing()


def test_predicates():
    assert is_some(some(1))
    assert is_some(some(None))
    assert not is_some(nothing())
    assert is_nothing(nothing())
    assert not is_nothing(some(None))
    assert not is_some(None)
    assert not is_nothing(None)


def test_equality():
    assert some(1) == some(1)
    assert some(1) != some(2)
    assert some(1) != nothing()
    assert nothing() != some(1)
    assert nothing() == nothing()
    assert some([1, 2]) == some([1, 2])
    assert some(None) != nothing()

    assert len({some(1), some(1), nothing(), nothing()}) == 2


def test_repr():
    assert repr(some('a')) == "Some('a')"
    assert repr(nothing()) == "Nothing"


def test_some_is_immutable():
    x = some(1)
    s = {x}

    with pytest.raises(AttributeError):
        x.value = 2
    with pytest.raises(AttributeError):
        del x.value

    assert x.value == 1
    assert x in s


def test_nothing_is_shared():
    assert Nothing() is nothing()
    assert Nothing() is Nothing()


def test_pickling():
    assert pickle.loads(pickle.dumps(some([1, 2]))) == some([1, 2])
    assert pickle.loads(pickle.dumps(nothing())) is nothing()

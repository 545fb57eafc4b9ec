"""Operations that depend on the position of the items."""

import itertools
from collections import namedtuple
from operator import attrgetter

from .base import LazySequence, operation
from .mapping import map, filter, chain
from .reduction import head, last
from .shape import iterable_of
from .utils import check_callable, check_count


IndexedValue = namedtuple('IndexedValue', ['value', 'index'])

get_value = attrgetter('value')
get_index = attrgetter('index')


class Indexing(LazySequence):
    def __init__(self, sequence):
        super().__init__()
        self.sequence = sequence

    def generate(self):
        for index, value in enumerate(self.sequence):
            yield IndexedValue(value, index)


def zip_index(sequence):
    """Pair each item with its position.

    Example:

        >>> list(lazyseq.zip_index(['a', 'b']))
        [IndexedValue(value='a', index=0), IndexedValue(value='b', index=1)]
    """
    return Indexing(sequence)


def adjust(modifier, index, sequence):
    """Replace the item at `index` by :code:`modifier(item)`.

    Nothing changes if the sequence has no item at this position.

    Example:

        >>> list(lazyseq.adjust(lambda x: x * x, 2, [1, 2, 3]))
        [1, 2, 9]
    """
    check_callable(modifier, "modifier")
    check_count(index, "index", "adjust")
    pipeline = map(
        lambda x: modifier(x.value) if x.index == index else x.value,
        zip_index(sequence))
    return operation("adjust", pipeline, sequence)


def insert(index, value, sequence):
    """Insert an item before the item currently at `index`.

    Nothing is inserted if the sequence is shorter than `index + 1`: this
    cannot be used to append at the end.

    Example:

        >>> list(lazyseq.insert(1, 'x', ['a', 'b', 'c']))
        ['a', 'x', 'b', 'c']
    """
    check_count(index, "index", "insert")
    return operation(
        "insert", splice(index, iterable_of(value), sequence), sequence)


def insert_all(index, values, sequence):
    """Insert several items before the item currently at `index`.

    Like :func:`insert`, nothing happens past the end of the sequence.
    """
    check_count(index, "index", "insert_all")
    return operation("insert_all", splice(index, values, sequence), sequence)


def splice(index, values, sequence):
    return chain(
        lambda x: itertools.chain(values, iterable_of(x.value))
        if x.index == index else iterable_of(x.value),
        zip_index(sequence))


def remove(start, count, sequence):
    """Remove `count` items starting from position `start`.

    Example:

        >>> list(lazyseq.remove(1, 2, ['a', 'b', 'c', 'd']))
        ['a', 'd']
    """
    check_count(start, "start", "remove")
    check_count(count, "count", "remove")
    pipeline = map(
        get_value,
        filter(lambda x: not start <= x.index < start + count,
               zip_index(sequence)))
    return operation("remove", pipeline, sequence)


def find_index(predicate, sequence):
    """Return the position of the first item for which `predicate` holds.

    Returns:
        (Optional[int]): :code:`some(index)` or :code:`nothing()` if no item
        matches.
    """
    check_callable(predicate, "predicate")
    pipeline = map(
        get_index,
        filter(lambda x: predicate(x.value), zip_index(sequence)))
    return head(operation("find_index", pipeline, sequence))


def index_of(value, sequence):
    """Return the position of the first item equal to `value`.

    Example:

        >>> lazyseq.index_of('b', ['a', 'b', 'c', 'b'])
        Some(1)
    """
    return find_index(lambda x: x == value, sequence)


def last_index_of(value, sequence):
    """Return the position of the last item equal to `value`.

    The sequence must be finite since it is read entirely.
    """
    pipeline = map(
        get_index,
        filter(lambda x: x.value == value, zip_index(sequence)))
    return last(operation("last_index_of", pipeline, sequence))

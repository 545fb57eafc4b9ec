"""Reductions, scans and the consumers built upon them."""

from .base import LazySequence, operation
from .mapping import filter
from .optional import some, nothing, is_some, is_nothing
from .utils import check_callable, check_optional


# Reduction family ------------------------------------------------------------

def reduce_shortcut(reducer, initial, sequence):
    """Fold a sequence from left to right, possibly stopping early.

    Args:
        reducer (Callable[[Any, Any], Optional]):
            Called with the accumulator and the next item, returns
            :code:`some(new_accumulator)` to continue or :code:`nothing()`
            to stop.
        initial (Any):
            Initial accumulator value.
        sequence (Iterable):
            The items to reduce.

    Returns:
        The last accumulator value. The item for which the reducer stopped is
        not merged into it and no item is read after it.

    Example:

        >>> def add_below_10(acc, x):
        ...     return lazyseq.some(acc + x) if acc + x < 10 \\
        ...         else lazyseq.nothing()
        >>> lazyseq.reduce_shortcut(add_below_10, 0, [1, 2, 3, 4, 5])
        6
    """
    check_callable(reducer, "reducer")

    accumulator = initial
    for value in sequence:
        result = check_optional(reducer(accumulator, value), "reducer")
        if is_nothing(result):
            break
        accumulator = result.value

    return accumulator


def reduce(reducer, initial, sequence):
    """Fold a sequence from left to right.

    Equivalent to :func:`python:functools.reduce` with a mandatory initial
    value.
    """
    check_callable(reducer, "reducer")
    return reduce_shortcut(
        lambda acc, x: some(reducer(acc, x)), initial, sequence)


class ShortcutScan(LazySequence):
    def __init__(self, reducer, initial, sequence):
        check_callable(reducer, "reducer")
        super().__init__()
        self.reducer = reducer
        self.initial = initial
        self.sequence = sequence

    def generate(self):
        accumulator = self.initial
        for value in self.sequence:
            result = check_optional(
                self.reducer(accumulator, value), "reducer")
            if is_nothing(result):
                return
            accumulator = result.value
            yield accumulator


def scan_shortcut(reducer, initial, sequence):
    """Return the successive accumulator values of :func:`reduce_shortcut`.

    The initial value is not part of the result, which ends as soon as the
    reducer returns :code:`nothing()`.

    Example:

        >>> def add_below_10(acc, x):
        ...     return lazyseq.some(acc + x) if acc + x < 10 \\
        ...         else lazyseq.nothing()
        >>> list(lazyseq.scan_shortcut(add_below_10, 0, [1, 2, 3, 4, 5]))
        [1, 3, 6]
    """
    return ShortcutScan(reducer, initial, sequence)


def scan(reducer, initial, sequence):
    """Return the successive accumulator values of :func:`reduce`.

    Example:

        >>> list(lazyseq.scan(lambda acc, x: acc + x, 0, [1, 2, 3, 4]))
        [1, 3, 6, 10]
    """
    check_callable(reducer, "reducer")
    pipeline = ShortcutScan(
        lambda acc, x: some(reducer(acc, x)), initial, sequence)
    return operation("scan", pipeline, sequence)


# Consumers -------------------------------------------------------------------

def head(sequence):
    """Return the first item, reading nothing past it."""
    for value in sequence:
        return some(value)

    return nothing()


def last(sequence):
    """Return the final item, the sequence must be finite."""
    return reduce(lambda _, x: some(x), nothing(), sequence)


def find(predicate, sequence):
    """Return the first item for which `predicate` holds.

    Example:

        >>> lazyseq.find(lambda x: x > 2, [1, 2, 3, 4])
        Some(3)
        >>> lazyseq.find(lambda x: x > 5, [1, 2, 3, 4])
        Nothing
    """
    return head(filter(predicate, sequence))


def any(predicate, sequence):
    """Return whether `predicate` holds for at least one item."""
    return is_some(find(predicate, sequence))


def all(predicate, sequence):
    """Return whether `predicate` holds for every item."""
    check_callable(predicate, "predicate")
    return not any(lambda x: not predicate(x), sequence)


def none(predicate, sequence):
    """Return whether `predicate` holds for no item."""
    return not any(predicate, sequence)


def contains(value, sequence):
    return any(lambda x: x == value, sequence)


def length(sequence):
    """Count the items of a finite sequence."""
    return reduce(lambda acc, _: acc + 1, 0, sequence)


def merge_all(records):
    """Merge a sequence of mappings into a new :class:`dict`.

    Keys from later records take precedence.

    Example:

        >>> lazyseq.merge_all([{'a': 1, 'b': 2}, {'b': 3}, {'c': 4}])
        {'a': 1, 'b': 3, 'c': 4}
    """
    return reduce(lambda acc, record: {**acc, **record}, {}, records)


def from_pairs(pairs):
    """Build a :class:`dict` from `(key, value)` pairs, last pair wins."""
    result = {}
    for key, value in pairs:
        result[key] = value

    return result


def index_by(indexer, sequence):
    """Build a :class:`dict` of the items keyed by :code:`indexer(item)`.

    When several items share a key, the last one is kept.

    Example:

        >>> lazyseq.index_by(len, ['a', 'bb', 'cc'])
        {1: 'a', 2: 'cc'}
    """
    check_callable(indexer, "indexer")
    return {indexer(value): value for value in sequence}

"""Element-wise transformations."""

from operator import itemgetter

from .base import LazySequence, operation
from .utils import check_callable


class Mapping(LazySequence):
    def __init__(self, f, sequence):
        check_callable(f, "mapper")
        super().__init__()
        self.f = f
        self.sequence = sequence

    def generate(self):
        for value in self.sequence:
            yield self.f(value)


def map(mapper, sequence):
    """Return a mapping of `mapper` over the sequence.

    Equivalent to :code:`(mapper(x) for x in sequence)` except that the
    result can be iterated again when `sequence` can.

    Example:

        >>> def do(y):
        ...     print("computing now")
        ...     return y + 2
        ...
        >>> m = lazyseq.map(do, [1, 2, 3])
        >>> print([v for v in m])
        computing now
        computing now
        computing now
        [3, 4, 5]
    """
    return Mapping(mapper, sequence)


class Filtering(LazySequence):
    def __init__(self, predicate, sequence):
        check_callable(predicate, "predicate")
        super().__init__()
        self.predicate = predicate
        self.sequence = sequence

    def generate(self):
        for value in self.sequence:
            if self.predicate(value):
                yield value


def filter(predicate, sequence):
    """Return the items of the sequence for which `predicate` holds.

    Example:

        >>> list(lazyseq.filter(lambda x: x % 2 == 0, [1, 2, 3, 4]))
        [2, 4]
    """
    return Filtering(predicate, sequence)


def reject(predicate, sequence):
    """Return the items of the sequence for which `predicate` does not hold."""
    check_callable(predicate, "predicate")
    return operation(
        "reject", Filtering(lambda x: not predicate(x), sequence), sequence)


class Chaining(LazySequence):
    def __init__(self, f, sequence):
        check_callable(f, "mapper")
        super().__init__()
        self.f = f
        self.sequence = sequence

    def generate(self):
        for value in self.sequence:
            for nested_value in self.f(value):
                yield nested_value


def chain(mapper, sequence):
    """Map each item to a sequence and flatten the results.

    The nested sequence of an item is fully consumed before the next item is
    read. `mapper` may return empty sequences.

    Example:

        >>> list(lazyseq.chain(lambda x: [x] * x, [1, 0, 3]))
        [1, 3, 3, 3]
    """
    return Chaining(mapper, sequence)


def pluck(key, sequence):
    """Return the field `key` of each item (:code:`item[key]`).

    Example:

        >>> people = [{'name': 'ada', 'age': 36}, {'name': 'alan', 'age': 41}]
        >>> list(lazyseq.pluck('name', people))
        ['ada', 'alan']
    """
    return operation("pluck", Mapping(itemgetter(key), sequence), sequence)

"""Sequences produced from a seed or a value rather than from an input."""

from .base import LazySequence, operation
from .mapping import map
from .optional import some, nothing, is_nothing
from .utils import check_callable, check_count, check_optional, isint


class Unfolding(LazySequence):
    def __init__(self, generator, seed):
        check_callable(generator, "generator")
        super().__init__()
        self.generator = generator
        self.seed = seed

    def generate(self):
        seed = self.seed
        while True:
            result = check_optional(self.generator(seed), "generator")
            if is_nothing(result):
                return
            value, seed = result.value
            yield value


def unfold(generator, seed):
    """Build a sequence from a seed value.

    Args:
        generator (Callable[[Any], Optional[Tuple[Any, Any]]]):
            Returns :code:`some((item, next_seed))` to produce an item and
            carry on with the next seed, or :code:`nothing()` to end the
            sequence.
        seed (Any):
            The first seed.

    Example:

        >>> def squares_below_3(n):
        ...     return lazyseq.some((n * n, n + 1)) if n < 3 \\
        ...         else lazyseq.nothing()
        >>> list(lazyseq.unfold(squares_below_3, 0))
        [0, 1, 4]
    """
    return Unfolding(generator, seed)


def range(start, stop):
    """Return the integers from `start` to `stop` excluded.

    The result is empty when :code:`start >= stop`.
    """
    if not isint(start) or not isint(stop):
        raise TypeError("range bounds must be integers")

    def step(n):
        return some((n, n + 1)) if n < stop else nothing()

    return operation("range", unfold(step, start))


def indices(count):
    """Return the integers from 0 to `count` excluded."""
    check_count(count, "count", "indices")
    return range(0, count)


def repeat(value, count=None):
    """Make a sequence by repeating a value.

    Args:
        value (Any): The item to repeat.
        count (Optional[int]): Number of repetitions, infinite by default.

    Example:

        >>> list(lazyseq.repeat('a', 3))
        ['a', 'a', 'a']
    """
    if count is None:
        forever = unfold(lambda _: some((value, None)), None)
        return operation("repeat", forever)

    check_count(count, "count", "repeat")
    return operation("repeat", map(lambda _: value, range(0, count)))


def times(generator, count):
    """Return :code:`generator(i)` for :code:`i` from 0 to `count` excluded.

    Example:

        >>> list(lazyseq.times(lambda i: i * 10, 4))
        [0, 10, 20, 30]
    """
    check_callable(generator, "generator")
    check_count(count, "count", "times")
    return operation("times", map(generator, range(0, count)))


class Pairs(LazySequence):
    def __init__(self, mapping):
        super().__init__()
        self.mapping = mapping

    def generate(self):
        for key in self.mapping.keys():
            yield key, self.mapping[key]


def to_pairs(mapping):
    """Return the `(key, value)` pairs of a mapping, in iteration order.

    Example:

        >>> list(lazyseq.to_pairs({'a': 1, 'b': 2}))
        [('a', 1), ('b', 2)]
    """
    return Pairs(mapping)

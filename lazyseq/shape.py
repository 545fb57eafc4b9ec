"""Operations that assemble sequences or their elements."""

from operator import add

from .base import LazySequence
from .reduction import reduce


class Concatenation(LazySequence):
    def __init__(self, sequences):
        super().__init__()
        self.sequences = []
        for seq in sequences:
            if isinstance(seq, Concatenation):
                for subseq in seq.sequences:
                    self.sequences.append(subseq)
            else:
                self.sequences.append(seq)

    def generate(self):
        for seq in self.sequences:
            for value in seq:
                yield value


def concat(first, second):
    """Return the items of `first` followed by the items of `second`.

    `second` is never read if `first` is infinite.

    Example:

        >>> list(lazyseq.concat([0, 1, 2], [3, 4]))
        [0, 1, 2, 3, 4]
    """
    return Concatenation([first, second])


def iterable_of(value):
    """Return a sequence made of a single item."""
    return (value,)


def append(value, sequence):
    """Add an item after the last item of the sequence."""
    return concat(sequence, iterable_of(value))


def prepend(value, sequence):
    """Add an item before the first item of the sequence."""
    return concat(iterable_of(value), sequence)


class Interspersing(LazySequence):
    def __init__(self, separator, sequence):
        super().__init__()
        self.separator = separator
        self.sequence = sequence

    def generate(self):
        first = True
        for value in self.sequence:
            if not first:
                yield self.separator
            yield value
            first = False


def intersperse(separator, sequence):
    """Insert a separator between each pair of consecutive items.

    Example:

        >>> list(lazyseq.intersperse(0, [1, 2, 3]))
        [1, 0, 2, 0, 3]
    """
    return Interspersing(separator, sequence)


def join(separator, strings):
    """Concatenate strings with a separator in between.

    Example:

        >>> lazyseq.join(", ", ["a", "b", "c"])
        'a, b, c'
    """
    return reduce(add, '', intersperse(separator, strings))

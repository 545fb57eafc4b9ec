"""Operations that keep or skip part of a sequence."""

from collections import deque
from operator import itemgetter

from .base import LazySequence, operation
from .indexing import zip_index, get_value
from .mapping import map, filter
from .optional import some, nothing, is_nothing
from .reduction import scan_shortcut
from .utils import check_callable, check_count


def take(count, sequence):
    """Return the items from the start of the sequence through index `count`.

    .. warning::

        The item at position `count` is included, so the result holds
        :code:`count + 1` items when the sequence is long enough.

    Reading stops right after the first item past position `count`, which
    makes it suitable for infinite sequences.

    Example:

        >>> list(lazyseq.take(2, ['a', 'b', 'c', 'd', 'e']))
        ['a', 'b', 'c']
    """
    check_count(count, "count", "take")
    pipeline = scan_shortcut(
        lambda _, x: some(x.value) if x.index <= count else nothing(),
        None, zip_index(sequence))
    return operation("take", pipeline, sequence)


def take_while(predicate, sequence):
    """Return the leading items for which `predicate` holds.

    Reading stops at the first item for which it does not, that item is
    not part of the result.

    Example:

        >>> list(lazyseq.take_while(lambda x: x < 3, [1, 2, 3, 1]))
        [1, 2]
    """
    check_callable(predicate, "predicate")
    pipeline = scan_shortcut(
        lambda _, x: some(x) if predicate(x) else nothing(),
        None, sequence)
    return operation("take_while", pipeline, sequence)


def drop(count, sequence):
    """Skip the first `count` items."""
    check_count(count, "count", "drop")
    pipeline = map(get_value,
                   filter(lambda x: x.index >= count, zip_index(sequence)))
    return operation("drop", pipeline, sequence)


def drop_while(predicate, sequence):
    """Skip the leading items for which `predicate` holds.

    Once an item fails the predicate, it and all the subsequent items are
    returned and the predicate is no longer evaluated.

    Example:

        >>> list(lazyseq.drop_while(lambda x: x <= 2, [1, 2, 3, 4, 3, 2, 1]))
        [3, 4, 3, 2, 1]
    """
    check_callable(predicate, "predicate")
    # each state is (open, item), open latches at the first failing item
    states = scan_shortcut(
        lambda state, x: some((state[0] or not predicate(x), x)),
        (False, None), sequence)
    pipeline = map(itemgetter(1), filter(itemgetter(0), states))
    return operation("drop_while", pipeline, sequence)


class RepeatsDrop(LazySequence):
    def __init__(self, sequence):
        super().__init__()
        self.sequence = sequence

    def generate(self):
        previous = nothing()
        for value in self.sequence:
            if is_nothing(previous) or previous.value != value:
                yield value
                previous = some(value)


def drop_repeats(sequence):
    """Collapse runs of consecutive equal items into one.

    Example:

        >>> list(lazyseq.drop_repeats([1, 1, 2, 2, 2, 1]))
        [1, 2, 1]
    """
    return RepeatsDrop(sequence)


class LastDrop(LazySequence):
    def __init__(self, count, sequence):
        super().__init__()
        self.count = count
        self.sequence = sequence

    def generate(self):
        buffer = deque()
        for value in self.sequence:
            buffer.append(value)
            if len(buffer) > self.count:
                yield buffer.popleft()


def drop_last(count, sequence):
    """Skip the last `count` items.

    At most `count` items are buffered ahead of the returned ones.

    Example:

        >>> list(lazyseq.drop_last(2, [1, 2, 3, 4, 5]))
        [1, 2, 3]
    """
    check_count(count, "count", "drop_last")
    return LastDrop(count, sequence)


def tail(sequence):
    """Skip the first item."""
    return drop(1, sequence)


def init(sequence):
    """Skip the last item."""
    return drop_last(1, sequence)


def slice(start, stop, sequence):
    """Return the items at positions `start` to `stop` excluded.

    Reading stops at position `stop`.

    Example:

        >>> list(lazyseq.slice(1, 3, ['a', 'b', 'c', 'd']))
        ['b', 'c']
    """
    check_count(start, "start", "slice")
    check_count(stop, "stop", "slice")
    head_part = scan_shortcut(
        lambda _, x: some(x) if x.index < stop else nothing(),
        None, zip_index(sequence))
    pipeline = map(get_value, filter(lambda x: x.index >= start, head_part))
    return operation("slice", pipeline, sequence)

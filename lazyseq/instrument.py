"""Side effects and debugging tools."""

from .base import LazySequence
from .utils import check_callable


class Tapping(LazySequence):
    def __init__(self, action, sequence):
        check_callable(action, "action")
        super().__init__()
        self.action = action
        self.sequence = sequence

    def generate(self):
        for value in self.sequence:
            self.action(value)
            yield value


def tap(action, sequence):
    """Wrap a sequence to trigger a function on each read.

    `action` is called with each item right before it is passed on, items
    which are never requested downstream do not trigger it.

    Example:

        >>> watched = lazyseq.tap(print, [1, 2, 3])
        >>> lazyseq.head(watched)
        1
        Some(1)
    """
    return Tapping(action, sequence)


def for_each(action, sequence):
    """Call `action` on every item of the sequence and discard the results."""
    check_callable(action, "action")
    for value in sequence:
        action(value)

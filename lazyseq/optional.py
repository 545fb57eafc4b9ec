"""A value that may be absent.

Operations which can fail to produce a value (searches, :func:`head`,
:func:`last`...) return an :class:`Optional` instead of :code:`None`, and
reducers passed to :func:`reduce_shortcut` or :func:`scan_shortcut` return
one to tell whether the reduction should go on.

Example:

    >>> from lazyseq import some, nothing, is_some
    >>> some(3)
    Some(3)
    >>> is_some(nothing())
    False
"""


class Optional(object):
    """Base class of :class:`Some` and :class:`Nothing`."""
    __slots__ = ()


class Some(Optional):
    """A present value, accessible through the :attr:`value` attribute."""
    __slots__ = ('value',)

    def __init__(self, value):
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Some is immutable")

    def __delattr__(self, name):
        raise AttributeError("Some is immutable")

    def __reduce__(self):
        return Some, (self.value,)

    def __eq__(self, other):
        return isinstance(other, Some) and self.value == other.value

    def __hash__(self):
        return hash((Some, self.value))

    def __repr__(self):
        return "Some({!r})".format(self.value)


class Nothing(Optional):
    """The absence of a value, all instances are the same object."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return Nothing, ()

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(Nothing)

    def __repr__(self):
        return "Nothing"


_nothing = Nothing()


def some(value):
    """Wrap a present value."""
    return Some(value)


def nothing():
    """Return the absent value."""
    return _nothing


def is_some(x):
    return isinstance(x, Some)


def is_nothing(x):
    return isinstance(x, Nothing)

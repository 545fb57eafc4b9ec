"""
A python library to transform iterables lazily.

The lazyseq package contains functions to transform sequences (anything
that supports iteration such as lists, generators or other lazyseq
sequences) with a pipeline of small composable operations.

Transformations feature on-demand evaluation: nothing is read from the
input before the result is iterated, and only as much as needed to produce
the requested items, which makes infinite sequences workable.
Operations that may fail to find a value return an :class:`Optional`
(:code:`some(value)` or :code:`nothing()`) rather than :code:`None`.

Errors raised by user functions during iteration are reported as
:class:`EvaluationError`, see :func:`seterr`.
"""

from .errors import EvaluationError, seterr
from .generation import indices, range, repeat, times, to_pairs, unfold
from .indexing import (
    IndexedValue,
    adjust,
    find_index,
    index_of,
    insert,
    insert_all,
    last_index_of,
    remove,
    zip_index,
)
from .instrument import for_each, tap
from .mapping import chain, filter, map, pluck, reject
from .optional import Nothing, Optional, Some, is_nothing, is_some, nothing, some
from .reduction import (
    all,
    any,
    contains,
    find,
    from_pairs,
    head,
    index_by,
    last,
    length,
    merge_all,
    none,
    reduce,
    reduce_shortcut,
    scan,
    scan_shortcut,
)
from .selection import (
    drop,
    drop_last,
    drop_repeats,
    drop_while,
    init,
    slice,
    tail,
    take,
    take_while,
)
from .shape import append, concat, intersperse, iterable_of, join, prepend

__all__ = [
    "EvaluationError",
    "seterr",
    "Optional",
    "Some",
    "Nothing",
    "some",
    "nothing",
    "is_some",
    "is_nothing",
    "IndexedValue",
    "zip_index",
    "map",
    "filter",
    "reject",
    "chain",
    "pluck",
    "concat",
    "iterable_of",
    "append",
    "prepend",
    "intersperse",
    "join",
    "reduce_shortcut",
    "reduce",
    "scan_shortcut",
    "scan",
    "head",
    "last",
    "find",
    "any",
    "all",
    "none",
    "contains",
    "length",
    "merge_all",
    "from_pairs",
    "index_by",
    "adjust",
    "insert",
    "insert_all",
    "remove",
    "find_index",
    "index_of",
    "last_index_of",
    "take",
    "take_while",
    "drop",
    "drop_while",
    "drop_repeats",
    "drop_last",
    "tail",
    "init",
    "slice",
    "unfold",
    "range",
    "indices",
    "repeat",
    "times",
    "to_pairs",
    "tap",
    "for_each",
]

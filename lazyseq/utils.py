"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .optional import Optional


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


logger = get_logger(__name__)


def check_callable(f, name):
    if not callable(f):
        raise TypeError(name + " must be callable")


def check_count(count, name, caller):
    """Validate an integer argument of `caller`.

    Negative values are a caller error that is reported but left as is,
    the caller then processes them literally.
    """
    if not isint(count):
        raise TypeError(
            "{} of {} must be an integer, not {}".format(
                name, caller, count.__class__.__name__))

    if count < 0:
        logger.warning(
            "%s received a negative %s (%d), the result is unspecified",
            caller, name, count)


def check_optional(result, name):
    """Ensure the value returned by the user function `name` is an Optional."""
    if not isinstance(result, Optional):
        raise TypeError(
            "{} must return an Optional, not {}".format(
                name, result.__class__.__name__))

    return result

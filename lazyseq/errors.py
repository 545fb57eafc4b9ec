import os
import threading
import traceback

from tblib import pickling_support


class EvaluationError(Exception):
    """Raised when evaluating an element of a lazy sequence fails."""


# Tracebacks of wrapped errors survive pickling, so failures in a pipeline
# consumed by a worker process can be reported by the parent.
pickling_support.install()


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered while
            iterating a lazy sequence are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate unchanged, might
              facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

package_dir = os.path.dirname(os.path.abspath(__file__)) + os.sep


def format_stack():
    """Describe the current call stack, minus the frames of this package."""
    frames = [f for f in traceback.extract_stack()
              if not os.path.abspath(f.filename).startswith(package_dir)]
    return "".join(traceback.format_list(frames))


def guarded(owner, iterator):
    """Iterate on behalf of `owner`, wrapping errors as configured."""
    i = 0
    try:
        for value in iterator:
            yield value
            i += 1

    except Exception as error:
        if seterr() == 'passthrough' or isinstance(error, EvaluationError):
            raise
        else:
            msg = "Failed to evaluate item {} in {} created at:\n{}".format(
                i, owner.name, owner.stack)
            raise EvaluationError(msg) from error

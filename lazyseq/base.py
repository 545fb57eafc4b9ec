from abc import ABC, abstractmethod

from .errors import format_stack, guarded


class LazySequence(ABC):
    """An iterable whose items are only computed while it is iterated.

    Subclasses implement :meth:`generate`, which may iterate the input
    sequences and call user code. Each call to :code:`iter()` restarts the
    computation from the inputs, so the result can be traversed again if
    and only if they can.

    Errors are reported under :attr:`name`, unless the sequence is an
    internal stage of an :class:`Operation` which reports them instead.
    """
    def __init__(self):
        self.stack = format_stack()
        self.name = self.__class__.__name__
        self.internal = False

    def __iter__(self):
        if self.internal:
            return self.generate()
        return guarded(self, self.generate())

    @abstractmethod
    def generate(self):
        raise NotImplementedError


class Operation(LazySequence):
    def __init__(self, name, pipeline):
        super().__init__()
        self.name = name
        self.pipeline = pipeline

    def generate(self):
        return iter(self.pipeline)


def operation(name, pipeline, source=None):
    """Present a pipeline of stages as a single operation called `name`.

    The stages between `pipeline` and `source`, following the
    :code:`sequence` attribute, no longer report errors themselves.
    """
    stage = pipeline
    while isinstance(stage, LazySequence) and stage is not source:
        stage.internal = True
        stage = getattr(stage, 'sequence', None)

    return Operation(name, pipeline)

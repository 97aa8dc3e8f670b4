# preprocessing/pipeline.py
import logging
from typing import Iterable, Iterator

from . import steps
from .operations import OPERATION_TYPES, Lowercase, NGrams, Operation, RemovePunctuation, TrimSpaces

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Ordered, immutable sequence of operations applied left to right to a string.

    append() returns a new pipeline, so a pipeline can be shared and reused freely:

        pipeline = Pipeline().append(RemovePunctuation()).append(TrimSpaces()).append(Lowercase())
        pipeline.process("Dog, can ! bark.;")  # "dog can bark"
    """

    __slots__ = ("_operations",)

    def __init__(self, operations: Iterable[Operation] = ()):
        operations = tuple(operations)
        for operation in operations:
            _check_operation(operation)
        self._operations = operations

    @property
    def operations(self) -> tuple[Operation, ...]:
        return self._operations

    def append(self, operation: Operation) -> "Pipeline":
        _check_operation(operation)
        return Pipeline(self._operations + (operation,))

    def process(self, text: str) -> str:
        """
        Runs every operation in order and returns the final text.

        Raises:
            InvalidNGramSize: an NGrams operation has a size that is not a positive integer.
                The remaining operations are not run.
        """
        for index, operation in enumerate(self._operations):
            text = _apply(operation, text)
            logger.debug("step %d %r -> %d chars", index, operation, len(text))
        return text

    def __call__(self, text: str) -> str:
        return self.process(text)

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        return self._operations == other._operations

    def __hash__(self) -> int:
        return hash(self._operations)

    def __repr__(self) -> str:
        return f"Pipeline({list(self._operations)!r})"


def _check_operation(operation) -> None:
    if not isinstance(operation, OPERATION_TYPES):
        raise TypeError(f"Expected an Operation, got {type(operation).__name__}")


def _apply(operation: Operation, text: str) -> str:
    match operation:
        case RemovePunctuation():
            return steps.remove_punctuation(text)
        case TrimSpaces():
            return steps.trim_spaces(text)
        case Lowercase():
            return steps.lowercase(text)
        case NGrams(separator=separator, n=n):
            return steps.ngrams(text, separator, n)
    raise TypeError(f"Unknown operation: {operation!r}")

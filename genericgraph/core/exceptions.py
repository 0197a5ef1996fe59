"""
Error taxonomy for the generic graph container.

Precondition violations are raised before the graph is touched, so a caller
catching them still holds a consistent graph. Corruption errors mean an
earlier unchecked change broke the container and are not meant to be handled
locally.
"""


class GraphError(Exception):
    """Base exception for genericgraph errors."""

    pass


class InvalidArgumentError(GraphError, ValueError):
    """Raised when an operation's precondition does not hold."""

    pass


class IndexAlignmentError(InvalidArgumentError):
    """Raised when a vertex or edge index is not the next sequential slot."""

    def __init__(self, sKind: str, lIndex_given: int, lIndex_expected: int):
        self.sKind = sKind
        self.lIndex_given = lIndex_given
        self.lIndex_expected = lIndex_expected
        super().__init__(f"{sKind} index {lIndex_given} does not match the next slot {lIndex_expected}")


class MissingEntityError(InvalidArgumentError, LookupError):
    """Raised when a vertex, edge or endpoint pair is not in the graph."""

    pass


class GraphCorruptionError(GraphError, RuntimeError):
    """Raised when the internal containers disagree with each other."""

    pass

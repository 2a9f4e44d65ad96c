"""
Exceptions raised by the k-shortest-paths engine.
"""


class KShortestPathsError(Exception):
    """Base exception for the package."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidGraphError(KShortestPathsError, ValueError):
    """Raised when graph input or a query is malformed."""
    pass


class NegativeWeightError(InvalidGraphError):
    """Raised when an edge weight is negative (Dijkstra precondition)."""
    pass


class HeuristicMismatchError(KShortestPathsError):
    """Raised when the graph was preprocessed for another destination."""
    pass


class QueueInvariantError(KShortestPathsError, AssertionError):
    """Raised on misuse of the indexed priority queue. Never recoverable."""
    pass


class PathMismatchError(KShortestPathsError):
    """Raised when a reported path does not match the graph."""
    pass

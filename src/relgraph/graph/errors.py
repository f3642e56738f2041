from __future__ import annotations


class MalformedGraphError(ValueError):
    """
    Raised when a graph cannot be built from the supplied vertices and edges.
    """

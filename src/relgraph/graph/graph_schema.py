from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Edge:
    """
    Directed connection from a source vertex to a destination vertex.

    Edges compare and hash by value, so a set of edges holds at most
    one edge per ordered pair.
    """

    source: Any
    destination: Any

    def as_tuple(self) -> Tuple[Any, Any]:
        return (self.source, self.destination)

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class TraversalConfig:
    """
    Controls how the recursive traversals use the interpreter stack.

    Recursive searches temporarily raise the interpreter recursion limit
    by the vertex count of the graph, never beyond ``recursion_limit``.
    """

    recursion_limit: int = 10_000
    recursion_margin: int = 64


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RelgraphConfig:
    """
    Root configuration object for relgraph.

    Constructed explicitly and passed to the graph, never read from
    module globals.
    """

    traversal: TraversalConfig = field(default_factory=TraversalConfig)

"""
Configuration layer for relgraph.

Configuration in relgraph is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
"""

from relgraph.config.settings import TraversalConfig, RelgraphConfig

__all__ = [
    "TraversalConfig",
    "RelgraphConfig",
]

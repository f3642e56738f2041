from __future__ import annotations

import logging
import sys
import threading
from collections import deque
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Deque, Iterator, List, Optional, Set

from relgraph.config.settings import TraversalConfig

if TYPE_CHECKING:
    from relgraph.graph.graph_store import Graph

# The recursion limit is process-wide; one raised scope at a time.
_headroom_lock = threading.RLock()


@contextmanager
def recursion_headroom(extra: int, ceiling: int) -> Iterator[None]:
    """
    Temporarily raise the interpreter recursion limit by ``extra`` frames,
    never beyond ``ceiling``. The previous limit is restored on exit.

    Scopes in other threads wait until the current one has restored
    the limit.
    """

    with _headroom_lock:
        previous = sys.getrecursionlimit()
        target = min(previous + extra, max(previous, ceiling))
        sys.setrecursionlimit(target)
        try:
            yield
        finally:
            sys.setrecursionlimit(previous)


class TraversalEngine:
    """
    Deterministic multi-root search over a Graph.

    Every search launches once per root, lowest root first, and shares a
    single visited set across launches. Neighbours are always expanded in
    ascending order, so output never depends on set iteration order.
    """

    def __init__(
        self,
        graph: "Graph",
        *,
        config: Optional[TraversalConfig] = None,
    ) -> None:
        self.graph = graph
        self.config = config or TraversalConfig()

    def _ordered_roots(self) -> List[Any]:
        return sorted(self.graph.get_roots())

    # ------------------------------------------------------------------
    # Iterative
    # ------------------------------------------------------------------

    def iterative_bfs(self) -> List[Any]:
        order: List[Any] = []
        seen: Set[Any] = set()

        for start in self._ordered_roots():
            if start in seen:
                continue

            queue: Deque[Any] = deque([start])
            seen.add(start)
            order.append(start)

            while queue:
                vertex = queue.popleft()
                for nbr in self.graph.neighbors(vertex):
                    if nbr not in seen:
                        seen.add(nbr)
                        order.append(nbr)
                        queue.append(nbr)

        return order

    def iterative_dfs(self) -> List[Any]:
        order: List[Any] = []
        seen: Set[Any] = set()

        for start in self._ordered_roots():
            stack: List[Any] = [start]

            while stack:
                vertex = stack.pop()
                if vertex in seen:
                    continue
                seen.add(vertex)
                order.append(vertex)

                # Highest pushed first so the lowest is popped next.
                for nbr in reversed(self.graph.neighbors(vertex)):
                    if nbr not in seen:
                        stack.append(nbr)

        return order

    # ------------------------------------------------------------------
    # Recursive
    # ------------------------------------------------------------------

    def recursive_bfs(self) -> List[Any]:
        order: List[Any] = []
        seen: Set[Any] = set()

        with self._headroom():
            for start in self._ordered_roots():
                if start in seen:
                    continue
                seen.add(start)
                self._bfs_step(deque([start]), order, seen)

        return order

    def _bfs_step(self, queue: Deque[Any], order: List[Any], seen: Set[Any]) -> None:
        if not queue:
            return

        vertex = queue.popleft()
        order.append(vertex)

        for nbr in self.graph.neighbors(vertex):
            if nbr not in seen:
                seen.add(nbr)
                queue.append(nbr)

        self._bfs_step(queue, order, seen)

    def recursive_dfs(self) -> List[Any]:
        order: List[Any] = []
        seen: Set[Any] = set()

        with self._headroom():
            for start in self._ordered_roots():
                self._dfs_step(start, order, seen)

        return order

    def _dfs_step(self, vertex: Any, order: List[Any], seen: Set[Any]) -> None:
        if vertex in seen:
            return

        seen.add(vertex)
        order.append(vertex)

        for nbr in self.graph.neighbors(vertex):
            self._dfs_step(nbr, order, seen)

    def _headroom(self):
        extra = len(self.graph) + self.config.recursion_margin
        logging.getLogger("relgraph.traversal").debug(
            "recursive search: vertices=%s ceiling=%s",
            len(self.graph),
            self.config.recursion_limit,
        )
        return recursion_headroom(extra, self.config.recursion_limit)

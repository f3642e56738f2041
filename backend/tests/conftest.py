from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_analysis_service
from backend.app.services.analysis_service import GraphAnalysisService

from relgraph import Edge, Graph


def make_graph(vertices, pairs) -> Graph:
    return Graph(set(vertices), {Edge(s, d) for s, d in pairs})


def full_relation(vertices):
    return [(u, v) for u in vertices for v in vertices]


@pytest.fixture()
def chain_graph() -> Graph:
    return make_graph({1, 2, 3}, [(1, 2), (2, 3)])


@pytest.fixture()
def complete_equivalence_graph() -> Graph:
    return make_graph({1, 2, 3}, full_relation([1, 2, 3]))


@pytest.fixture()
def isolated_graph() -> Graph:
    return make_graph({1, 2}, [])


@pytest.fixture()
def two_component_graph() -> Graph:
    return make_graph({1, 2, 3, 4}, [(1, 2), (3, 4)])


@pytest.fixture()
def partitioned_equivalence_graph() -> Graph:
    # Classes {1, 2}, {3, 4}, {5}.
    pairs = full_relation([1, 2]) + full_relation([3, 4]) + [(5, 5)]
    return make_graph({1, 2, 3, 4, 5}, pairs)


@pytest.fixture()
def service() -> GraphAnalysisService:
    return GraphAnalysisService(max_vertices=10, max_edges=20)


@pytest.fixture()
def client(service: GraphAnalysisService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_analysis_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

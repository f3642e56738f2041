from typing import List, Tuple, Union
from pydantic import BaseModel

Vertex = Union[int, str]


class GraphRequest(BaseModel):
    vertices: List[Vertex]
    edges: List[Tuple[Vertex, Vertex]] = []


class EquivalenceClassRequest(GraphRequest):
    vertex: Vertex


class RelationProperties(BaseModel):
    reflexive: bool
    symmetric: bool
    transitive: bool
    anti_symmetric: bool
    equivalence: bool


class TraversalOrders(BaseModel):
    iterative_bfs: List[Vertex]
    iterative_dfs: List[Vertex]
    recursive_bfs: List[Vertex]
    recursive_dfs: List[Vertex]


class GraphAnalysisResponse(BaseModel):
    vertices: int
    edges: int
    relations: RelationProperties
    roots: List[Vertex]
    traversals: TraversalOrders


class EquivalenceClassResponse(BaseModel):
    vertex: Vertex
    members: List[Vertex]

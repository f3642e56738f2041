from fastapi import APIRouter, Depends, HTTPException

from backend.app.api.schemas import (
    EquivalenceClassRequest,
    EquivalenceClassResponse,
    GraphAnalysisResponse,
    GraphRequest,
)
from backend.app.dependencies import get_analysis_service
from backend.app.services.analysis_service import RequestTooLargeError

from relgraph import MalformedGraphError

router = APIRouter()


@router.post("/analyze", response_model=GraphAnalysisResponse)
def analyze_graph(request: GraphRequest, service=Depends(get_analysis_service)):
    try:
        result = service.analyze(vertices=request.vertices, edges=request.edges)
    except RequestTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except MalformedGraphError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return GraphAnalysisResponse(**result)


@router.post("/equivalence-class", response_model=EquivalenceClassResponse)
def equivalence_class(
    request: EquivalenceClassRequest,
    service=Depends(get_analysis_service),
):
    try:
        members = service.equivalence_class(
            vertices=request.vertices,
            edges=request.edges,
            vertex=request.vertex,
        )
    except RequestTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except MalformedGraphError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return EquivalenceClassResponse(vertex=request.vertex, members=members)

from functools import lru_cache
import logging

from backend.app.config import AppConfig
from backend.app.services.analysis_service import GraphAnalysisService


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_analysis_service() -> GraphAnalysisService:
    config = get_config()

    logging.getLogger("relgraph.startup").info(
        "[startup] analysis service: max_vertices=%s max_edges=%s",
        config.max_vertices,
        config.max_edges,
    )

    return GraphAnalysisService(
        config=config.relgraph,
        max_vertices=config.max_vertices,
        max_edges=config.max_edges,
    )

from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from relgraph.config.settings import RelgraphConfig, TraversalConfig

settings = Dynaconf(
    envvar_prefix="RELGRAPH",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key: str):
    return settings.get(key, DEFAULTS[key])


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")
    log_level: str = _setting("LOG_LEVEL")

    # ---------------- Request limits ----------------
    max_vertices: int = _setting("MAX_VERTICES")
    max_edges: int = _setting("MAX_EDGES")

    # ---------------- Relgraph Policy ----------------
    relgraph: RelgraphConfig = RelgraphConfig(
        traversal=TraversalConfig(
            recursion_limit=_setting("TRAVERSAL_RECURSION_LIMIT"),
            recursion_margin=_setting("TRAVERSAL_RECURSION_MARGIN"),
        ),
    )

DEFAULTS = {
    # Service title reported by FastAPI
    "APP_NAME": "relgraph-backend",
    # Prefix applied to every router
    "API_PREFIX": "",
    # Root log level for the backend process
    "LOG_LEVEL": "INFO",
    # Largest vertex set accepted per request
    "MAX_VERTICES": 5000,
    # Largest edge set accepted per request
    "MAX_EDGES": 50000,
    # Hard cap on the interpreter recursion limit for recursive searches
    "TRAVERSAL_RECURSION_LIMIT": 10000,
    # Extra frames reserved on top of the vertex count
    "TRAVERSAL_RECURSION_MARGIN": 64,
}

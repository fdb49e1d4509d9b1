"""
FastAPI app entry point aggregating routers under endpoint_config/routes.
Run as `uvicorn endpoint_config.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI

from .logs import ensure_log_schema
from .services.endpoint_svc import ensure_endpoint_schema


app = FastAPI(title="endpoint-config-api", version="0.1.0")


@app.on_event("startup")
def on_startup():
    ensure_endpoint_schema()
    ensure_log_schema()


from .routes import base as base_routes
from .routes import endpoints as endpoints_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(endpoints_routes.router)
app.include_router(logs_routes.router)

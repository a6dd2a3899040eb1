from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import streamscope
from streamscope.common.settings import get_settings
from streamscope.services.api.routers import analysis, health

cfg = get_settings()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Streamscope API",
        version=streamscope.__version__,
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(analysis.router)
    return app

app = create_app()

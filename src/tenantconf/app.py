"""FastAPI application factory for tenantconf."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tenantconf.common.config import get_settings
from tenantconf.common.logging import setup_logging
from tenantconf.common.schemas import HealthResponse


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Load the plan table and default theme once, before serving
        from tenantconf.deps import get_tenant_config_service
        get_tenant_config_service()
        yield

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.api_version)

    from tenantconf.tenants.router import router as config_router

    app.include_router(config_router, prefix=settings.api_prefix)

    return app

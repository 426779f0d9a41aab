import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wheel_fitter.entrypoints.http.exception_handlers import register_exception_handlers
from wheel_fitter.entrypoints.http.routes.cars import router as cars_router
from wheel_fitter.entrypoints.http.routes.discs import router as discs_router
from wheel_fitter.entrypoints.http.routes.fitting import router as fitting_router
from wheel_fitter.entrypoints.http.routes.root import router as root_router
from wheel_fitter.infra.config import cors_allow_origins
from wheel_fitter.infra.db.session import dispose_store, init_store
from wheel_fitter.infra.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Connect to the store before serving and release it on shutdown.

    A store failure propagates out of startup, so the server exits
    instead of serving in a degraded state.
    """
    try:
        init_store()
    except Exception:
        logger.critical("Store connection failed; refusing to start", exc_info=True)
        raise

    yield

    dispose_store()


def build_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Wheel Fitter API",
        description="""
        Car and wheel disc catalog with pre-rendered virtual fittings.

        ## Features
        - List cars with their fitting combinations
        - Filter discs and list filter options
        - Show a car with different wheels

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    origins = cors_allow_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(cars_router)
    app.include_router(discs_router)
    app.include_router(fitting_router)

    return app


app = build_app()

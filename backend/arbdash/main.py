"""FastAPI application entrypoint.

Arbitrage Dashboard backend: stored opportunities, dashboard
aggregates and a what-if profit calculator.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import router
from .config import APP_NAME, APP_VERSION, CORS_ORIGINS, SEED_DEMO_DATA
from .core.errors import NotFoundError, StoreError, ValidationError
from .logging_config import setup_logging
from .store import MemoryStore, Store
from .utils.time import Timer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s - Starting", APP_NAME, APP_VERSION)
    logger.info("=" * 60)

    yield

    logger.info("Shutdown complete.")


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.fields)
    return JSONResponse(
        status_code=400,
        content={"message": exc.message, "errors": exc.to_errors()},
    )


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query parameters and bodies the same way as ValidationError."""
    errors = [
        {
            # Drop the "body"/"query"/"path" prefix from the location
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "Invalid input data", "errors": errors}),
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": exc.message})


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Failed to process request"})


def create_app(store: Store | None = None) -> FastAPI:
    """
    Build the FastAPI app around a store.

    Without an explicit store a MemoryStore is created, seeded with
    demo data unless ARBDASH_SEED_DEMO_DATA is false.
    """
    app = FastAPI(
        title=APP_NAME,
        description="""
        Sports-betting arbitrage dashboard API.

        Features:
        - Stored arbitrage opportunities with sport, profit and bookmaker filters
        - Dashboard statistics and sports distribution
        - Upcoming events and activity feed
        - What-if stake and profit calculator
        """,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else MemoryStore(seed=SEED_DEMO_DATA)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,  # Must be False when using "*"
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        with Timer() as timer:
            response = await call_next(request)
        logger.debug(
            "%s %s -> %s (%.1fms)",
            request.method, request.url.path, response.status_code, timer.elapsed_ms
        )
        return response

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": APP_NAME,
            "version": APP_VERSION,
            "docs": "/docs",
            "api": "/api",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from .config import API_HOST, API_PORT

    uvicorn.run(
        "arbdash.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )

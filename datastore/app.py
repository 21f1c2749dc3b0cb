"""FastAPI application exposing a data engine over HTTP."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from datastore.core.errors import (
    InvalidResourceIdError,
    KeyFoundError,
    KeyNotFoundError,
    PersistenceError,
    UnserializableDataError,
)
from datastore.core.logging_config import configure_logging
from datastore.engines import build_engine
from datastore.engines.base import DataEngine
from datastore.routers import resources as resources_router


async def _key_not_found(request: Request, exc: KeyNotFoundError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=404)


async def _key_found(request: Request, exc: KeyFoundError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=409)


async def _bad_request(request: Request, exc: InvalidResourceIdError | UnserializableDataError) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=400)


async def _persistence_failed(request: Request, exc: PersistenceError) -> JSONResponse:
    # the mutation is applied in memory but not yet on disk
    return JSONResponse({"detail": f"Persistence failed: {exc}"}, status_code=503)


def create_app(engine: DataEngine | None = None) -> FastAPI:
    """Factory compativel com uvicorn/gunicorn (``uvicorn datastore.app:create_app --factory``)."""
    configure_logging()
    app = FastAPI(title="datastore")
    app.state.engine = engine if engine is not None else build_engine()

    app.add_exception_handler(KeyNotFoundError, _key_not_found)
    app.add_exception_handler(KeyFoundError, _key_found)
    app.add_exception_handler(InvalidResourceIdError, _bad_request)
    app.add_exception_handler(UnserializableDataError, _bad_request)
    app.add_exception_handler(PersistenceError, _persistence_failed)

    @app.get("/health")
    async def health():
        current = app.state.engine
        # SqlDataEngine.size runs a blocking COUNT query
        size = await run_in_threadpool(getattr, current, "size")
        return {"engine": current.name, "type": current.data_type.value, "size": size}

    app.include_router(resources_router.router)
    return app

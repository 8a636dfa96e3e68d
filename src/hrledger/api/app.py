"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from hrledger.domain.exceptions import ConflictError, MissingRateError, NotFoundError


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from hrledger.infra.db import engine as engine_module  # triggers pragmas + mapper registration
        from hrledger.db import init_db
        init_db(engine_module.engine)
        yield

    app = FastAPI(
        title="HR Ledger API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from hrledger.api.routers.employees import router as employees_router
    from hrledger.api.routers.attendance import router as attendance_router
    from hrledger.api.routers.currency import router as currency_router
    from hrledger.api.routers.income import router as income_router
    from hrledger.api.routers.costs import router as costs_router
    from hrledger.api.routers.reports import router as reports_router

    app.include_router(employees_router)
    app.include_router(attendance_router)
    app.include_router(currency_router)
    app.include_router(income_router)
    app.include_router(costs_router)
    app.include_router(reports_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(ConflictError)
    def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.exception_handler(MissingRateError)
    def _missing_rate(request: Request, exc: MissingRateError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app

"""
FastAPI application -- Company records API server.

Run locally:
    uvicorn company_api.app:app --reload --port 8000
or:
    python -m company_api
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from company_api.config import CORS_ORIGINS, LOG_LEVEL
from company_api.database import init_db
from company_api.errors import InvalidCompanyError
from company_api.routes import company
from company_api.schemas import ValidationProblem

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialise database schema
    await init_db()
    logger.info("Database schema ready")
    yield


app = FastAPI(
    title="Company API",
    version="1.0.0",
    description="CRUD service for company business records",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(company.router)


def _problem(errors: dict[str, list[str]]) -> JSONResponse:
    body = ValidationProblem(errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.exception_handler(InvalidCompanyError)
async def invalid_company_handler(request: Request, exc: InvalidCompanyError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors)
    return _problem(exc.errors)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        # ("body", 9) for malformed JSON, ("body", "Pib") for a bad field
        loc = [part for part in err.get("loc", ()) if isinstance(part, str) and part not in ("body", "path", "query")]
        field = loc[-1] if loc else "$"
        errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return _problem(errors)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": app.version}

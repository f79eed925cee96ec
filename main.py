# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Membership Service
==================
Registers named members, rejects duplicate names, and serves lookups by id
and the full member list.

Storage is selected by STORAGE_BACKEND: "memory" (default) or "sql".

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from membership.controllers import hello_controller, member_controller, system_controller
from membership.core.config import settings
from membership.core.dependencies import get_member_repo
from membership.core.logging import get_logger
from membership.metrics.prometheus import MEMBERS_TOTAL
from membership.middleware import MetricsMiddleware, RequestIDMiddleware
from membership.repositories.sql_member_repository import SqlMemberRepository
from membership.schemas.member import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Prepare storage on startup and log on shutdown."""
    repo = get_member_repo()
    if isinstance(repo, SqlMemberRepository):
        repo.ensure_schema()
    MEMBERS_TOTAL.set(repo.count())
    logger.info(
        "Membership service starting — backend=%s, members=%d",
        settings.STORAGE_BACKEND, repo.count(),
    )
    yield
    logger.info("Membership service shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Membership Service",
    description="Member registration with unique names, lookup by id, and listing.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(hello_controller.router)
app.include_router(member_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from membership.core.config import settings
from membership.core.dependencies import get_member_repo
from membership.repositories.member_repository import MemberRepository

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(repo: MemberRepository = Depends(get_member_repo)):
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "members_count": repo.count(),
    }


@router.get("/health/ready")
def readiness_check(repo: MemberRepository = Depends(get_member_repo)):
    """Readiness probe — verifies the storage backend answers."""
    try:
        repo.verify_connection()
        return {"status": "ready", "service": settings.SERVICE_NAME, "storage": "connected"}
    except Exception as exc:
        raise HTTPException(status_code=503, detail=f"Storage unavailable: {exc}")


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

"""
Health check endpoints.
"""
import time
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint, reporting the mounted strategy"""
    strategy = request.app.state.strategy
    return {
        "status": "healthy",
        "strategy": strategy.name,
        "scope": list(strategy.options.scope),
        "timestamp": time.time(),
    }


@router.get("/healthz")
async def healthz_check():
    """Liveness probe (Kubernetes style)"""
    return {"status": "ok", "timestamp": time.time()}

"""
Health Check Endpoints
Provides service health status for monitoring and orchestration
"""

from fastapi import APIRouter, Request, HTTPException
from typing import Dict, Any
from datetime import datetime, timezone
import psutil
import os

from forecast_api.forecast import FORECAST_DAYS, SUMMARIES, generate_forecasts

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(request: Request) -> Dict[str, str]:
    """
    Basic health check - returns OK if service is running.
    Used by load balancers and Docker health checks.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": request.app.title
    }


@router.get("/ready")
async def readiness_check(request: Request) -> Dict[str, Any]:
    """
    Readiness check - returns OK if service can handle requests.
    Checks that forecasts generate and the OpenAPI document builds.
    """
    checks = {
        "forecast": "unknown",
        "openapi": "unknown"
    }

    try:
        batch = generate_forecasts()
        valid = len(batch) == FORECAST_DAYS and all(f.summary in SUMMARIES for f in batch)
        checks["forecast"] = "ok" if valid else "invalid_output"
    except Exception as e:
        checks["forecast"] = f"error: {str(e)}"

    try:
        schema = request.app.openapi()
        checks["openapi"] = "ok" if schema.get("paths") else "no_paths"
    except Exception as e:
        checks["openapi"] = f"error: {str(e)}"

    all_ok = all(v == "ok" for v in checks.values())
    status = "ready" if all_ok else "not_ready"

    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks
    }


@router.get("/live")
async def liveness_check() -> Dict[str, str]:
    """
    Liveness check - returns OK if service should continue running.
    Used by Kubernetes to determine if pod should be restarted.
    """
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/metrics/system")
def system_metrics() -> Dict[str, Any]:
    """
    System resource metrics.
    Returns CPU, memory, and process usage.
    """
    try:
        memory = psutil.virtual_memory()
        process = psutil.Process()
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "cpu": {
                "percent": psutil.cpu_percent(interval=None),
                "count": psutil.cpu_count()
            },
            "memory": {
                "total": memory.total,
                "available": memory.available,
                "percent": memory.percent
            },
            "process": {
                "pid": os.getpid(),
                "memory_mb": process.memory_info().rss / 1024 / 1024,
                "threads": process.num_threads()
            }
        }
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get system metrics: {str(e)}")

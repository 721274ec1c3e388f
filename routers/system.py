from fastapi import APIRouter, Depends, Query, Request
from typing import Any, Dict
import structlog
from datetime import datetime
import time

from models.base import DEFAULT_REGION
from services.agent_orchestrator import AgentOrchestrator
from utils.dependencies import get_orchestrator, verify_api_key

logger = structlog.get_logger(__name__)

router = APIRouter(
    tags=["System & Monitoring"]
)


@router.get("/health", summary="Service health check", tags=["Monitoring"])
async def health_check(request: Request) -> Dict[str, Any]:
    orchestrator = getattr(request.app.state, "orchestrator", None)
    start_time = getattr(request.app.state, "start_time", None)

    return {
        "status": "healthy" if orchestrator is not None else "unhealthy",
        "timestamp": datetime.now().isoformat(),
        "version": request.app.state.settings.api_version,
        "uptime_seconds": round(time.time() - start_time, 2) if start_time else None,
        "services": {
            "agents": {"status": "healthy" if orchestrator is not None else "unavailable"},
            "data_store": {
                "status": "healthy" if orchestrator is not None else "unavailable",
                "hospitals": len(orchestrator.store.get_hospitals()) if orchestrator else 0,
                "alerts": len(orchestrator.store.get_alerts()) if orchestrator else 0,
            },
        },
    }


@router.post("/api/v1/system/cycle", summary="Run a full coordination cycle")
async def run_cycle(
    region: str = Query(DEFAULT_REGION, min_length=1),
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    logger.info("Running coordination cycle", region=region)
    cycle = await orchestrator.run_cycle(region)
    return cycle.to_dict()

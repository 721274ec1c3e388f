from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from pydantic import BaseModel
import structlog
from datetime import datetime

from agents.public_alert_system import DEFAULT_CHANNELS
from models.model import Alert, BroadcastResult
from services.agent_orchestrator import AgentOrchestrator
from utils.dependencies import get_orchestrator, verify_api_key

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/alerts",
    tags=["Alerts"]
)


class BroadcastRequest(BaseModel):
    channels: Optional[List[str]] = None


@router.get("", response_model=List[Alert], summary="Alert log, most recent first")
async def get_alerts(
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of alerts to return"),
    orchestrator: AgentOrchestrator = Depends(get_orchestrator)
):
    return orchestrator.store.get_alerts()[:limit]


@router.post("/generate", summary="Generate an alert from current risk")
async def generate_alerts(
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    alert = orchestrator.alerts.generate_alerts()
    if alert is None:
        return {
            "success": True,
            "message": "No new alert required",
            "alert": None,
            "timestamp": datetime.now().isoformat()
        }

    logger.info("Alert generated", alert_id=alert.id, title=alert.title)
    return {
        "success": True,
        "message": "Alert generated",
        "alert": alert.model_dump(mode="json"),
        "timestamp": datetime.now().isoformat()
    }


@router.post("/{alert_id}/broadcast", response_model=BroadcastResult, summary="Broadcast an alert")
async def broadcast_alert(
    alert_id: str,
    body: Optional[BroadcastRequest] = None,
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    alert = orchestrator.store.get_alert(alert_id)
    if alert is None:
        raise HTTPException(status_code=404, detail=f"No such alert: {alert_id}")

    channels = (body.channels if body and body.channels else None) or alert.channels or DEFAULT_CHANNELS
    return await orchestrator.alerts.broadcast_alert(alert_id, channels)

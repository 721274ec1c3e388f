"""
Civic Data API Router
Endpoints for Agent 1: stream sync and enriched civic snapshots
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
import structlog

from models.base import DEFAULT_REGION
from models.model import CivicSnapshot, StreamStatus
from services.agent_orchestrator import AgentOrchestrator
from utils.dependencies import get_orchestrator, verify_api_key

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/civic",
    tags=["Civic Data"]
)


@router.post("/sync", response_model=CivicSnapshot, summary="Sync environmental streams for a ward")
async def sync_streams(
    region: str = Query(DEFAULT_REGION, min_length=1, description="Ward name"),
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    logger.info("Syncing civic streams", region=region)
    return await orchestrator.aggregator.sync_all_streams(region)


@router.get("/streams", response_model=List[StreamStatus], summary="Upstream feed status")
async def get_stream_status(orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.aggregator.get_stream_status()


@router.get("/{region}", response_model=CivicSnapshot, summary="Current civic snapshot for a ward")
async def get_civic_data(region: str, orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    """Falls back to the city-wide snapshot when the ward has not been synced"""
    snapshot = orchestrator.store.get_civic_data(region)
    if snapshot is None:
        raise HTTPException(status_code=404, detail=f"No civic data for {region}")
    return snapshot

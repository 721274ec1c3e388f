"""
Logistics API Router
Endpoints for Agent 3: hospital roster, load balancing and ambulance routing
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from pydantic import BaseModel
import structlog

from models.model import AmbulanceRoute, GeoPoint, Hospital, ResourceAllocation
from services.agent_orchestrator import AgentOrchestrator
from utils.dependencies import get_orchestrator, verify_api_key

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/logistics",
    tags=["Logistics"]
)


class RouteRequest(BaseModel):
    start: GeoPoint
    end: GeoPoint


@router.get("/hospitals", response_model=List[Hospital], summary="Hospital roster")
async def get_hospitals(orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.store.get_hospitals()


@router.put("/hospitals/{hospital_id}", response_model=Hospital, summary="Replace a roster entry")
async def update_hospital(
    hospital_id: str,
    hospital: Hospital,
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    if hospital.id != hospital_id:
        raise HTTPException(status_code=400, detail="Hospital id in path and body differ")

    if not orchestrator.store.update_hospital(hospital):
        raise HTTPException(status_code=404, detail=f"No such hospital: {hospital_id}")
    return hospital


@router.post("/allocate", response_model=ResourceAllocation, summary="Run resource allocation")
async def allocate_resources(orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.logistics.allocate_resources()


@router.post("/routes", response_model=AmbulanceRoute, summary="Suggest an ambulance route")
async def suggest_route(body: RouteRequest, orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.logistics.suggest_ambulance_routes(body.start, body.end)

"""
Forecast API Router
Endpoints for Agent 2: ward outbreak forecasts and the risk heatmap
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, List
import structlog

from models.model import ForecastPoint
from services.agent_orchestrator import AgentOrchestrator
from utils.dependencies import get_orchestrator, verify_api_key

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/forecast",
    tags=["Forecasting"]
)


@router.get("/heatmap", response_model=Dict[str, float], summary="Ward risk heatmap")
async def get_risk_heatmap(orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.forecaster.get_risk_heatmap()


@router.post("/{region}", response_model=List[ForecastPoint], summary="Generate a 7-day outbreak forecast")
async def generate_forecast(
    region: str,
    orchestrator: AgentOrchestrator = Depends(get_orchestrator),
    api_key: bool = Depends(verify_api_key)
):
    logger.info("Generating forecast", region=region)
    return orchestrator.forecaster.generate_forecast(region)


@router.get("/{region}", response_model=List[ForecastPoint], summary="Latest forecast for a ward")
async def get_forecast(region: str, orchestrator: AgentOrchestrator = Depends(get_orchestrator)):
    forecast = orchestrator.store.get_forecast(region)
    if forecast is None:
        raise HTTPException(status_code=404, detail=f"No forecast generated for {region}")
    return forecast

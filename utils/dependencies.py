from fastapi import HTTPException, Depends, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import structlog

from services.agent_orchestrator import AgentOrchestrator

logger = structlog.get_logger(__name__)

# --- Security Dependencies ---
security = HTTPBearer(auto_error=False)


async def verify_api_key(request: Request, credentials: HTTPAuthorizationCredentials = Depends(security)):
    """Verify API key for mutating endpoints"""
    api_key = request.app.state.settings.api_key
    if not api_key:
        return True  # No API key required in development

    if not credentials or credentials.credentials != api_key:
        logger.warning("Rejected request with invalid API key", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return True


# --- Agent Dependencies ---
def get_orchestrator(request: Request) -> AgentOrchestrator:
    """The orchestrator built during application startup"""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Coordination agents not initialized"
        )
    return orchestrator

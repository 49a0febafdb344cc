"""Health check endpoint."""

from datetime import datetime

from fastapi import APIRouter, Depends

from orchestrator.core import QueryGateway
from server.dependencies import get_gateway
from server.schemas.responses import HealthResponseDTO

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponseDTO)
async def health_check(gateway: QueryGateway = Depends(get_gateway)):
    """Health check endpoint."""
    return HealthResponseDTO(
        status="healthy",
        timestamp=datetime.utcnow().isoformat() + "Z",
        version="1.0.0",
        providers=gateway.context.registry.provider_ids(),
    )

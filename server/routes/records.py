"""Read-only view over the accumulated record set."""

from fastapi import APIRouter, Depends

from orchestrator.core import QueryGateway
from server.dependencies import get_gateway
from server.schemas.responses import RecordsResponseDTO, ResultItemDTO

router = APIRouter(prefix="/v1", tags=["Records"])


@router.get("/records", response_model=RecordsResponseDTO)
async def list_records(limit: int | None = None, gateway: QueryGateway = Depends(get_gateway)):
    """Return every item handed out so far, oldest first."""
    items = gateway.records()
    if limit is not None and limit >= 0:
        items = items[-limit:] if limit else []
    return RecordsResponseDTO(
        count=len(gateway.context.records),
        items=[ResultItemDTO.from_result_item(i) for i in items],
        stats=gateway.context.resolver.stats.to_dict(),
    )

"""REST mirror of the GraphQL read and populate operations."""

from fastapi import APIRouter, Depends, HTTPException, status

from orchestrator.core import QueryGateway
from orchestrator.errors import FetchFailedError, QueryValidationError, UnknownProviderError
from server.dependencies import get_gateway, get_request_id
from server.schemas.requests import PopulateRequest, QueryRequest
from server.schemas.responses import PopulateResponseDTO, QueryResponseDTO
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/v1", tags=["Query"])


@router.post("/query", response_model=QueryResponseDTO)
async def query_data(
    request: QueryRequest,
    gateway: QueryGateway = Depends(get_gateway),
    request_id: str = Depends(get_request_id),
):
    """Resolve a query through cache, native store and provider fallback."""
    provider = request.provider or gateway.context.default_provider
    try:
        items = await gateway.read(request.query, provider)
    except QueryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnknownProviderError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except FetchFailedError as e:
        logger.warning(
            "Query failed",
            extra={"extra_fields": {"request_id": request_id, "error": str(e)}},
        )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return QueryResponseDTO.from_items(request.query, provider, items)


@router.post("/populate", response_model=PopulateResponseDTO)
async def populate_data(
    request: PopulateRequest,
    gateway: QueryGateway = Depends(get_gateway),
):
    """Force population for a query. Always answers 200 with a success flag."""
    result = await gateway.populate(request.query, request.provider)
    return PopulateResponseDTO.from_populate_result(result)

"""FastAPI dependencies for gateway access."""

from fastapi import Request

from orchestrator.core import QueryGateway


def get_gateway(request: Request) -> QueryGateway:
    """Return the QueryGateway owned by this app instance."""
    return request.app.state.gateway


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")

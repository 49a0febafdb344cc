"""GraphQL schema: getData query and populateData mutation."""

from typing import Optional

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from orchestrator.core import QueryGateway
from server.dependencies import get_gateway


@strawberry.type
class DataItem:
    id: strawberry.ID
    title: str
    content: str
    source: str
    timestamp: Optional[str] = None

    @classmethod
    def from_result_item(cls, item) -> "DataItem":
        return cls(
            id=strawberry.ID(item.id),
            title=item.title,
            content=item.content,
            source=item.source,
            timestamp=item.timestamp,
        )


@strawberry.type
class PopulateResponse:
    success: bool
    message: Optional[str] = None


@strawberry.type
class Query:
    @strawberry.field(description="Get data based on query string")
    async def get_data(
        self, info: Info, query: str, provider: Optional[str] = None
    ) -> Optional[list[Optional[DataItem]]]:
        gateway: QueryGateway = info.context["gateway"]
        items = await gateway.read(query, provider)
        return [DataItem.from_result_item(item) for item in items]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Populate data if not available")
    async def populate_data(
        self, info: Info, query: str, provider: Optional[str] = None
    ) -> Optional[PopulateResponse]:
        gateway: QueryGateway = info.context["gateway"]
        result = await gateway.populate(query, provider)
        return PopulateResponse(success=result.success, message=result.message)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(gateway: QueryGateway = Depends(get_gateway)) -> dict:
    return {"gateway": gateway}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)

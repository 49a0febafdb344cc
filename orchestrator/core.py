"""
QueryGateway - the two public operations (read, populate) over the tiered resolver.

Key guarantees:
- read() returns data or raises; it never answers an error with an empty list
- populate() never raises; failures come back as PopulateResult(success=False)
- Every item handed out is merged into the session's AccumulatedRecordSet
"""

import asyncio

from context.session_context import QueryContext
from models.query import normalize_query
from models.result_item import ResultItem
from orchestrator.errors import (
    FetchFailedError,
    QueryServiceError,
    QueryValidationError,
    UnknownProviderError,
)
from orchestrator.routing_types import PopulateResult, ResolutionTier
from utils.logger import get_logger

logger = get_logger(__name__)


def _as_items(response: ResultItem | list[ResultItem] | None) -> list[ResultItem]:
    if response is None:
        return []
    if isinstance(response, ResultItem):
        return [response]
    return list(response)


class QueryGateway:
    def __init__(self, context: QueryContext):
        self.context = context
        self._provider_in_flight: dict[tuple[str, str], asyncio.Future] = {}

    def _select_provider(self, provider: str | None) -> str:
        provider_id = (provider or "").strip().lower() or self.context.default_provider
        if provider_id is None:
            raise UnknownProviderError("<none>", self.context.registry.provider_ids())
        self.context.registry.resolve(provider_id)
        return provider_id

    async def _process_with_provider(self, key: str, query: str, provider_id: str) -> list[ResultItem]:
        logger.info(
            f"No data found for query: {key}. Processing with {provider_id}",
            extra={"extra_fields": {"query": key, "provider": provider_id}},
        )
        response = await self.context.registry.process(provider_id, query.strip())
        items = _as_items(response)
        self.context.provider_results[(key, provider_id)] = items
        return items

    async def _provider_fallback(self, key: str, query: str, provider_id: str) -> list[ResultItem]:
        """
        Answer from the provider memo, or share one provider call between
        concurrent reads of the same query and provider.
        """
        memo_key = (key, provider_id)
        memo = self.context.provider_results.get(memo_key)
        if memo is not None:
            return list(memo)

        if not self.context.resolver.single_flight:
            return await self._process_with_provider(key, query, provider_id)

        task = self._provider_in_flight.get(memo_key)
        if task is None:
            task = asyncio.ensure_future(self._process_with_provider(key, query, provider_id))
            self._provider_in_flight[memo_key] = task
            task.add_done_callback(lambda done, k=memo_key: self._forget(k, done))
        else:
            logger.debug(f"Joining in-flight {provider_id} call for query: {key}")
        return list(await asyncio.shield(task))

    def _forget(self, memo_key: tuple[str, str], task: asyncio.Future) -> None:
        if self._provider_in_flight.get(memo_key) is task:
            del self._provider_in_flight[memo_key]

    async def read(self, query: str, provider: str | None = None) -> list[ResultItem]:
        """
        Resolve a query, falling back to the selected provider when the
        resolver chain comes back empty.

        Args:
            query: Free-text query
            provider: Provider id; defaults to the first registered provider

        Returns:
            Ordered list of ResultItem

        Raises:
            QueryValidationError: Blank query
            UnknownProviderError: Provider id is not registered
            FetchFailedError: Any downstream failure
        """
        key = normalize_query(query)
        provider_id = self._select_provider(provider)

        try:
            resolution = await self.context.resolver.resolve(key)
            items = resolution.items
            tier = resolution.tier

            if not items:
                items = await self._provider_fallback(key, query, provider_id)
                tier = ResolutionTier.PROVIDER
        except (QueryValidationError, UnknownProviderError):
            raise
        except Exception as e:
            logger.error(
                f"Error in read: {e}",
                extra={"extra_fields": {"query": key, "provider": provider_id}},
            )
            raise FetchFailedError(f"Failed to fetch data: {e}") from e

        added = self.context.records.merge(items)
        logger.info(
            f"Resolved {len(items)} items for query: {key}",
            extra={
                "extra_fields": {
                    "query": key,
                    "provider": provider_id,
                    "tier": tier.value,
                    "item_count": len(items),
                    "new_records": added,
                }
            },
        )
        return items

    async def populate(self, query: str, provider: str | None = None) -> PopulateResult:
        """
        Force a fresh resolution for a query and report how it went.

        Clears the resolver cache first, so the answer comes from the native
        store (or its population); the provider is used only when that is empty.
        """
        provider_id = None
        try:
            key = normalize_query(query)
            provider_id = self._select_provider(provider)

            self.context.resolver.clear_cache()
            items = await self.context.resolver.fetch_data(key)

            if not items:
                logger.info(f"No data from native system for query: {key}. Using {provider_id}")
                items = await self._process_with_provider(key, query, provider_id)

            self.context.records.merge(items)
        except Exception as e:
            logger.error(
                f"Error populating data: {e}",
                exc_info=not isinstance(e, QueryServiceError),
                extra={"extra_fields": {"provider": provider_id}},
            )
            return PopulateResult(success=False, message=f"Error: {e}", provider=provider_id)

        if items:
            return PopulateResult(
                success=True,
                message=f"Successfully populated {len(items)} items using {provider_id}",
                item_count=len(items),
                provider=provider_id,
            )
        return PopulateResult(
            success=False, message="No data could be populated", provider=provider_id
        )

    def records(self) -> list[ResultItem]:
        return self.context.records.items()

"""
TieredResolver - resolves a query through cache, native store, then population.

Lookup order per call:
    CACHE_CHECK -> STORE_CHECK -> STORE_POPULATE

Exactly one branch answers each call. Provider fallback is not part of this
chain; the gateway decides what to do with an empty result.
"""

import asyncio

from datasources.native_system_module import NativeSystemModule
from models.query import normalize_query
from models.result_item import ResultItem
from orchestrator.errors import FetchFailedError, QueryValidationError
from orchestrator.routing_types import Resolution, ResolutionTier, ResolverStats
from utils.logger import get_logger

logger = get_logger(__name__)


class TieredResolver:
    def __init__(self, store: NativeSystemModule, single_flight: bool = True):
        """
        Args:
            store: The native fallback store consulted after the cache
            single_flight: Share one in-flight resolution between concurrent
                callers asking for the same normalized query
        """
        self.store = store
        self.single_flight = single_flight
        self.stats = ResolverStats()
        self._cache: dict[str, list[ResultItem]] = {}
        self._in_flight: dict[str, asyncio.Future] = {}

    async def fetch_data(self, query: str) -> list[ResultItem]:
        resolution = await self.resolve(query)
        return resolution.items

    async def resolve(self, query: str) -> Resolution:
        key = normalize_query(query)

        cached = self._cache.get(key)
        if cached is not None:
            self.stats.cache_hits += 1
            logger.debug(f"Data found in resolver cache for query: {key}")
            return Resolution(ResolutionTier.CACHE, list(cached))

        if not self.single_flight:
            return await self._resolve_uncached(key)

        task = self._in_flight.get(key)
        if task is not None:
            self.stats.coalesced += 1
            logger.debug(f"Joining in-flight resolution for query: {key}")
            resolution = await asyncio.shield(task)
            return Resolution(ResolutionTier.COALESCED, list(resolution.items))

        task = asyncio.ensure_future(self._resolve_uncached(key))
        self._in_flight[key] = task
        task.add_done_callback(lambda done, k=key: self._forget(k, done))
        return await asyncio.shield(task)

    async def _resolve_uncached(self, key: str) -> Resolution:
        try:
            if await self.store.has_data(key):
                items = await self.store.get_data(key)
                tier = ResolutionTier.STORE
                self.stats.store_hits += 1
                logger.info(f"Data found in native system module for query: {key}")
            else:
                logger.info(f"No data found for query: {key}. Triggering native system module")
                items = await self.store.populate_data(key)
                tier = ResolutionTier.POPULATE
                self.stats.populates += 1
        except QueryValidationError:
            raise
        except Exception as e:
            logger.error(
                f"Error fetching data: {e}",
                exc_info=True,
                extra={"extra_fields": {"query": key}},
            )
            raise FetchFailedError("Failed to fetch data from external source") from e

        self._cache[key] = list(items)
        return Resolution(tier, list(items))

    def _forget(self, key: str, task: asyncio.Future) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]

    def is_cached(self, query: str) -> bool:
        return normalize_query(query) in self._cache

    def clear_cache(self) -> None:
        """Empty the resolver cache. The native store keeps its data."""
        self._cache.clear()
        logger.debug("Resolver cache cleared")

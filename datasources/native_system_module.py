"""
NativeSystemModule - simulated native data source with on-demand population.

Stores generated items keyed by normalized query. Population is slow
(simulated delay) and regenerates the entry every time it runs.
"""

import asyncio
import random
import uuid
from collections.abc import Iterable

from models.query import normalize_query
from models.result_item import NATIVE_SOURCE, ResultItem, utc_timestamp
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORIES = ("research", "article", "report", "analysis", "study")
DEFAULT_COVERAGE = ("technology", "science", "business", "health", "politics", "education")
COVER_ALL = "*"


class NativeSystemModule:
    """
    In-memory key-value store simulating the native system module.

    Only queries that mention one of the coverage keywords produce data;
    populating any other query records an empty entry so callers can fall
    through to an AI provider.
    """

    def __init__(
        self,
        populate_delay_s: float = 1.5,
        min_items: int = 3,
        max_items: int = 7,
        coverage: Iterable[str] | None = DEFAULT_COVERAGE,
        rng: random.Random | None = None,
    ):
        """
        Initialize the native store.

        Args:
            populate_delay_s: Simulated population latency in seconds
            min_items: Minimum number of items generated per population
            max_items: Maximum number of items generated per population
            coverage: Keywords the module holds data for; None or "*" covers every query
            rng: Random source, injectable for deterministic output
        """
        if min_items < 0 or max_items < min_items:
            raise ValueError(f"Invalid item range {min_items}..{max_items}")

        self.populate_delay_s = max(0.0, float(populate_delay_s))
        self.min_items = min_items
        self.max_items = max_items
        keywords = [k.strip().lower() for k in (coverage or []) if k and k.strip()]
        self.coverage: tuple[str, ...] | None = (
            None if not keywords or COVER_ALL in keywords else tuple(keywords)
        )
        self._rng = rng or random.Random()
        self._data_store: dict[str, list[ResultItem]] = {}

    def covers(self, query: str) -> bool:
        if self.coverage is None:
            return True
        key = normalize_query(query)
        return any(keyword in key for keyword in self.coverage)

    async def has_data(self, query: str) -> bool:
        return normalize_query(query) in self._data_store

    async def get_data(self, query: str) -> list[ResultItem]:
        return list(self._data_store.get(normalize_query(query), []))

    async def populate_data(self, query: str) -> list[ResultItem]:
        """
        Generate and store data for a query, replacing any earlier entry.

        Args:
            query: Query text (normalized before use)

        Returns:
            The freshly generated items; empty when the query is not covered
        """
        key = normalize_query(query)
        logger.info(
            "Native system module populating data",
            extra={"extra_fields": {"query": key, "delay_s": self.populate_delay_s}},
        )
        await asyncio.sleep(self.populate_delay_s)

        data = self.generate_mock_data(key) if self.covers(key) else []
        self._data_store[key] = data

        logger.info(
            f"Native system module stored {len(data)} items",
            extra={"extra_fields": {"query": key, "item_count": len(data)}},
        )
        return list(data)

    def generate_mock_data(self, query: str) -> list[ResultItem]:
        count = self._rng.randint(self.min_items, self.max_items)
        batch = uuid.uuid4().hex[:12]
        timestamp = utc_timestamp()
        items = []
        for i in range(count):
            category = self._rng.choice(CATEGORIES)
            items.append(
                ResultItem(
                    id=f"native-{batch}-{i}",
                    title=f"{query} {category} {i + 1}",
                    content=(
                        f'This is native system generated content for "{query}" '
                        f"(item {i + 1} of {count}). This data was populated by the native "
                        "system module because it wasn't available in the GraphQL cache."
                    ),
                    source=NATIVE_SOURCE,
                    timestamp=timestamp,
                )
            )
        return items

    def clear(self) -> None:
        """Drop every stored entry."""
        self._data_store.clear()

    def __len__(self) -> int:
        return len(self._data_store)

"""
QueryContext - explicitly owned state for one process/session.

Holds the provider registry, the native store, the tiered resolver, the
accumulated record set and the provider result memo. Built once at startup
and handed to the QueryGateway; discarded with the process.
"""

import random
from dataclasses import dataclass, field

from config.config import Config
from context.record_set import AccumulatedRecordSet
from datasources.native_system_module import NativeSystemModule
from models.result_item import ResultItem
from orchestrator.provider_registry import ProviderRegistry
from orchestrator.tiered_resolver import TieredResolver
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryContext:
    registry: ProviderRegistry
    store: NativeSystemModule
    resolver: TieredResolver
    records: AccumulatedRecordSet = field(default_factory=AccumulatedRecordSet)
    provider_results: dict[tuple[str, str], list[ResultItem]] = field(default_factory=dict)
    default_provider: str | None = None

    @classmethod
    def from_config(cls, config: Config | None = None, rng: random.Random | None = None) -> "QueryContext":
        config = config or Config()
        registry = ProviderRegistry.from_yaml(
            config.PROVIDER_REGISTRY_PATH, latency_override_s=config.PROVIDER_LATENCY_S
        )
        store = NativeSystemModule(
            populate_delay_s=config.NATIVE_POPULATE_DELAY_S,
            min_items=config.NATIVE_MIN_ITEMS,
            max_items=config.NATIVE_MAX_ITEMS,
            coverage=config.NATIVE_COVERAGE,
            rng=rng,
        )
        resolver = TieredResolver(store, single_flight=config.SINGLE_FLIGHT)

        default_provider = config.DEFAULT_PROVIDER or registry.default_provider
        # fail fast on a misconfigured default
        registry.resolve(default_provider)

        logger.info(
            "Query context initialized",
            extra={
                "extra_fields": {
                    "providers": registry.provider_ids(),
                    "default_provider": default_provider,
                    "single_flight": config.SINGLE_FLIGHT,
                }
            },
        )
        return cls(
            registry=registry,
            store=store,
            resolver=resolver,
            default_provider=default_provider,
        )

    def reset(self) -> None:
        """Forget everything resolved so far (cache, store, memo). The record set is kept."""
        self.resolver.clear_cache()
        self.store.clear()
        self.provider_results.clear()

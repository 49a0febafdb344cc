import asyncio

import pytest

from api.base_client import BaseProviderSimulator
from api.openai_client import OpenAISimulator
from models.result_item import NATIVE_SOURCE, ResultItem
from orchestrator.errors import FetchFailedError, QueryValidationError, UnknownProviderError


class ExplodingSimulator(BaseProviderSimulator):
    provider_name = "exploding"

    async def process_query(self, query: str) -> ResultItem:
        raise RuntimeError("provider down")


class ListSimulator(BaseProviderSimulator):
    provider_name = "multi"

    async def process_query(self, query: str):
        return [
            ResultItem(id=f"multi-{i}", title=f"{query} {i}", content="c", source="Multi")
            for i in range(2)
        ]


class CountingSimulator(OpenAISimulator):
    def __init__(self, latency_s: float = 0.01):
        super().__init__(latency_s=latency_s)
        self.calls = 0

    async def process_query(self, query: str) -> ResultItem:
        self.calls += 1
        return await super().process_query(query)


def ids(items):
    return [item.id for item in items]


def test_covered_query_returns_native_items(gateway):
    items = asyncio.run(gateway.read("technology trends", "openai"))
    assert 3 <= len(items) <= 7
    assert all(item.source == NATIVE_SOURCE for item in items)


def test_uncovered_query_falls_back_to_provider(gateway):
    items = asyncio.run(gateway.read("zzqzz123", "openai"))
    assert len(items) == 1
    assert items[0].source == "OpenAI GPT-4"
    assert items[0].content.splitlines()[-1].count('"zzqzz123"') == 1


def test_read_is_idempotent(gateway):
    for query in ("science news", "zzqzz123"):
        first = asyncio.run(gateway.read(query))
        second = asyncio.run(gateway.read(query))
        assert ids(first) == ids(second)


def test_read_populates_store(gateway, context):
    assert asyncio.run(context.store.has_data("Health tips")) is False
    asyncio.run(gateway.read("Health tips"))
    assert asyncio.run(context.store.has_data("health tips")) is True


def test_populate_then_read_hits_cache(gateway, context):
    result = asyncio.run(gateway.populate("business outlook", "openai"))
    assert result.success
    populates = context.resolver.stats.populates

    asyncio.run(gateway.read("business outlook", "openai"))

    assert context.resolver.stats.populates == populates
    assert context.resolver.stats.cache_hits == 1


def test_provider_switch_has_no_effect_once_store_answers(gateway):
    openai_items = asyncio.run(gateway.read("education", "openai"))
    hf_items = asyncio.run(gateway.read("education", "huggingface"))
    assert ids(openai_items) == ids(hf_items)


def test_provider_switch_changes_source_when_chain_is_empty(gateway):
    openai_items = asyncio.run(gateway.read("zzqzz123", "openai"))
    hf_items = asyncio.run(gateway.read("zzqzz123", "huggingface"))
    assert openai_items[0].source != hf_items[0].source
    assert hf_items[0].source == "HuggingFace Mistral-7B"


def test_default_provider_used_when_omitted(gateway):
    items = asyncio.run(gateway.read("zzqzz123"))
    assert items[0].source == "OpenAI GPT-4"


def test_records_are_deduplicated(gateway, context):
    first = asyncio.run(gateway.read("politics"))
    asyncio.run(gateway.read("politics"))
    asyncio.run(gateway.read("zzqzz123"))
    assert len(context.records) == len(first) + 1
    assert ids(gateway.records())[: len(first)] == ids(first)


def test_read_rejects_blank_query(gateway):
    with pytest.raises(QueryValidationError):
        asyncio.run(gateway.read("   ", "openai"))


def test_read_rejects_unknown_provider(gateway):
    with pytest.raises(UnknownProviderError):
        asyncio.run(gateway.read("science", "cohere"))


def test_read_wraps_provider_failure(gateway, registry):
    registry.register("exploding", ExplodingSimulator(latency_s=0))
    with pytest.raises(FetchFailedError, match="Failed to fetch data"):
        asyncio.run(gateway.read("zzqzz123", "exploding"))


def test_provider_list_response_is_merged(gateway, registry, context):
    registry.register("multi", ListSimulator(latency_s=0))
    items = asyncio.run(gateway.read("zzqzz123", "multi"))
    assert ids(items) == ["multi-0", "multi-1"]
    assert "multi-1" in context.records


def test_populate_reports_count_and_provider(gateway):
    result = asyncio.run(gateway.populate("science", "huggingface"))
    assert result.success is True
    assert result.message == f"Successfully populated {result.item_count} items using huggingface"
    assert 3 <= result.item_count <= 7


def test_populate_uncovered_query_uses_provider(gateway):
    result = asyncio.run(gateway.populate("zzqzz123", "huggingface"))
    assert result.success is True
    assert result.item_count == 1
    items = asyncio.run(gateway.read("zzqzz123", "huggingface"))
    assert items[0].source == "HuggingFace Mistral-7B"


def test_populate_refreshes_provider_answer(gateway):
    before = asyncio.run(gateway.read("zzqzz123", "openai"))
    asyncio.run(gateway.populate("zzqzz123", "openai"))
    after = asyncio.run(gateway.read("zzqzz123", "openai"))
    assert ids(before) != ids(after)


@pytest.mark.parametrize(
    "query, provider, expected",
    [
        ("", "openai", "query must not be empty"),
        ("science", "cohere", "is not supported"),
    ],
)
def test_populate_never_raises(gateway, query, provider, expected):
    result = asyncio.run(gateway.populate(query, provider))
    assert result.success is False
    assert result.message.startswith("Error: ")
    assert expected in result.message


def test_populate_converts_provider_failure(gateway, registry):
    registry.register("exploding", ExplodingSimulator(latency_s=0))
    result = asyncio.run(gateway.populate("zzqzz123", "exploding"))
    assert result.success is False
    assert "AI processing failed: provider down" in result.message


def test_populate_reports_failure_when_every_tier_is_empty(gateway, registry):
    class EmptySimulator(BaseProviderSimulator):
        async def process_query(self, query):
            return []

    registry.register("empty", EmptySimulator(latency_s=0))
    result = asyncio.run(gateway.populate("zzqzz123", "empty"))
    assert result.success is False
    assert result.message == "No data could be populated"


def test_concurrent_provider_fallback_shares_one_call(gateway, registry, context):
    simulator = CountingSimulator()
    registry.register("counting", simulator)

    async def scenario():
        return await asyncio.gather(*(gateway.read("zzqzz123", "counting") for _ in range(3)))

    results = asyncio.run(scenario())
    later = asyncio.run(gateway.read("zzqzz123", "counting"))

    assert simulator.calls == 1
    assert ids(results[0]) == ids(results[1]) == ids(results[2]) == ids(later)
    assert len(context.records) == 1


def test_provider_fallback_not_shared_without_single_flight(gateway, registry, context):
    simulator = CountingSimulator()
    registry.register("counting", simulator)
    context.resolver.single_flight = False

    async def scenario():
        return await asyncio.gather(*(gateway.read("zzqzz123", "counting") for _ in range(2)))

    asyncio.run(scenario())
    assert simulator.calls == 2


def test_populate_with_non_string_provider_does_not_raise(gateway):
    result = asyncio.run(gateway.populate("science", 123))  # type: ignore[arg-type]
    assert result.success is False
    assert result.message.startswith("Error: ")
    assert result.provider is None

import asyncio

import pytest

from api.base_client import BaseProviderSimulator
from api.huggingface_client import HuggingFaceSimulator
from api.openai_client import OpenAISimulator


@pytest.mark.parametrize("simulator_cls", [OpenAISimulator, HuggingFaceSimulator])
def test_topic_match_is_case_insensitive(simulator_cls):
    simulator = simulator_cls(latency_s=0)
    item = asyncio.run(simulator.process_query("Latest TECHNOLOGY news"))
    assert item.content.startswith(simulator.topics["technology"])


@pytest.mark.parametrize("simulator_cls", [OpenAISimulator, HuggingFaceSimulator])
def test_unmatched_query_uses_generic_paragraph(simulator_cls):
    simulator = simulator_cls(latency_s=0)
    item = asyncio.run(simulator.process_query("zzqzz123"))
    assert item.content.startswith(simulator.generic_content)
    assert '"zzqzz123"' in item.content.splitlines()[-1]


def test_first_topic_in_table_order_wins():
    simulator = OpenAISimulator(latency_s=0)
    assert simulator.match_topic("health and technology") == "technology"


def test_providers_answer_differently_for_same_query():
    openai_item = asyncio.run(OpenAISimulator(latency_s=0).process_query("science today"))
    hf_item = asyncio.run(HuggingFaceSimulator(latency_s=0).process_query("science today"))
    assert openai_item.source == "OpenAI GPT-4"
    assert hf_item.source == "HuggingFace Mistral-7B"
    assert openai_item.content != hf_item.content
    assert openai_item.title == "OpenAI Analysis: science today"
    assert hf_item.model == "mistralai/Mistral-7B-Instruct-v0.2-simulated"


def test_item_ids_are_unique_per_call():
    simulator = OpenAISimulator(latency_s=0)
    first = asyncio.run(simulator.process_query("business"))
    second = asyncio.run(simulator.process_query("business"))
    assert first.id.startswith("openai-")
    assert first.id != second.id


def test_base_simulator_is_abstract():
    with pytest.raises(TypeError):
        BaseProviderSimulator()  # type: ignore[abstract]


def test_negative_latency_is_clamped():
    assert OpenAISimulator(latency_s=-5).latency_s == 0.0

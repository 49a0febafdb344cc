import random

import pytest

from api.huggingface_client import HuggingFaceSimulator
from api.openai_client import OpenAISimulator
from config.config import Config
from context.session_context import QueryContext
from datasources.native_system_module import NativeSystemModule
from orchestrator.core import QueryGateway
from orchestrator.provider_registry import ProviderRegistry
from orchestrator.tiered_resolver import TieredResolver


@pytest.fixture
def fast_env(monkeypatch):
    """Environment with every simulated delay switched off."""
    env_vars = {
        "NATIVE_POPULATE_DELAY_S": "0",
        "PROVIDER_LATENCY_S": "0",
        "SINGLE_FLIGHT": "true",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("DEFAULT_PROVIDER", raising=False)
    monkeypatch.delenv("NATIVE_COVERAGE", raising=False)
    monkeypatch.delenv("PROVIDER_REGISTRY_PATH", raising=False)
    return env_vars


@pytest.fixture
def registry():
    registry = ProviderRegistry()
    registry.register("openai", OpenAISimulator(latency_s=0))
    registry.register("huggingface", HuggingFaceSimulator(latency_s=0))
    return registry


@pytest.fixture
def store():
    return NativeSystemModule(populate_delay_s=0, rng=random.Random(42))


@pytest.fixture
def context(registry, store):
    return QueryContext(
        registry=registry,
        store=store,
        resolver=TieredResolver(store),
        default_provider=registry.default_provider,
    )


@pytest.fixture
def gateway(context):
    return QueryGateway(context)


@pytest.fixture
def fast_config(fast_env):
    return Config()

from __future__ import annotations

from pathlib import Path

import yaml

from api.base_client import BaseProviderSimulator
from api.huggingface_client import HuggingFaceSimulator
from api.openai_client import OpenAISimulator
from models.result_item import ResultItem
from orchestrator.errors import ProviderProcessingError, UnknownProviderError
from utils.logger import get_logger

logger = get_logger(__name__)

SIMULATOR_KINDS: dict[str, type[BaseProviderSimulator]] = {
    "openai": OpenAISimulator,
    "huggingface": HuggingFaceSimulator,
}

DEFAULT_REGISTRY_PATH = Path(__file__).resolve().parent.parent / "config" / "provider_registry.yaml"


class ProviderRegistry:
    def __init__(self):
        self._providers: dict[str, BaseProviderSimulator] = {}

    @classmethod
    def from_yaml(
        cls, path: str | Path | None = None, latency_override_s: float | None = None
    ) -> "ProviderRegistry":
        registry_path = Path(path) if path else DEFAULT_REGISTRY_PATH
        if not registry_path.exists():
            raise ValueError(f"Provider registry not found at {registry_path}")

        data = yaml.safe_load(registry_path.read_text(encoding="utf-8"))
        if not data or "providers" not in data:
            raise ValueError("Invalid provider registry: missing providers")

        registry = cls()
        for provider_id, pdata in data["providers"].items():
            if not isinstance(pdata, dict) or "simulator" not in pdata:
                raise ValueError(f"Missing simulator kind for provider {provider_id}")
            if not pdata.get("enabled", True):
                continue
            kind = pdata["simulator"]
            simulator_cls = SIMULATOR_KINDS.get(kind)
            if simulator_cls is None:
                raise ValueError(f"Unknown simulator kind '{kind}' for provider {provider_id}")
            latency = latency_override_s if latency_override_s is not None else pdata.get("latency_s", 1.0)
            registry.register(
                provider_id,
                simulator_cls(latency_s=float(latency), model_name=pdata.get("model")),
            )

        if not registry.provider_ids():
            raise ValueError("Invalid provider registry: no enabled providers")
        return registry

    def register(self, provider_id: str, simulator: BaseProviderSimulator) -> None:
        key = (provider_id or "").strip().lower()
        if not key:
            raise ValueError("provider id must not be empty")
        if not isinstance(simulator, BaseProviderSimulator):
            raise TypeError(f"Provider {key} must be a BaseProviderSimulator")
        self._providers[key] = simulator
        logger.debug(f"Registered provider {key} ({type(simulator).__name__})")

    def provider_ids(self) -> list[str]:
        return list(self._providers)

    @property
    def default_provider(self) -> str | None:
        return next(iter(self._providers), None)

    def __contains__(self, provider_id: object) -> bool:
        return isinstance(provider_id, str) and provider_id.strip().lower() in self._providers

    def resolve(self, provider_id: str) -> BaseProviderSimulator:
        key = (provider_id or "").strip().lower()
        simulator = self._providers.get(key)
        if simulator is None:
            raise UnknownProviderError(provider_id, self.provider_ids())
        return simulator

    async def process(self, provider_id: str, query: str) -> ResultItem | list[ResultItem]:
        """
        Delegate a query to the named provider.

        Unknown ids raise UnknownProviderError; anything the simulator raises is
        reported as ProviderProcessingError.
        """
        simulator = self.resolve(provider_id)
        try:
            return await simulator.process_query(query)
        except Exception as e:
            logger.error(
                f"Error processing query with {provider_id}: {e}",
                extra={"extra_fields": {"provider": provider_id, "query": query}},
            )
            raise ProviderProcessingError(provider_id, str(e)) from e

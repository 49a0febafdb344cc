import asyncio
import uuid
from abc import ABC, abstractmethod

from models.result_item import ResultItem, utc_timestamp
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseProviderSimulator(ABC):
    """
    Abstract base class for AI provider simulators.
    Every provider variant answers a query with a single ResultItem.
    """

    provider_name: str = "base"

    def __init__(self, latency_s: float = 1.0, **kwargs):
        """
        Initialize the simulator.

        Args:
            latency_s: Simulated processing latency in seconds
            **kwargs: Additional provider-specific parameters
        """
        self.latency_s = max(0.0, float(latency_s))
        self.model_name = kwargs.get("model_name")

    @abstractmethod
    async def process_query(self, query: str) -> ResultItem:
        """
        Process a query and return the provider's answer.

        Args:
            query: The user's query text as submitted

        Returns:
            A ResultItem produced by this provider
        """


class TopicTemplateSimulator(BaseProviderSimulator):
    """
    Simulator that answers from a fixed topic table after a fixed delay.

    Subclasses supply the topic table, the generic paragraph, the closing
    sentence template and the labels used on the returned item.
    """

    topics: dict[str, str] = {}
    generic_content: str = ""
    closing_template: str = 'This response was generated for your query "{query}".'
    source: str = "Simulated Provider"
    title_prefix: str = "Analysis"
    default_model: str = "simulated"

    def __init__(self, latency_s: float = 1.0, **kwargs):
        super().__init__(latency_s, **kwargs)
        self.model_name = self.model_name or self.default_model

    def match_topic(self, query: str) -> str | None:
        """Return the first topic keyword contained in the query, if any."""
        lowered = query.lower()
        for topic in self.topics:
            if topic.lower() in lowered:
                return topic
        return None

    def generate_content(self, query: str) -> str:
        topic = self.match_topic(query)
        base_content = self.topics[topic] if topic else self.generic_content
        return f"{base_content}\n\n{self.closing_template.format(query=query)}"

    async def process_query(self, query: str) -> ResultItem:
        logger.info(
            f"Simulating {self.provider_name} response",
            extra={"extra_fields": {"provider": self.provider_name, "query": query}},
        )
        await asyncio.sleep(self.latency_s)
        return ResultItem(
            id=f"{self.provider_name}-{uuid.uuid4().hex[:12]}",
            title=f"{self.title_prefix}: {query}",
            content=self.generate_content(query),
            source=self.source,
            timestamp=utc_timestamp(),
            model=self.model_name,
        )

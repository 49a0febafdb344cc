from dataclasses import dataclass, field
from enum import Enum

from models.result_item import ResultItem


class ResolutionTier(str, Enum):
    CACHE = "cache"
    STORE = "store"
    POPULATE = "populate"
    COALESCED = "coalesced"
    PROVIDER = "provider"


@dataclass(frozen=True)
class Resolution:
    tier: ResolutionTier
    items: list[ResultItem] = field(default_factory=list)


@dataclass
class ResolverStats:
    cache_hits: int = 0
    store_hits: int = 0
    populates: int = 0
    coalesced: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "cache_hits": self.cache_hits,
            "store_hits": self.store_hits,
            "populates": self.populates,
            "coalesced": self.coalesced,
        }


@dataclass(frozen=True)
class PopulateResult:
    success: bool
    message: str
    item_count: int = 0
    provider: str | None = None

"""Pydantic response models (DTOs) for FastAPI endpoints."""

from pydantic import BaseModel, Field


class ResultItemDTO(BaseModel):
    id: str
    title: str
    content: str
    source: str
    timestamp: str | None = None
    model: str | None = None

    @classmethod
    def from_result_item(cls, item):
        """Convert ResultItem to DTO."""
        return cls(**item.to_dict())


class QueryResponseDTO(BaseModel):
    query: str
    provider: str | None = None
    items: list[ResultItemDTO] = Field(default_factory=list)

    @classmethod
    def from_items(cls, query: str, provider: str | None, items):
        return cls(
            query=query,
            provider=provider,
            items=[ResultItemDTO.from_result_item(i) for i in items],
        )


class PopulateResponseDTO(BaseModel):
    success: bool
    message: str
    item_count: int = 0
    provider: str | None = None

    @classmethod
    def from_populate_result(cls, result):
        return cls(
            success=result.success,
            message=result.message,
            item_count=result.item_count,
            provider=result.provider,
        )


class RecordsResponseDTO(BaseModel):
    count: int
    items: list[ResultItemDTO]
    stats: dict[str, int] = Field(default_factory=dict)


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str = "1.0.0"
    providers: list[str] = Field(default_factory=list)

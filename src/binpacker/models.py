from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class Packable(Protocol):
    """Anything with a non-negative integral size can be packed."""

    @property
    def size(self) -> int: ...


class Parcel(BaseModel):
    """Parcel model with identifier and size (in capacity units)."""

    id: str = Field(description="Unique identifier for the parcel")
    size: int = Field(ge=0, description="Size of the parcel")
    data: Optional[Any] = Field(
        default=None,
        description="Opaque payload carried along, never inspected")


class BinReport(BaseModel):
    """Contents of one packed bin."""

    item_ids: list[str] = Field(default_factory=list)
    sizes: list[int] = Field(default_factory=list)
    remaining_space: int = Field(ge=0, description="Capacity left in the bin")
    used_space: int = Field(ge=0, description="Sum of packed sizes")


class PackingResult(BaseModel):
    """Standard result returned to CLI and API callers."""

    strategy: str
    capacity: int = Field(gt=0)
    bins: list[BinReport] = Field(default_factory=list)
    bin_count: int = 0
    item_count: int = 0
    used_space: int = 0
    total_space: int = 0
    fill_rate: float = 0.0
    lower_bound: int = 0

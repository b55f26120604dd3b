"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, model_validator

from binpacker.models import Parcel


class ItemSchema(BaseModel):
    """Schema for an item: either a single parcel (id) or a batch (sku + quantity)."""
    id: Optional[str] = Field(None, description="Identifier of a single item")
    sku: Optional[str] = Field(None, description="SKU expanded into `quantity` items")
    size: int = Field(ge=0, description="Size of the item in capacity units")
    quantity: int = Field(1, ge=1, description="Number of items for a SKU entry")
    data: Optional[Any] = Field(None, description="Opaque payload carried into the bin")

    @model_validator(mode="after")
    def _check_identity(self) -> "ItemSchema":
        if self.id is None and self.sku is None:
            raise ValueError("item needs either 'id' or 'sku'")
        if self.id is not None and self.sku is not None:
            raise ValueError("item takes 'id' or 'sku', not both")
        if self.id is not None and self.quantity != 1:
            raise ValueError("'quantity' only applies to 'sku' items")
        return self


class PackingRequestSchema(BaseModel):
    """Schema for a packing request."""
    capacity: int = Field(gt=0, description="Capacity shared by every bin")
    strategy: Optional[str] = Field(None, description="next_fit, ffd or mffd")
    items: List[ItemSchema] = Field(default_factory=list, description="List of items to pack")


def count_items(request: PackingRequestSchema) -> int:
    """Number of parcels `expand_items` would build, without building them."""
    return sum(1 if item.id is not None else item.quantity for item in request.items)


def expand_items(request: PackingRequestSchema) -> list[Parcel]:
    """Turn request items into parcels, in input order."""
    parcels: list[Parcel] = []
    for item in request.items:
        if item.id is not None:
            parcels.append(Parcel(id=item.id, size=item.size, data=item.data))
            continue

        for i in range(item.quantity):
            parcels.append(Parcel(id=f"{item.sku}_{i:04d}", size=item.size, data=item.data))
    return parcels

"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from parcel_packer.models import Item

INCH_TO_CM = 2.54


class DimsSchema(BaseModel):
    """Dimensions block ({"L": .., "W": .., "H": ..})."""
    L: float = Field(gt=0, description="Length")
    W: float = Field(gt=0, description="Width")
    H: float = Field(gt=0, description="Height")


class ItemLineSchema(BaseModel):
    """
    One line of an item list: an item (or `quantity` identical items) for a destination.

    Dimensions come from flat length/width/height (cm), dims_cm or dims_in.
    """
    id: Optional[str] = Field(None, description="Item identifier")
    sku: Optional[str] = Field(None, description="SKU, used as id prefix when id is missing")
    destination: str = Field(description="Shipping destination")
    length: Optional[float] = Field(None, gt=0, description="Length in cm")
    width: Optional[float] = Field(None, gt=0, description="Width in cm")
    height: Optional[float] = Field(None, gt=0, description="Height in cm")
    dims_cm: Optional[DimsSchema] = None
    dims_in: Optional[DimsSchema] = None
    weight: Optional[float] = Field(None, ge=0, description="Weight in kg")
    weight_kg: Optional[float] = Field(None, ge=0, description="Weight in kg (alias)")
    quantity: int = Field(1, ge=1, description="Number of identical items")

    @model_validator(mode="after")
    def _check_required_fields(self) -> "ItemLineSchema":
        if not (self.id or self.sku):
            raise ValueError("item line needs an 'id' or a 'sku'")
        if self.weight is None and self.weight_kg is None:
            raise ValueError(f"item line '{self.id or self.sku}' needs a weight or weight_kg")
        has_flat = None not in (self.length, self.width, self.height)
        if not (has_flat or self.dims_cm or self.dims_in):
            raise ValueError(
                f"item line '{self.id or self.sku}' needs length/width/height, dims_cm or dims_in")
        return self

    def dims(self) -> tuple[float, float, float]:
        """(length, width, height) in cm."""
        if self.length is not None and self.width is not None and self.height is not None:
            return self.length, self.width, self.height
        if self.dims_cm is not None:
            return self.dims_cm.L, self.dims_cm.W, self.dims_cm.H
        d = self.dims_in
        return d.L * INCH_TO_CM, d.W * INCH_TO_CM, d.H * INCH_TO_CM

    def to_items(self) -> list[Item]:
        length, width, height = self.dims()
        weight = self.weight if self.weight is not None else self.weight_kg
        base_id = self.id or self.sku

        if self.quantity == 1:
            ids = [base_id]
        else:
            ids = [f"{base_id}_{i:04d}" for i in range(1, self.quantity + 1)]

        return [
            Item(
                id=item_id,
                destination=self.destination,
                length=length,
                width=width,
                height=height,
                weight=weight,
            )
            for item_id in ids
        ]


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    items: List[ItemLineSchema] = Field(description="Item lines to pack")

    def to_items(self) -> list[Item]:
        return [item for line in self.items for item in line.to_items()]

"""Data schemas for input/output operations."""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from cuboid_packer.containers import get_bin_dims
from cuboid_packer.models import Bin, Box, PackParameters


class BoxSchema(BaseModel):
    """Schema for a box line; quantity > 1 expands into numbered copies."""
    id: Optional[str] = Field(None, description="Identifier of the box")
    width: float = Field(gt=0, description="Width of the box")
    height: float = Field(gt=0, description="Height of the box")
    depth: float = Field(gt=0, description="Depth of the box")
    weight: float = Field(ge=0, default=0.0, description="Weight of the box")
    quantity: int = Field(ge=1, default=1, description="Number of identical boxes")


class BinSchema(BaseModel):
    """Schema for the bin; every field optional so it can override a preset."""
    width: Optional[float] = Field(None, gt=0, description="Width of the bin")
    height: Optional[float] = Field(None, gt=0, description="Height of the bin")
    depth: Optional[float] = Field(None, gt=0, description="Depth of the bin")
    max_weight: Optional[float] = Field(None, ge=0, description="Weight capacity, 0 = unlimited")


class PackRequestSchema(BaseModel):
    """Schema for a packing request."""
    bin_preset: Optional[str] = Field(None, description="Container preset, e.g. 40HC")
    bin: Optional[BinSchema] = None
    allow_rotate_vertically: bool = False
    shuffle_count: int = Field(5, ge=0, description="Random orderings per algorithm")
    seed: int = 0
    boxes: List[BoxSchema] = Field(default_factory=list, description="Boxes to pack")

    @model_validator(mode="after")
    def _needs_bin(self) -> "PackRequestSchema":
        if self.bin_preset is None and self.bin is None:
            raise ValueError("request must include either 'bin_preset' or 'bin'")
        return self

    def to_bin(self) -> Bin:
        bin_kwargs: dict = {}
        if self.bin_preset is not None:
            bin_kwargs.update(get_bin_dims(self.bin_preset))
        if self.bin is not None:
            bin_kwargs.update(self.bin.model_dump(exclude_none=True))
        return Bin(**bin_kwargs)

    def to_boxes(self) -> List[Box]:
        boxes = []
        for n, line in enumerate(self.boxes):
            box_id = line.id if line.id is not None else f"BOX{n}"
            for i in range(line.quantity):
                boxes.append(Box(
                    width=line.width,
                    height=line.height,
                    depth=line.depth,
                    weight=line.weight,
                    tag=box_id if line.quantity == 1 else f"{box_id}_{i:04d}",
                ))
        return boxes

    def to_parameters(self) -> PackParameters:
        return PackParameters(
            bin=self.to_bin(),
            boxes=self.to_boxes(),
            allow_rotate_vertically=self.allow_rotate_vertically,
            shuffle_count=self.shuffle_count,
            seed=self.seed,
        )

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cuboid_packer.geometry import Bounds


class Bin(BaseModel):
    """Bin (container) model with dimensions and weight capacity."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0, description="X extent of the bin")
    height: float = Field(gt=0, description="Y (vertical) extent of the bin")
    depth: float = Field(gt=0, description="Z extent of the bin")
    max_weight: float = Field(
        default=0.0,
        ge=0,
        description="Weight capacity; 0 means unlimited")

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth


class Box(BaseModel):
    """Box to be packed. Immutable; placement is reported separately."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0, description="Width of the box")
    height: float = Field(gt=0, description="Height of the box")
    depth: float = Field(gt=0, description="Depth of the box")
    weight: float = Field(default=0.0, ge=0, description="Weight of the box")
    tag: Any = Field(default=None, description="Opaque caller identifier")

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def edges(self) -> tuple[float, float, float]:
        """Edge lengths sorted ascending: (min, mid, max)."""
        low, mid, high = sorted((self.width, self.height, self.depth))
        return low, mid, high


class Placement(BaseModel):
    """Placement of one box: position and oriented dimensions."""

    model_config = ConfigDict(frozen=True)

    box_index: int = Field(ge=0, description="Index of the box in the input list")
    tag: Any = None
    x: float
    y: float
    z: float

    # ACTUAL placed dimensions after rotation
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    depth: float = Field(gt=0)
    weight: float = Field(default=0.0, ge=0)

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def bounds(self) -> Bounds:
        return (
            self.x,
            self.y,
            self.z,
            self.x + self.width,
            self.y + self.height,
            self.z + self.depth,
        )

    def __str__(self) -> str:
        return (
            f"Placement(box: {self.box_index}, tag: {self.tag!r}, "
            f"X: {self.x}, Y: {self.y}, Z: {self.z}, "
            f"Width: {self.width}, Height: {self.height}, Depth: {self.depth}, "
            f"Weight: {self.weight})"
        )


class PackParameters(BaseModel):
    """Everything one pack run needs."""

    bin: Bin
    boxes: list[Box] = Field(default_factory=list)
    allow_rotate_vertically: bool = Field(
        default=False,
        description="Allow orientations that change which edge is vertical")
    shuffle_count: int = Field(
        default=5,
        ge=0,
        description="Random orderings tried per algorithm and bin")
    seed: int = Field(default=0, description="Seed for the random orderings")


class PackingResult(BaseModel):
    """Bins in fill order, each with the algorithm that won it."""

    model_config = ConfigDict(frozen=True)

    bins: list[list[Placement]] = Field(default_factory=list)
    algorithms: list[str] = Field(default_factory=list)

    @property
    def box_count(self) -> int:
        return sum(len(placements) for placements in self.bins)

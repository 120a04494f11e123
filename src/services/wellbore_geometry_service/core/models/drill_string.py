from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from services.wellbore_geometry_service.core.models.enums import ComponentType
from services.wellbore_geometry_service.core.utilities.constants import (
    JET_SIZE_DENOMINATOR,
)


@dataclass(slots=True)
class DrillStringComponent:
    """
    Collections of components are authored bottom-to-top: index 0 is the deepest
    component (usually the bit).
    """

    id: int
    name: str
    component_type: ComponentType
    length: float
    od: float
    id_diameter: float
    joint_length: float = field(default=0.0)

    @property
    def number_of_joints(self) -> int:
        if self.joint_length > 0 and self.length > 0:
            return math.ceil(self.length / self.joint_length)
        return 0


@dataclass(frozen=True, slots=True)
class StackedComponent:
    component: DrillStringComponent
    top_md: float
    bottom_md: float

    @property
    def length(self) -> float:
        return self.bottom_md - self.top_md

    def __iter__(self) -> Iterator[float]:
        return iter((self.top_md, self.bottom_md))


@dataclass(frozen=True, slots=True)
class ToolJointConfig:
    od: float
    id_diameter: float
    length: float
    weight: float = field(default=0.0)


@dataclass(frozen=True, slots=True)
class BitJetsConfig:
    # nozzle sizes in 1/32 in
    jet_sizes: tuple[int, ...]

    @property
    def total_flow_area(self) -> float:
        """Total flow area of the nozzles in square inches."""
        diameters = np.asarray(
            [s for s in self.jet_sizes if s > 0], dtype=float
        ) / JET_SIZE_DENOMINATOR
        return float(np.sum(np.pi * (diameters / 2.0) ** 2))


@dataclass(slots=True)
class ComponentAnnotations:
    """
    Optional per-component configuration, keyed by component id. Kept apart from
    the components themselves since the volumetric engine never reads it.
    """

    tool_joints: dict[int, ToolJointConfig] = field(default_factory=dict)
    bit_jets: dict[int, BitJetsConfig] = field(default_factory=dict)

    def annotations_for(
        self, component_id: int
    ) -> tuple[ToolJointConfig | None, BitJetsConfig | None]:
        return self.tool_joints.get(component_id), self.bit_jets.get(component_id)

    def discard(self, component_id: int) -> None:
        self.tool_joints.pop(component_id, None)
        self.bit_jets.pop(component_id, None)


@dataclass(frozen=True, slots=True)
class ForceToBottomResult:
    components: tuple[DrillStringComponent, ...]
    delta: float
    adjusted_component_id: int | None = field(default=None)
    old_length: float | None = field(default=None)
    new_length: float | None = field(default=None)
    overrun: bool = field(default=False)

    @property
    def adjusted(self) -> bool:
        return self.adjusted_component_id is not None

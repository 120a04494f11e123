from __future__ import annotations

import dataclasses
from typing import Sequence

import numpy as np

from logger import get_logger
from services.wellbore_geometry_service.core.models import (
    ComponentType,
    DepthDifferentialStatus,
    DrillStringComponent,
    ForceToBottomResult,
    StackedComponent,
)
from services.wellbore_geometry_service.core.utilities.constants import (
    FORCE_TO_BOTTOM_TOLERANCE,
    ON_BOTTOM_TOLERANCE,
)
from services.wellbore_geometry_service.utils._exceptions import require_collection

_logger = get_logger(__name__)

_SUGGESTED_BHA_COMPONENTS = (
    ComponentType.DC,
    ComponentType.HWDP,
    ComponentType.STABILIZER,
    ComponentType.BIT,
)


class DrillStringStacker:
    """
    Places a bottom-to-top authored drill string at absolute depths hanging from
    the surface. The last authored component sits at 0 ft, index 0 is the deepest.
    """

    @staticmethod
    def stack(
        components: Sequence[DrillStringComponent],
    ) -> tuple[StackedComponent, ...]:
        require_collection(components, "components")

        stacked: list[StackedComponent] = []
        current_depth = 0.0
        for component in reversed(components):
            top = current_depth
            bottom = current_depth + component.length
            stacked.append(StackedComponent(component, top, bottom))
            current_depth = bottom

        _logger.debug(
            "Stacked %d drill string components down to %.2f ft",
            len(stacked),
            current_depth,
        )
        return tuple(stacked)

    @staticmethod
    def total_length(components: Sequence[DrillStringComponent]) -> float:
        require_collection(components, "components")
        if not components:
            return 0.0
        return float(np.sum([c.length for c in components]))

    @staticmethod
    def depth_differential(
        total_wellbore_md: float, components: Sequence[DrillStringComponent]
    ) -> float:
        """Positive when the string is short of total depth, negative when it overruns."""
        return total_wellbore_md - DrillStringStacker.total_length(components)

    @staticmethod
    def feet_missing(
        total_wellbore_md: float, components: Sequence[DrillStringComponent]
    ) -> float:
        if total_wellbore_md <= 0:
            return 0.0
        return max(
            0.0, DrillStringStacker.depth_differential(total_wellbore_md, components)
        )

    @staticmethod
    def depth_differential_status(differential: float) -> DepthDifferentialStatus:
        if abs(differential) < ON_BOTTOM_TOLERANCE:
            return DepthDifferentialStatus.ON_BOTTOM
        if differential > 0:
            return DepthDifferentialStatus.SHORT
        return DepthDifferentialStatus.OVERRUN

    @staticmethod
    def exceeds_total_depth(
        total_wellbore_md: float,
        components: Sequence[DrillStringComponent],
        tolerance: float = FORCE_TO_BOTTOM_TOLERANCE,
    ) -> bool:
        return (
            DrillStringStacker.depth_differential(total_wellbore_md, components)
            < -tolerance
        )

    @staticmethod
    def force_to_bottom(
        components: Sequence[DrillStringComponent],
        total_wellbore_md: float,
        tolerance: float = FORCE_TO_BOTTOM_TOLERANCE,
    ) -> ForceToBottomResult:
        """
        Extend the deepest component so the string reaches total depth.

        An overrun is reported through ``overrun`` and never shortened here.
        The input components are left untouched; the adjusted string is returned.
        """
        require_collection(components, "components")
        unchanged = tuple(components)
        if total_wellbore_md <= 0 or not components:
            return ForceToBottomResult(components=unchanged, delta=0.0)

        delta = DrillStringStacker.depth_differential(total_wellbore_md, components)

        if delta > tolerance:
            deepest = components[0]
            new_length = deepest.length + delta
            adjusted = dataclasses.replace(deepest, length=new_length)
            _logger.debug(
                "Drill string forced to bottom: %s length %.2f -> %.2f ft (+%.2f ft)",
                deepest.name,
                deepest.length,
                new_length,
                delta,
            )
            return ForceToBottomResult(
                components=(adjusted, *components[1:]),
                delta=delta,
                adjusted_component_id=deepest.id,
                old_length=deepest.length,
                new_length=new_length,
            )

        if delta < -tolerance:
            _logger.warning(
                "Drill string exceeds well depth by %.2f ft, no adjustment made",
                abs(delta),
            )
            return ForceToBottomResult(components=unchanged, delta=delta, overrun=True)

        return ForceToBottomResult(components=unchanged, delta=delta)

    @staticmethod
    def bit_to_bottom(
        components: Sequence[DrillStringComponent], total_wellbore_md: float
    ) -> float | None:
        """String length minus total depth, only defined when the deepest component is a bit."""
        if not components or components[0].component_type != ComponentType.BIT:
            return None
        return DrillStringStacker.total_length(components) - total_wellbore_md

    @staticmethod
    def suggested_bha_components(
        components: Sequence[DrillStringComponent],
    ) -> tuple[ComponentType, ...]:
        if not components or components[0].component_type != ComponentType.DRILL_PIPE:
            return ()
        return _SUGGESTED_BHA_COMPONENTS

    @staticmethod
    def slice_by_bit_depth(
        stacked: Sequence[StackedComponent], bit_depth: float
    ) -> tuple[StackedComponent, ...]:
        """
        Truncate a surface-down stacked string at ``bit_depth``; the component
        crossing the bit depth is shortened, everything below it is dropped.
        """
        require_collection(stacked, "stacked")

        sliced: list[StackedComponent] = []
        for s in stacked:
            if s.top_md >= bit_depth:
                break
            bottom = min(s.bottom_md, bit_depth)
            if bottom <= s.top_md:
                break
            component = s.component
            if bottom < s.bottom_md:
                component = dataclasses.replace(component, length=bottom - s.top_md)
            sliced.append(StackedComponent(component, s.top_md, bottom))
        return tuple(sliced)

from __future__ import annotations

from dataclasses import dataclass, field

from services.wellbore_geometry_service.core import models


@dataclass(frozen=True, slots=True)
class GeometryReport:
    """
    Everything derived by one recalculation pass. Rebuilt from the two source
    collections every time, never stored as authoritative state.
    """

    unit_system: models.UnitSystem
    total_wellbore_md: float
    sections: tuple[models.WellboreSection, ...]
    drill_string: tuple[models.StackedComponent, ...]
    breakdown: models.AnnularBreakdown
    validation: models.ValidationResult
    depth_differential: float
    depth_differential_status: models.DepthDifferentialStatus
    force_to_bottom: models.ForceToBottomResult | None = field(default=None)

    @property
    def totals(self) -> models.VolumeTotals:
        return self.breakdown.totals

    @property
    def segments(self) -> tuple[models.AnnularVolumeSegment, ...]:
        return self.breakdown.segments

"""
Closed-form volumes for tubular and annular intervals.

Imperial inputs are diameters in inches and lengths in feet, giving barrels.
Metric inputs are diameters in millimetres and lengths in metres, giving cubic metres.
Degenerate geometry (non-positive or NaN diameter/length) always yields 0.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from services.wellbore_geometry_service.core.models import (
    DrillStringComponent,
    UnitSystem,
    WellboreSection,
    WellboreSectionType,
)
from services.wellbore_geometry_service.core.utilities.constants import (
    BBL_VOLUME_CONSTANT,
    METRIC_VOLUME_CONSTANT,
    MM_PER_M,
)


def cylindrical_volume(
    diameter: float, length: float, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    if not (diameter > 0 and length > 0):
        return 0.0

    if unit_system == UnitSystem.IMPERIAL:
        return (diameter * diameter * length) / BBL_VOLUME_CONSTANT

    radius_m = diameter / MM_PER_M / 2.0
    return math.pi * radius_m * radius_m * length


def annular_volume(
    outer_diameter: float,
    inner_diameter: float,
    length: float,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> float:
    outer = cylindrical_volume(outer_diameter, length, unit_system)
    inner = cylindrical_volume(inner_diameter, length, unit_system)
    return max(0.0, outer - inner)


def effective_hole_diameter(od: float, washout_percent: float | None) -> float:
    """
    Nominal hole diameter enlarged by the washout percentage. A missing, negative
    or NaN washout does not enlarge the hole.
    """
    if washout_percent is None or not washout_percent > 0:
        return od
    return od * (1.0 + washout_percent / 100.0)


def open_hole_volume(
    od: float,
    washout_percent: float | None,
    length: float,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> float:
    """
    Volume of a washed-out open hole: pi * (d_eff / 2)^2 * length / k, where k is
    1029.4 for imperial units and 1e6 for metric units.

    Example: 8.5 in hole, 12.5 % washout, 100 ft -> d_eff = 9.5625 in, ~6.96 bbl.
    """
    diameter = effective_hole_diameter(od, washout_percent)
    if not (diameter > 0 and length > 0):
        return 0.0

    constant = (
        BBL_VOLUME_CONSTANT
        if unit_system == UnitSystem.IMPERIAL
        else METRIC_VOLUME_CONSTANT
    )
    return math.pi * (diameter / 2.0) ** 2 * length / constant


def wellbore_section_volume(
    section: WellboreSection, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    if section.section_type == WellboreSectionType.OPEN_HOLE:
        return open_hole_volume(
            section.od, section.washout_percent, section.length, unit_system
        )
    return cylindrical_volume(section.id_diameter, section.length, unit_system)


def internal_volume(
    component: DrillStringComponent, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    return cylindrical_volume(component.id_diameter, component.length, unit_system)


def displacement_volume(
    component: DrillStringComponent, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    """Steel volume of the component: (OD^2 - ID^2) over its length."""
    if not (component.od > 0 and component.id_diameter > 0 and component.length > 0):
        return 0.0
    return annular_volume(
        component.od, component.id_diameter, component.length, unit_system
    )


def closed_end_displacement(
    component: DrillStringComponent, unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    return cylindrical_volume(component.od, component.length, unit_system)


def total_wellbore_volume(
    sections: Iterable[WellboreSection], unit_system: UnitSystem = UnitSystem.IMPERIAL
) -> float:
    volumes = [wellbore_section_volume(s, unit_system) for s in sections]
    return float(np.sum(volumes)) if volumes else 0.0


def total_drill_string_volume(
    components: Iterable[DrillStringComponent],
    use_displacement: bool = False,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> float:
    volume_of = displacement_volume if use_displacement else internal_volume
    volumes = [volume_of(c, unit_system) for c in components]
    return float(np.sum(volumes)) if volumes else 0.0


def total_annular_volume(
    total_wellbore: float, total_drill_string: float
) -> float:
    return max(0.0, total_wellbore - total_drill_string)

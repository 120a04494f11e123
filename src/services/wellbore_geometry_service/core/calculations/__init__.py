from services.wellbore_geometry_service.core.calculations.volume_calculator import (
    annular_volume,
    closed_end_displacement,
    cylindrical_volume,
    displacement_volume,
    effective_hole_diameter,
    internal_volume,
    open_hole_volume,
    total_annular_volume,
    total_drill_string_volume,
    total_wellbore_volume,
    wellbore_section_volume,
)

__all__ = [
    "cylindrical_volume",
    "annular_volume",
    "effective_hole_diameter",
    "open_hole_volume",
    "wellbore_section_volume",
    "internal_volume",
    "displacement_volume",
    "closed_end_displacement",
    "total_wellbore_volume",
    "total_drill_string_volume",
    "total_annular_volume",
]

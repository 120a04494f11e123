from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from logger import get_logger
from services.wellbore_geometry_service.core.calculations import (
    wellbore_section_volume,
)
from services.wellbore_geometry_service.core.models import (
    WHOLE_WELLBORE_SUBJECT_ID,
    WHOLE_WELLBORE_SUBJECT_NAME,
    DrillStringComponent,
    UnitSystem,
    ValidationResult,
    WellboreSection,
    WellboreSectionType,
)
from services.wellbore_geometry_service.core.service.drill_string_stacker import (
    DrillStringStacker,
)
from services.wellbore_geometry_service.core.utilities.constants import (
    CASING_OVERRIDE_TOLERANCE,
    DEPTH_ATOL,
    DIAMETER_ATOL,
    DIAMETER_TYPO_THRESHOLD,
    FORCE_TO_BOTTOM_TOLERANCE,
    GAP_TOLERANCE,
    ID_MAX,
    ID_MIN,
    OD_MAX,
    OD_MIN,
    VOLUME_ERROR_THRESHOLD,
    VOLUME_WARNING_THRESHOLD,
    WASHOUT_MAX,
    WASHOUT_MIN,
)
from services.wellbore_geometry_service.core.utilities.display import (
    component_type_display_name,
)
from services.wellbore_geometry_service.core.utilities.units import convert_value
from services.wellbore_geometry_service.utils._exceptions import require_collection


@dataclass(frozen=True, slots=True)
class _Units:
    """
    Unit labels of one unit system and conversions into the imperial units the
    diameter and volume bounds are expressed in.
    """

    system: UnitSystem
    length: str
    diameter: str
    volume: str

    @classmethod
    def of(cls, unit_system: UnitSystem) -> _Units:
        if unit_system == UnitSystem.METRIC:
            return cls(unit_system, "m", "mm", "m3")
        return cls(unit_system, "ft", "in", "bbl")

    def to_inches(self, diameter: float) -> float:
        return convert_value(diameter, self.system, UnitSystem.IMPERIAL, "diameter")

    def from_inches(self, diameter: float) -> float:
        return convert_value(diameter, UnitSystem.IMPERIAL, self.system, "diameter")

    def to_barrels(self, volume: float) -> float:
        return convert_value(volume, self.system, UnitSystem.IMPERIAL, "volume")


class GeometryValidator:
    """
    Rule-based consistency check of a wellbore section stack and a drill string.

    Every applicable rule is evaluated for every record; findings are reported in
    depth order and, within a section, in rule order. Only an empty wellbore stops
    the pass early since there is nothing else to check.

    Diameter ranges and volume thresholds are defined in inches and barrels;
    metric inputs are converted before comparison and reported in mm, m and m3.
    """

    _logger = get_logger(__name__)

    @staticmethod
    def validate(
        sections: Sequence[WellboreSection],
        components: Sequence[DrillStringComponent],
        total_wellbore_md: float,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> ValidationResult:
        result = GeometryValidator.validate_wellbore(
            sections, total_wellbore_md, unit_system
        )
        return result.extend(
            GeometryValidator.validate_drill_string(
                components, total_wellbore_md, unit_system
            )
        )

    @staticmethod
    def validate_wellbore(
        sections: Sequence[WellboreSection],
        total_wellbore_md: float,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> ValidationResult:
        require_collection(sections, "sections")

        result = ValidationResult()
        ordered = sorted(sections, key=lambda s: s.top_md)

        if not ordered:
            result.error(
                WHOLE_WELLBORE_SUBJECT_ID,
                WHOLE_WELLBORE_SUBJECT_NAME,
                "At least one wellbore section is required",
            )
            return result

        units = _Units.of(unit_system)
        _check_ids(ordered, result)
        _check_outer_depths(ordered, total_wellbore_md, units, result)

        previous: WellboreSection | None = None
        for section in ordered:
            _check_diameters(section, previous, units, result)
            _check_depths(section, previous, total_wellbore_md, units, result)
            _check_casing_progression(section, previous, units, result)
            _check_washout(section, result)
            _check_volume(section, units, result)
            previous = section

        GeometryValidator._logger.debug(
            "Validated %d wellbore sections (%s): %d errors, %d warnings",
            len(ordered),
            unit_system.value,
            len(result.errors),
            len(result.warnings),
        )
        return result

    @staticmethod
    def validate_drill_string(
        components: Sequence[DrillStringComponent],
        total_wellbore_md: float,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> ValidationResult:
        require_collection(components, "components")

        result = ValidationResult()
        for c in components:
            subject_id = str(c.id)
            subject_name = c.name
            if not c.name or not c.name.strip():
                subject_name = component_type_display_name(c.component_type)
                result.error(subject_id, subject_name, "Component name is required")
            if not c.od > 0:
                result.error(subject_id, subject_name, "OD must be greater than 0")
            if not c.id_diameter > 0:
                result.error(subject_id, subject_name, "ID must be greater than 0")
            elif c.od > 0 and c.id_diameter >= c.od:
                result.error(
                    subject_id,
                    subject_name,
                    "Internal diameter cannot be greater than or equal to external diameter",
                )
            if not c.length > 0:
                result.error(subject_id, subject_name, "Length must be greater than 0")

        if components and DrillStringStacker.exceeds_total_depth(
            total_wellbore_md, components, FORCE_TO_BOTTOM_TOLERANCE
        ):
            overrun = -DrillStringStacker.depth_differential(
                total_wellbore_md, components
            )
            result.error(
                WHOLE_WELLBORE_SUBJECT_ID,
                "Drill String",
                f"Drill string exceeds well depth by {overrun:.2f} "
                f"{_Units.of(unit_system).length}. "
                "Shorten components or revise the drill string configuration",
            )
        return result


def _check_ids(ordered: Sequence[WellboreSection], result: ValidationResult) -> None:
    counts = Counter(s.id for s in ordered)
    for section_id, count in counts.items():
        if count > 1:
            result.error(
                WHOLE_WELLBORE_SUBJECT_ID,
                WHOLE_WELLBORE_SUBJECT_NAME,
                f"ID {section_id} already exists. Section IDs must be unique",
            )

    if any(s.id != position for position, s in enumerate(ordered, start=1)):
        result.warning(
            WHOLE_WELLBORE_SUBJECT_ID,
            WHOLE_WELLBORE_SUBJECT_NAME,
            "Section IDs are not sequential. Keeping them in depth order is recommended",
        )


def _check_outer_depths(
    ordered: Sequence[WellboreSection],
    total_wellbore_md: float,
    units: _Units,
    result: ValidationResult,
) -> None:
    first = ordered[0]
    if first.top_md != 0:
        result.error(
            str(first.id),
            first.name,
            f"The first section must start at 0.00 {units.length}",
        )

    last = ordered[-1]
    if abs(last.bottom_md - total_wellbore_md) > DEPTH_ATOL:
        result.warning(
            str(last.id),
            last.name,
            f"The last section ends at {last.bottom_md:.2f} {units.length} but the "
            f"total wellbore MD is {total_wellbore_md:.2f} {units.length}. "
            "Is this correct?",
        )


def _check_diameters(
    section: WellboreSection,
    previous: WellboreSection | None,
    units: _Units,
    result: ValidationResult,
) -> None:
    sid, name = str(section.id), section.name
    is_open_hole = section.section_type == WellboreSectionType.OPEN_HOLE

    if not section.od > DIAMETER_ATOL:
        result.error(
            sid,
            name,
            f"OD cannot be 0.000. For OpenHole, enter the hole diameter ({units.diameter})"
            if is_open_hole
            else "OD cannot be 0.000. Enter the outer diameter of the pipe",
        )
    elif not OD_MIN <= units.to_inches(section.od) <= OD_MAX:
        result.error(
            sid,
            name,
            _out_of_range_message("OD", section.od, OD_MIN, OD_MAX, units),
        )

    if not is_open_hole and not section.id_diameter > DIAMETER_ATOL:
        result.error(sid, name, "ID cannot be 0.000 in pipe sections (Casing/Liner)")

    if is_open_hole and section.id_diameter > DIAMETER_ATOL:
        result.error(
            sid,
            name,
            "OpenHole must have ID = 0.000 (no inner pipe). "
            f"Current value: {section.id_diameter:.3f} {units.diameter}",
        )

    if section.id_diameter > DIAMETER_ATOL and not (
        ID_MIN <= units.to_inches(section.id_diameter) <= ID_MAX
    ):
        result.error(
            sid,
            name,
            _out_of_range_message("ID", section.id_diameter, ID_MIN, ID_MAX, units),
        )

    if (
        not is_open_hole
        and section.od > DIAMETER_ATOL
        and section.id_diameter >= section.od
    ):
        result.error(sid, name, "ID must always be smaller than OD")

    if (
        previous is not None
        and previous.id_diameter > DIAMETER_ATOL
        and section.od >= previous.id_diameter
    ):
        result.error(
            sid,
            name,
            f"OD ({section.od:.3f} {units.diameter}) is greater than or equal to the ID "
            f"({previous.id_diameter:.3f} {units.diameter}) of the section above. "
            "The wellbore does not follow a telescopic progression",
        )


def _check_depths(
    section: WellboreSection,
    previous: WellboreSection | None,
    total_wellbore_md: float,
    units: _Units,
    result: ValidationResult,
) -> None:
    sid, name = str(section.id), section.name
    u = units.length

    if section.bottom_md <= section.top_md:
        result.error(
            sid,
            name,
            f"Bottom MD ({section.bottom_md:.2f} {u}) must be greater than "
            f"Top MD ({section.top_md:.2f} {u})",
        )

    if section.bottom_md > total_wellbore_md + DEPTH_ATOL:
        result.error(
            sid,
            name,
            f"Bottom MD ({section.bottom_md:.2f} {u}) exceeds the total wellbore depth "
            f"({total_wellbore_md:.2f} {u})",
        )

    if previous is None:
        return

    if section.top_md < previous.bottom_md:
        result.error(
            sid,
            name,
            f"Sections overlap. Section {section.id} starts at {section.top_md:.2f} {u} "
            f"but the previous section ends at {previous.bottom_md:.2f} {u}",
        )

    if section.top_md > previous.bottom_md + GAP_TOLERANCE:
        result.error(
            sid,
            name,
            f"Gap between sections. Top MD ({section.top_md:.2f} {u}) must start where "
            f"the previous section ends ({previous.bottom_md:.2f} {u})",
        )


def _check_casing_progression(
    section: WellboreSection,
    previous: WellboreSection | None,
    units: _Units,
    result: ValidationResult,
) -> None:
    if previous is None or not (section.is_tubular and previous.is_tubular):
        return

    is_override = (
        abs(section.top_md - previous.top_md) < CASING_OVERRIDE_TOLERANCE
        and section.bottom_md >= previous.bottom_md
    )
    if is_override:
        result.warning(
            str(section.id),
            section.name,
            "Casing override detected, previous casing replaced",
        )
    elif section.bottom_md < previous.bottom_md:
        result.error(
            str(section.id),
            section.name,
            f"Bottom MD ({section.bottom_md:.2f} {units.length}) of a nested "
            "casing/liner cannot be less than the Bottom MD of the section above "
            f"({previous.bottom_md:.2f} {units.length})",
        )


def _check_washout(section: WellboreSection, result: ValidationResult) -> None:
    if section.section_type != WellboreSectionType.OPEN_HOLE:
        return

    sid, name = str(section.id), section.name
    washout = section.washout_percent
    if washout is None or math.isnan(washout) or washout < 0:
        result.error(sid, name, "Washout is required for open hole volume calculation")
    elif washout > WASHOUT_MAX:
        result.error(
            sid,
            name,
            f"Washout value exceeds the reasonable range (0-{WASHOUT_MAX:.0f}%). "
            "Typical values: 5-25%",
        )
    elif washout < WASHOUT_MIN:
        result.warning(
            sid,
            name,
            f"Washout below {WASHOUT_MIN}% is unusual for open hole. "
            "Typical values: 5-25%. Is this correct?",
        )


def _check_volume(
    section: WellboreSection, units: _Units, result: ValidationResult
) -> None:
    sid, name = str(section.id), section.name
    volume = wellbore_section_volume(section, units.system)
    volume_bbl = units.to_barrels(volume)

    if volume <= 0:
        result.error(sid, name, "Calculated volume must be greater than 0")

    if volume_bbl > VOLUME_ERROR_THRESHOLD:
        result.error(
            sid,
            name,
            f"Volume of {volume:.2f} {units.volume} indicates serious diameter errors. "
            "Check OD and ID",
        )
    elif volume_bbl > VOLUME_WARNING_THRESHOLD:
        result.warning(
            sid,
            name,
            f"Volume of {volume:.2f} {units.volume} looks excessive. "
            "Check the entered diameters",
        )


def _out_of_range_message(
    label: str, value: float, lower_in: float, upper_in: float, units: _Units
) -> str:
    lower = units.from_inches(lower_in)
    upper = units.from_inches(upper_in)
    message = (
        f"{label} ({value:.3f} {units.diameter}) is outside the reasonable range "
        f"({lower:.1f} - {upper:.1f} {units.diameter}). Check the entered value"
    )
    if units.to_inches(value) > DIAMETER_TYPO_THRESHOLD:
        message += f". Did you mean {value / 1000:.3f} {units.diameter}?"
    return message

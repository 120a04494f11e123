from __future__ import annotations

from typing import Sequence

from logger import get_logger
from services.wellbore_geometry_service.core.calculations import (
    annular_volume,
    cylindrical_volume,
    total_annular_volume,
    total_drill_string_volume,
    total_wellbore_volume,
)
from services.wellbore_geometry_service.core.models import (
    AnnularBreakdown,
    AnnularVolumeSegment,
    DrillStringComponent,
    StackedComponent,
    UnitSystem,
    VolumeTotals,
    WellboreSection,
)
from services.wellbore_geometry_service.core.service.drill_string_stacker import (
    DrillStringStacker,
)
from services.wellbore_geometry_service.utils._exceptions import require_collection


class AnnularBreakdownEngine:
    """
    Intersects the wellbore section stack with the surface-anchored drill string
    and partitions every section into half-open [top, bottom) segments.
    """

    _logger = get_logger(__name__)

    @staticmethod
    def calculate(
        sections: Sequence[WellboreSection],
        components: Sequence[DrillStringComponent],
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> AnnularBreakdown:
        segments = AnnularBreakdownEngine.calculate_segments(
            sections, components, unit_system
        )
        totals = AnnularBreakdownEngine.calculate_totals(
            sections, components, unit_system
        )
        return AnnularBreakdown(segments=segments, totals=totals)

    @staticmethod
    def calculate_segments(
        sections: Sequence[WellboreSection],
        components: Sequence[DrillStringComponent],
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> tuple[AnnularVolumeSegment, ...]:
        require_collection(sections, "sections")
        require_collection(components, "components")

        sorted_sections = sorted(sections, key=lambda s: s.top_md)
        stacked = DrillStringStacker.stack(components)

        segments: list[AnnularVolumeSegment] = []
        for section in sorted_sections:
            if section.id_diameter <= 0 or section.top_md >= section.bottom_md:
                AnnularBreakdownEngine._logger.debug(
                    "Skipping section %s: no bore diameter or zero length", section.name
                )
                continue

            if not stacked:
                segments.append(
                    _open_segment(
                        section,
                        f"{section.name} (No String)",
                        section.top_md,
                        section.bottom_md,
                        unit_system,
                    )
                )
                continue

            segments.extend(_section_segments(section, stacked, unit_system))

        AnnularBreakdownEngine._logger.debug(
            "Annular breakdown produced %d segments", len(segments)
        )
        return tuple(segments)

    @staticmethod
    def calculate_totals(
        sections: Sequence[WellboreSection],
        components: Sequence[DrillStringComponent],
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> VolumeTotals:
        require_collection(sections, "sections")
        require_collection(components, "components")

        wellbore = total_wellbore_volume(sections, unit_system)
        drill_string = total_drill_string_volume(
            components, use_displacement=False, unit_system=unit_system
        )
        return VolumeTotals(
            wellbore=wellbore,
            drill_string=drill_string,
            annular=total_annular_volume(wellbore, drill_string),
            circulation=wellbore + drill_string,
        )

    @staticmethod
    def section_summary(
        sections: Sequence[WellboreSection],
        segments: Sequence[AnnularVolumeSegment],
    ) -> list[tuple[str, float]]:
        """
        Annular volume per wellbore section in depth order, labelled with the
        section depth range. Sections without any annular volume are left out.
        """
        summary: list[tuple[str, float]] = []
        for section in sorted(sections, key=lambda s: s.top_md):
            volume = sum(
                s.volume
                for s in segments
                if s.wellbore_section_id == section.id
                and s.drill_string_component_id is not None
            )
            if volume > 0:
                summary.append(
                    (
                        f"{section.name} ({section.top_md:.0f}-{section.bottom_md:.0f} ft)",
                        volume,
                    )
                )
        return summary


def _section_segments(
    section: WellboreSection,
    stacked: Sequence[StackedComponent],
    unit_system: UnitSystem,
) -> list[AnnularVolumeSegment]:
    section_top = section.top_md
    section_bottom = section.bottom_md

    overlaps = sorted(
        (s for s in stacked if s.bottom_md > section_top and s.top_md < section_bottom),
        key=lambda s: s.top_md,
    )
    if not overlaps:
        return [
            _open_segment(
                section,
                f"{section.name} (Empty)",
                section_top,
                section_bottom,
                unit_system,
            )
        ]

    segments: list[AnnularVolumeSegment] = []
    cursor = section_top
    for s in overlaps:
        start = max(cursor, s.top_md)
        end = min(section_bottom, s.bottom_md)
        if end > start:
            segments.append(
                AnnularVolumeSegment(
                    label=f"{section.name} / {s.component.name}",
                    wellbore_section_id=section.id,
                    drill_string_component_id=s.component.id,
                    top_md=start,
                    bottom_md=end,
                    volume=annular_volume(
                        section.id_diameter, s.component.od, end - start, unit_system
                    ),
                    wellbore_id_diameter=section.id_diameter,
                    drill_string_od=s.component.od,
                )
            )
            cursor = end

    if cursor < section_bottom:
        segments.append(
            _open_segment(
                section,
                f"{section.name} (Below String)",
                cursor,
                section_bottom,
                unit_system,
            )
        )
    return segments


def _open_segment(
    section: WellboreSection,
    label: str,
    top_md: float,
    bottom_md: float,
    unit_system: UnitSystem,
) -> AnnularVolumeSegment:
    return AnnularVolumeSegment(
        label=label,
        wellbore_section_id=section.id,
        drill_string_component_id=None,
        top_md=top_md,
        bottom_md=bottom_md,
        volume=cylindrical_volume(section.id_diameter, bottom_md - top_md, unit_system),
        wellbore_id_diameter=section.id_diameter,
    )

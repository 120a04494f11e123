from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AnnularVolumeSegment:
    """
    Half-open depth interval [top_md, bottom_md) of one wellbore section, either
    around a drill string component or with no string present
    (``drill_string_component_id`` is None).
    """

    label: str
    wellbore_section_id: int
    drill_string_component_id: int | None
    top_md: float
    bottom_md: float
    volume: float
    wellbore_id_diameter: float = field(default=0.0)
    drill_string_od: float = field(default=0.0)

    @property
    def length(self) -> float:
        return self.bottom_md - self.top_md

    @property
    def depth_range(self) -> str:
        return f"{self.top_md:.2f} - {self.bottom_md:.2f} ft"


@dataclass(frozen=True, slots=True)
class VolumeTotals:
    wellbore: float
    drill_string: float
    annular: float
    circulation: float


@dataclass(frozen=True, slots=True)
class AnnularBreakdown:
    segments: tuple[AnnularVolumeSegment, ...]
    totals: VolumeTotals

    @property
    def segment_volume(self) -> float:
        return sum(s.volume for s in self.segments)

    def segments_for_section(
        self, wellbore_section_id: int
    ) -> tuple[AnnularVolumeSegment, ...]:
        return tuple(
            s for s in self.segments if s.wellbore_section_id == wellbore_section_id
        )

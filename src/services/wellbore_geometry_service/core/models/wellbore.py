from __future__ import annotations

from dataclasses import dataclass, field

from services.wellbore_geometry_service.core.models.enums import WellboreSectionType


@dataclass(slots=True)
class WellboreSection:
    """
    Depth interval of the wellbore. For OpenHole sections ``od`` is the drilled hole
    diameter and ``id_diameter`` is 0; for Casing/Liner both describe the pipe.

    ``volume`` is derived and only written by the recalculation entry point.
    """

    id: int
    name: str
    section_type: WellboreSectionType
    top_md: float
    bottom_md: float
    od: float
    id_diameter: float
    washout_percent: float | None = field(default=None)
    volume: float = field(default=0.0, init=False, compare=False)

    @property
    def length(self) -> float:
        return self.bottom_md - self.top_md

    @property
    def is_tubular(self) -> bool:
        return self.section_type in (
            WellboreSectionType.CASING,
            WellboreSectionType.LINER,
        )

    def overlaps_with(self, other: WellboreSection) -> bool:
        return not (self.bottom_md <= other.top_md or self.top_md >= other.bottom_md)

    def gap_with(self, other: WellboreSection) -> float:
        if self.bottom_md <= other.top_md:
            return other.top_md - self.bottom_md
        if self.top_md >= other.bottom_md:
            return self.top_md - other.bottom_md
        return 0.0

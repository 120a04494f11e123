from services.wellbore_geometry_service.core.service.annular_breakdown_engine import (
    AnnularBreakdownEngine,
)
from services.wellbore_geometry_service.core.service.drill_string_stacker import (
    DrillStringStacker,
)
from services.wellbore_geometry_service.core.service.geometry_validator import (
    GeometryValidator,
)
from services.wellbore_geometry_service.core.service.wellbore_geometry_service import (
    WellboreGeometryService,
)

__all__ = [
    "WellboreGeometryService",
    "DrillStringStacker",
    "AnnularBreakdownEngine",
    "GeometryValidator",
]

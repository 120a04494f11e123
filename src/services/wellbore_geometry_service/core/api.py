from services.wellbore_geometry_service.core.models import (
    DrillStringComponentModel,
    WellboreGeometryServiceRequest,
    WellboreGeometryServiceResponse,
    WellboreSectionModel,
)
from services.wellbore_geometry_service.core.service import (
    WellboreGeometryService,
)

__all__ = [
    "WellboreGeometryService",
    "WellboreGeometryServiceRequest",
    "WellboreGeometryServiceResponse",
    "WellboreSectionModel",
    "DrillStringComponentModel",
]

from services.wellbore_geometry_service.core.models.annular import (
    AnnularBreakdown,
    AnnularVolumeSegment,
    VolumeTotals,
)
from services.wellbore_geometry_service.core.models.drill_string import (
    BitJetsConfig,
    ComponentAnnotations,
    DrillStringComponent,
    ForceToBottomResult,
    StackedComponent,
    ToolJointConfig,
)
from services.wellbore_geometry_service.core.models.enums import (
    ComponentType,
    DepthDifferentialStatus,
    Severity,
    UnitSystem,
    WellboreSectionType,
)
from services.wellbore_geometry_service.core.models.report import GeometryReport
from services.wellbore_geometry_service.core.models.user import (
    AnnularVolumeSegmentModel,
    DrillStringComponentModel,
    ForceToBottomModel,
    StackedComponentModel,
    ValidationFindingModel,
    VolumeTotalsModel,
    WellboreGeometryServiceRequest,
    WellboreGeometryServiceResponse,
    WellboreSectionModel,
    WellboreSectionResultModel,
)
from services.wellbore_geometry_service.core.models.validation import (
    WHOLE_WELLBORE_SUBJECT_ID,
    WHOLE_WELLBORE_SUBJECT_NAME,
    ValidationFinding,
    ValidationResult,
)
from services.wellbore_geometry_service.core.models.wellbore import WellboreSection

__all__ = [
    "ComponentType",
    "DepthDifferentialStatus",
    "Severity",
    "UnitSystem",
    "WellboreSectionType",
    "WellboreSection",
    "DrillStringComponent",
    "StackedComponent",
    "ForceToBottomResult",
    "ToolJointConfig",
    "BitJetsConfig",
    "ComponentAnnotations",
    "AnnularVolumeSegment",
    "AnnularBreakdown",
    "VolumeTotals",
    "ValidationFinding",
    "ValidationResult",
    "WHOLE_WELLBORE_SUBJECT_ID",
    "WHOLE_WELLBORE_SUBJECT_NAME",
    "GeometryReport",
    "WellboreSectionModel",
    "WellboreSectionResultModel",
    "DrillStringComponentModel",
    "StackedComponentModel",
    "AnnularVolumeSegmentModel",
    "VolumeTotalsModel",
    "ValidationFindingModel",
    "ForceToBottomModel",
    "WellboreGeometryServiceRequest",
    "WellboreGeometryServiceResponse",
]

from __future__ import annotations

from pydantic import BaseModel, Field
from typing_extensions import Annotated

from services.wellbore_geometry_service.core import models

NonNegativeFloat = Annotated[float, Field(ge=0.0)]


class WellboreSectionModel(BaseModel, extra="forbid", str_strip_whitespace=True):
    # Geometry is validated by GeometryValidator, so only types are enforced here.
    id: int
    name: str
    section_type: models.WellboreSectionType
    top_md: float
    bottom_md: float
    od: float
    id_diameter: float = Field(default=0.0)
    washout_percent: float | None = Field(default=None)

    def to_section(self) -> models.WellboreSection:
        return models.WellboreSection(
            id=self.id,
            name=self.name,
            section_type=self.section_type,
            top_md=self.top_md,
            bottom_md=self.bottom_md,
            od=self.od,
            id_diameter=self.id_diameter,
            washout_percent=self.washout_percent,
        )


class DrillStringComponentModel(BaseModel, extra="forbid", str_strip_whitespace=True):
    id: int
    name: str
    component_type: models.ComponentType
    length: float
    od: float
    id_diameter: float
    joint_length: NonNegativeFloat = 0.0

    def to_component(self) -> models.DrillStringComponent:
        return models.DrillStringComponent(
            id=self.id,
            name=self.name,
            component_type=self.component_type,
            length=self.length,
            od=self.od,
            id_diameter=self.id_diameter,
            joint_length=self.joint_length,
        )


class WellboreGeometryServiceRequest(BaseModel, extra="forbid"):
    sections: list[WellboreSectionModel] = Field(default_factory=list)
    drill_string: list[DrillStringComponentModel] = Field(default_factory=list)
    total_wellbore_md: NonNegativeFloat | None = Field(default=None)
    unit_system: models.UnitSystem = Field(default=models.UnitSystem.IMPERIAL)
    force_to_bottom: bool = Field(default=False)


class WellboreSectionResultModel(WellboreSectionModel):
    length: float
    volume: float

    @classmethod
    def from_section(cls, section: models.WellboreSection) -> WellboreSectionResultModel:
        return cls(
            id=section.id,
            name=section.name,
            section_type=section.section_type,
            top_md=section.top_md,
            bottom_md=section.bottom_md,
            od=section.od,
            id_diameter=section.id_diameter,
            washout_percent=section.washout_percent,
            length=section.length,
            volume=section.volume,
        )


class StackedComponentModel(DrillStringComponentModel):
    top_md: float
    bottom_md: float

    @classmethod
    def from_stacked(cls, stacked: models.StackedComponent) -> StackedComponentModel:
        c = stacked.component
        return cls(
            id=c.id,
            name=c.name,
            component_type=c.component_type,
            length=c.length,
            od=c.od,
            id_diameter=c.id_diameter,
            joint_length=c.joint_length,
            top_md=stacked.top_md,
            bottom_md=stacked.bottom_md,
        )


class AnnularVolumeSegmentModel(BaseModel, extra="forbid"):
    label: str
    wellbore_section_id: int
    drill_string_component_id: int | None = Field(default=None)
    top_md: float
    bottom_md: float
    volume: float
    wellbore_id_diameter: float
    drill_string_od: float


class VolumeTotalsModel(BaseModel, extra="forbid"):
    wellbore: float
    drill_string: float
    annular: float
    circulation: float


class ValidationFindingModel(BaseModel, extra="forbid"):
    subject_id: str
    subject_name: str
    message: str
    severity: models.Severity


class ForceToBottomModel(BaseModel, extra="forbid"):
    delta: float
    adjusted_component_id: int | None = Field(default=None)
    old_length: float | None = Field(default=None)
    new_length: float | None = Field(default=None)
    overrun: bool


class WellboreGeometryServiceResponse(BaseModel, extra="forbid"):
    unit_system: models.UnitSystem
    total_wellbore_md: float
    sections: list[WellboreSectionResultModel]
    drill_string: list[StackedComponentModel]
    annular_segments: list[AnnularVolumeSegmentModel]
    totals: VolumeTotalsModel
    findings: list[ValidationFindingModel]
    has_critical_errors: bool
    has_warnings: bool
    is_valid: bool
    depth_differential: float
    depth_differential_status: models.DepthDifferentialStatus
    force_to_bottom: ForceToBottomModel | None = Field(default=None)

    @classmethod
    def from_report(cls, report: models.GeometryReport) -> WellboreGeometryServiceResponse:
        return cls(
            unit_system=report.unit_system,
            total_wellbore_md=report.total_wellbore_md,
            sections=[WellboreSectionResultModel.from_section(s) for s in report.sections],
            drill_string=[
                StackedComponentModel.from_stacked(s) for s in report.drill_string
            ],
            annular_segments=[
                AnnularVolumeSegmentModel(
                    label=s.label,
                    wellbore_section_id=s.wellbore_section_id,
                    drill_string_component_id=s.drill_string_component_id,
                    top_md=s.top_md,
                    bottom_md=s.bottom_md,
                    volume=s.volume,
                    wellbore_id_diameter=s.wellbore_id_diameter,
                    drill_string_od=s.drill_string_od,
                )
                for s in report.segments
            ],
            totals=VolumeTotalsModel(
                wellbore=report.totals.wellbore,
                drill_string=report.totals.drill_string,
                annular=report.totals.annular,
                circulation=report.totals.circulation,
            ),
            findings=[
                ValidationFindingModel(
                    subject_id=f.subject_id,
                    subject_name=f.subject_name,
                    message=f.message,
                    severity=f.severity,
                )
                for f in report.validation.findings
            ],
            has_critical_errors=report.validation.has_critical_errors,
            has_warnings=report.validation.has_warnings,
            is_valid=report.validation.is_valid,
            depth_differential=report.depth_differential,
            depth_differential_status=report.depth_differential_status,
            force_to_bottom=(
                ForceToBottomModel(
                    delta=report.force_to_bottom.delta,
                    adjusted_component_id=report.force_to_bottom.adjusted_component_id,
                    old_length=report.force_to_bottom.old_length,
                    new_length=report.force_to_bottom.new_length,
                    overrun=report.force_to_bottom.overrun,
                )
                if report.force_to_bottom
                else None
            ),
        )

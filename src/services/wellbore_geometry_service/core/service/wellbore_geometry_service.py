from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from logger import get_logger
from services.wellbore_geometry_service.core.calculations import (
    wellbore_section_volume,
)
from services.wellbore_geometry_service.core.models import (
    DrillStringComponent,
    ForceToBottomResult,
    GeometryReport,
    UnitSystem,
    WellboreGeometryServiceRequest,
    WellboreGeometryServiceResponse,
    WellboreSection,
)
from services.wellbore_geometry_service.core.service.annular_breakdown_engine import (
    AnnularBreakdownEngine,
)
from services.wellbore_geometry_service.core.service.drill_string_stacker import (
    DrillStringStacker,
)
from services.wellbore_geometry_service.core.service.geometry_validator import (
    GeometryValidator,
)
from services.wellbore_geometry_service.utils._exceptions import require_collection


class WellboreGeometryService:
    _logger = get_logger(__name__)

    @staticmethod
    def process_request(
        request_dict: dict[str, Any],
    ) -> WellboreGeometryServiceResponse:
        # Parse the incoming request
        request = WellboreGeometryServiceRequest(**request_dict)
        WellboreGeometryService._logger.debug(
            "Parsed request into WellboreGeometryServiceRequest: %s", request
        )

        report = WellboreGeometryService._build_report(request)

        response = WellboreGeometryServiceResponse.from_report(report)
        WellboreGeometryService._logger.debug(
            "Built WellboreGeometryServiceResponse: %s", response
        )
        return response

    @staticmethod
    def _build_report(config: WellboreGeometryServiceRequest) -> GeometryReport:
        sections = [s.to_section() for s in config.sections]
        components = [c.to_component() for c in config.drill_string]
        return WellboreGeometryService.recalculate(
            sections,
            components,
            total_wellbore_md=config.total_wellbore_md,
            unit_system=config.unit_system,
            force_to_bottom=config.force_to_bottom,
        )

    @staticmethod
    def recalculate(
        sections: Sequence[WellboreSection],
        components: Sequence[DrillStringComponent],
        total_wellbore_md: float | None = None,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
        force_to_bottom: bool = False,
    ) -> GeometryReport:
        """
        Run one full recalculation pass over the section stack and drill string.

        Writes the derived ``volume`` back to every section and returns the
        stacked string, annular segments, totals and validation findings.
        When ``total_wellbore_md`` is omitted the deepest section bottom is used.
        Repeated calls with the same inputs produce identical reports.
        """
        require_collection(sections, "sections")
        require_collection(components, "components")

        if total_wellbore_md is None:
            total_wellbore_md = max((s.bottom_md for s in sections), default=0.0)

        WellboreGeometryService._logger.debug(
            "Recalculating %d sections and %d components, total MD %.2f (%s)",
            len(sections),
            len(components),
            total_wellbore_md,
            unit_system.value,
        )

        forced: ForceToBottomResult | None = None
        if force_to_bottom:
            forced = DrillStringStacker.force_to_bottom(components, total_wellbore_md)
            components = forced.components

        for section in sections:
            section.volume = wellbore_section_volume(section, unit_system)

        breakdown = AnnularBreakdownEngine.calculate(sections, components, unit_system)
        validation = GeometryValidator.validate(
            sections, components, total_wellbore_md, unit_system
        )
        differential = DrillStringStacker.depth_differential(
            total_wellbore_md, components
        )

        report = GeometryReport(
            unit_system=unit_system,
            total_wellbore_md=total_wellbore_md,
            sections=tuple(sections),
            drill_string=DrillStringStacker.stack(components),
            breakdown=breakdown,
            validation=validation,
            depth_differential=differential,
            depth_differential_status=DrillStringStacker.depth_differential_status(
                differential
            ),
            force_to_bottom=forced,
        )

        if validation.has_critical_errors:
            WellboreGeometryService._logger.warning(
                "Wellbore geometry has %d critical findings", len(validation.errors)
            )
        WellboreGeometryService._logger.debug(
            "Recalculation completed: %s", report.totals
        )
        return report

    @staticmethod
    def dump_results_schema(path: Path | str) -> None:
        WellboreGeometryService._logger.info("Dumping result schema to path: %s", path)

        with open(path, mode="w+") as fp:
            schema = WellboreGeometryServiceResponse.model_json_schema()
            WellboreGeometryService._logger.debug("Result schema: %s", schema)
            fp.write(json.dumps(obj=schema))

        WellboreGeometryService._logger.info(
            "Result schema successfully written to: %s", path
        )

import pytest

from services.wellbore_geometry_service.core.models import (
    ComponentType,
    DrillStringComponent,
    WellboreSection,
    WellboreSectionType,
)


@pytest.fixture
def telescoping_sections() -> list[WellboreSection]:
    return [
        WellboreSection(
            id=1,
            name="Intermediate",
            section_type=WellboreSectionType.CASING,
            top_md=0.0,
            bottom_md=500.0,
            od=9.625,
            id_diameter=8.5,
        ),
        WellboreSection(
            id=2,
            name="Production",
            section_type=WellboreSectionType.LINER,
            top_md=500.0,
            bottom_md=1000.0,
            od=7.0,
            id_diameter=6.0,
        ),
    ]


@pytest.fixture
def bha_drill_string() -> list[DrillStringComponent]:
    # bottom-to-top: index 0 is the deepest component
    return [
        DrillStringComponent(
            id=1,
            name="Bit",
            component_type=ComponentType.BIT,
            length=100.0,
            od=8.5,
            id_diameter=2.5,
        ),
        DrillStringComponent(
            id=2,
            name="DC",
            component_type=ComponentType.DC,
            length=300.0,
            od=6.5,
            id_diameter=2.8125,
        ),
        DrillStringComponent(
            id=3,
            name="DrillPipe",
            component_type=ComponentType.DRILL_PIPE,
            length=4600.0,
            od=5.0,
            id_diameter=4.276,
            joint_length=31.0,
        ),
    ]

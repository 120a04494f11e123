import pytest

from services.wellbore_geometry_service.core.models import ComponentType, UnitSystem
from services.wellbore_geometry_service.core.utilities.display import (
    component_type_display_name,
    parse_component_type,
)
from services.wellbore_geometry_service.core.utilities.units import convert_value


@pytest.mark.parametrize(
    "value, from_unit, to_unit, quantity, expected",
    [
        (1000.0, UnitSystem.IMPERIAL, UnitSystem.METRIC, "length", 304.8),
        (100.0, UnitSystem.METRIC, UnitSystem.IMPERIAL, "length", 328.084),
        (8.5, UnitSystem.IMPERIAL, UnitSystem.METRIC, "diameter", 215.9),
        (215.9, UnitSystem.METRIC, UnitSystem.IMPERIAL, "diameter", 8.5),
        (100.0, UnitSystem.IMPERIAL, UnitSystem.METRIC, "volume", 15.8987),
        (15.8987, UnitSystem.METRIC, UnitSystem.IMPERIAL, "volume", 100.0),
        (42.0, UnitSystem.METRIC, UnitSystem.METRIC, "length", 42.0),
        (42.0, UnitSystem.IMPERIAL, UnitSystem.METRIC, "pressure", 42.0),
    ],
)
def test_convert_value(value, from_unit, to_unit, quantity, expected):
    assert convert_value(value, from_unit, to_unit, quantity) == pytest.approx(expected)


@pytest.mark.parametrize(
    "component_type, label",
    [
        (ComponentType.DRILL_PIPE, "Drill Pipe"),
        (ComponentType.SETTING_TOOL, "Setting Tool"),
        (ComponentType.JAR, "JAR"),
        (ComponentType.NEAR_BIT, "Near Bit"),
        (ComponentType.BIT_SUB, "Bit Sub"),
        (ComponentType.HWDP, "HWDP"),
    ],
)
def test_display_names(component_type, label):
    assert component_type_display_name(component_type) == label
    assert parse_component_type(label) == component_type


def test_every_component_type_has_a_distinct_label():
    labels = {component_type_display_name(ct) for ct in ComponentType}

    assert len(labels) == len(ComponentType)


@pytest.mark.parametrize("label", ["Kelly", "", "drill pipe"])
def test_unknown_labels_parse_to_drill_pipe(label):
    assert parse_component_type(label) == ComponentType.DRILL_PIPE

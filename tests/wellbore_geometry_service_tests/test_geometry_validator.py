import pytest

from services.wellbore_geometry_service.core.models import (
    WHOLE_WELLBORE_SUBJECT_ID,
    Severity,
    UnitSystem,
)
from services.wellbore_geometry_service.core.service import GeometryValidator
from services.wellbore_geometry_service.utils._exceptions import (
    MissingGeometryCollectionException,
)
from tests.wellbore_geometry_service_tests.tools import (
    casing,
    component,
    has_message,
    messages,
    open_hole,
)


def test_empty_wellbore_yields_single_error():
    result = GeometryValidator.validate_wellbore([], 5000.0)

    assert len(result.findings) == 1
    assert result.findings[0].severity == Severity.ERROR
    assert result.findings[0].message == "At least one wellbore section is required"
    assert not result.is_valid
    assert result.has_critical_errors


def test_telescoping_wellbore_is_clean(telescoping_sections):
    result = GeometryValidator.validate_wellbore(telescoping_sections, 1000.0)

    assert result.findings == []
    assert result.is_valid
    assert not result.has_warnings


@pytest.mark.parametrize(
    "od, expect_error",
    [(7.0, False), (8.49, False), (8.5, True), (8.6, True)],
)
def test_telescoping_boundary(od, expect_error):
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(2, 500.0, 1000.0, od=od, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert has_message(result, "telescopic progression", Severity.ERROR) is expect_error
    assert result.is_valid is not expect_error


def test_telescoping_is_not_checked_below_open_hole():
    sections = [
        open_hole(1, 0.0, 500.0, od=12.25, washout_percent=10.0),
        casing(2, 500.0, 1000.0, od=13.375, id_diameter=12.415),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert not has_message(result, "telescopic")


def test_degenerate_section_reports_zero_volume():
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 100.0, od=9.625, id_diameter=0.0)], 100.0
    )

    assert messages(result) == [
        "ID cannot be 0.000 in pipe sections (Casing/Liner)",
        "Calculated volume must be greater than 0",
    ]
    assert not result.is_valid


def test_findings_follow_depth_order_and_accumulate():
    sections = [
        casing(2, 500.0, 1000.0, od=7.0, id_diameter=0.0),
        casing(1, 0.0, 500.0, od=0.0, id_diameter=8.5),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    subjects = [f.subject_id for f in result.findings]
    assert subjects.index("1") < subjects.index("2")
    assert has_message(result, "OD cannot be 0.000. Enter the outer diameter")
    assert has_message(result, "ID cannot be 0.000")
    assert has_message(result, "ID must always be smaller than OD") is False


def test_duplicate_and_non_sequential_ids():
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(1, 500.0, 1000.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert result.findings[0].subject_id == WHOLE_WELLBORE_SUBJECT_ID
    assert result.findings[0].message.startswith("ID 1 already exists")
    assert has_message(result, "not sequential", Severity.WARNING)
    assert len(result.errors) == 1


def test_non_sequential_ids_only_warn():
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(3, 500.0, 1000.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert result.is_valid
    assert result.has_warnings
    assert len(result.warnings) == 1


def test_first_section_must_start_at_surface():
    result = GeometryValidator.validate_wellbore(
        [casing(1, 10.0, 1000.0, od=9.625, id_diameter=8.5)], 1000.0
    )

    assert messages(result, Severity.ERROR) == ["The first section must start at 0.00 ft"]


def test_last_section_short_of_total_depth_warns():
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 900.0, od=9.625, id_diameter=8.5)], 1000.0
    )

    assert result.is_valid
    assert has_message(result, "ends at 900.00 ft", Severity.WARNING)


def test_section_below_total_depth_is_an_error():
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 1200.0, od=9.625, id_diameter=8.5)], 1000.0
    )

    assert has_message(result, "exceeds the total wellbore depth", Severity.ERROR)


def test_bottom_must_be_below_top():
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(2, 500.0, 500.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 500.0)

    assert has_message(result, "must be greater than Top MD", Severity.ERROR)


@pytest.mark.parametrize(
    "top_md, fragment",
    [(450.0, "Sections overlap"), (510.0, "Gap between sections")],
)
def test_overlap_and_gap(top_md, fragment):
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(2, top_md, 1000.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert has_message(result, fragment, Severity.ERROR)


def test_gap_within_tolerance_is_accepted():
    sections = [
        casing(1, 0.0, 500.0, od=9.625, id_diameter=8.5),
        casing(2, 500.005, 1000.0, od=7.0, id_diameter=6.0),
    ]

    assert GeometryValidator.validate_wellbore(sections, 1000.0).findings == []


def test_casing_override_warns():
    sections = [
        casing(1, 0.0, 1000.0, od=9.625, id_diameter=8.5),
        casing(2, 0.0, 1500.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1500.0)

    assert has_message(
        result, "Casing override detected, previous casing replaced", Severity.WARNING
    )
    assert not has_message(result, "nested casing/liner")


def test_nested_casing_ending_above_previous_is_an_error():
    sections = [
        casing(1, 0.0, 1000.0, od=9.625, id_diameter=8.5),
        casing(2, 500.0, 800.0, od=7.0, id_diameter=6.0),
    ]

    result = GeometryValidator.validate_wellbore(sections, 1000.0)

    assert has_message(result, "nested casing/liner", Severity.ERROR)


@pytest.mark.parametrize(
    "od, fragment",
    [
        (1.5, "OD (1.500 in) is outside the reasonable range"),
        (75.0, "OD (75.000 in) is outside the reasonable range"),
        (9625.0, "Did you mean 9.625 in?"),
    ],
)
def test_od_range(od, fragment):
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 100.0, od=od, id_diameter=1.6)], 100.0
    )

    assert has_message(result, fragment, Severity.ERROR)


@pytest.mark.parametrize("id_diameter", [1.0, 56.0])
def test_id_range(id_diameter):
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 100.0, od=58.0, id_diameter=id_diameter)], 100.0
    )

    assert has_message(result, "ID (", Severity.ERROR)
    assert has_message(result, "outside the reasonable range", Severity.ERROR)


def test_id_must_be_smaller_than_od():
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 100.0, od=7.0, id_diameter=7.0)], 100.0
    )

    assert messages(result) == ["ID must always be smaller than OD"]


def test_open_hole_rules():
    result = GeometryValidator.validate_wellbore(
        [open_hole(1, 0.0, 100.0, od=0.0, washout_percent=10.0, id_diameter=4.0)],
        100.0,
    )

    assert has_message(result, "For OpenHole, enter the hole diameter", Severity.ERROR)
    assert has_message(result, "OpenHole must have ID = 0.000", Severity.ERROR)
    assert not has_message(result, "ID must always be smaller than OD")


@pytest.mark.parametrize(
    "washout, severity, fragment",
    [
        (None, Severity.ERROR, "Washout is required"),
        (-1.0, Severity.ERROR, "Washout is required"),
        (float("nan"), Severity.ERROR, "Washout is required"),
        (60.0, Severity.ERROR, "exceeds the reasonable range"),
        (0.005, Severity.WARNING, "unusual for open hole"),
        (0.0, Severity.WARNING, "unusual for open hole"),
    ],
)
def test_open_hole_washout(washout, severity, fragment):
    result = GeometryValidator.validate_wellbore(
        [open_hole(1, 0.0, 100.0, od=8.5, washout_percent=washout)], 100.0
    )

    assert has_message(result, fragment, severity)


@pytest.mark.parametrize("washout", [0.01, 12.5, 50.0])
def test_open_hole_washout_in_range(washout):
    result = GeometryValidator.validate_wellbore(
        [open_hole(1, 0.0, 100.0, od=8.5, washout_percent=washout)], 100.0
    )

    assert result.findings == []


@pytest.mark.parametrize(
    "bottom_md, severity",
    [(5000.0, Severity.WARNING), (50000.0, Severity.ERROR)],
)
def test_volume_sanity(bottom_md, severity):
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, bottom_md, od=55.0, id_diameter=50.0)], bottom_md
    )

    assert [f.severity for f in result.findings] == [severity]


def test_validate_drill_string(bha_drill_string):
    assert GeometryValidator.validate_drill_string(bha_drill_string, 5000.0).findings == []


@pytest.mark.parametrize(
    "kwargs, fragment",
    [
        ({"name": " "}, "Component name is required"),
        ({"od": 0.0}, "OD must be greater than 0"),
        ({"id_diameter": 0.0}, "ID must be greater than 0"),
        ({"id_diameter": 5.5}, "cannot be greater than or equal to external diameter"),
        ({"length": 0.0}, "Length must be greater than 0"),
    ],
)
def test_invalid_drill_string_component(kwargs, fragment):
    params = {"id": 1, "length": 100.0, "od": 5.0, "id_diameter": 4.276, **kwargs}

    result = GeometryValidator.validate_drill_string([component(**params)], 5000.0)

    assert has_message(result, fragment, Severity.ERROR)
    assert result.findings[0].subject_id == "1"


def test_drill_string_overrun_is_blocking(bha_drill_string):
    result = GeometryValidator.validate_drill_string(bha_drill_string, 4900.0)

    assert messages(result, Severity.ERROR) == [
        "Drill string exceeds well depth by 100.00 ft. "
        "Shorten components or revise the drill string configuration"
    ]


def test_validate_combines_wellbore_and_string(telescoping_sections, bha_drill_string):
    result = GeometryValidator.validate(telescoping_sections, bha_drill_string, 1000.0)

    assert len(result.findings) == 1
    assert has_message(result, "exceeds well depth by 4000.00 ft")


def test_validation_does_not_mutate_sections(telescoping_sections):
    before = [(s.id, s.top_md, s.bottom_md, s.volume) for s in telescoping_sections]

    GeometryValidator.validate_wellbore(list(reversed(telescoping_sections)), 1000.0)

    assert [(s.id, s.top_md, s.bottom_md, s.volume) for s in telescoping_sections] == before


def test_missing_collections_raise():
    with pytest.raises(MissingGeometryCollectionException):
        GeometryValidator.validate_wellbore(None, 1000.0)
    with pytest.raises(MissingGeometryCollectionException):
        GeometryValidator.validate_drill_string(None, 1000.0)


def test_blank_component_name_reported_under_type_label():
    nameless = component(1, 100.0, name=" ")

    result = GeometryValidator.validate_drill_string([nameless], 5000.0)

    assert result.findings[0].subject_name == "Drill Pipe"
    assert result.findings[0].message == "Component name is required"


def test_metric_wellbore_is_clean():
    sections = [
        casing(1, 0.0, 300.0, od=244.5, id_diameter=220.5),
        casing(2, 300.0, 900.0, od=177.8, id_diameter=157.1),
    ]

    result = GeometryValidator.validate(
        sections,
        [component(1, 900.0, od=127.0, id_diameter=108.6)],
        900.0,
        UnitSystem.METRIC,
    )

    assert result.findings == []
    assert result.is_valid


@pytest.mark.parametrize(
    "od, id_diameter, fragment",
    [
        (50.0, 40.0, "OD (50.000 mm) is outside the reasonable range (50.8 - 1524.0 mm)"),
        (1530.0, 1200.0, "OD (1530.000 mm) is outside the reasonable range"),
        (244.5, 35.0, "ID (35.000 mm) is outside the reasonable range (38.1 - 1397.0 mm)"),
        (1500.0, 1400.0, "ID (1400.000 mm) is outside the reasonable range"),
    ],
)
def test_metric_diameter_range(od, id_diameter, fragment):
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 10.0, od=od, id_diameter=id_diameter)], 10.0, UnitSystem.METRIC
    )

    assert has_message(result, fragment, Severity.ERROR)


@pytest.mark.parametrize(
    "od, id_diameter",
    [(52.0, 40.0), (1520.0, 1390.0)],
)
def test_metric_diameters_inside_converted_range(od, id_diameter):
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, 10.0, od=od, id_diameter=id_diameter)], 10.0, UnitSystem.METRIC
    )

    assert result.findings == []


@pytest.mark.parametrize(
    "bottom_md, severity",
    [(1500.0, Severity.WARNING), (15000.0, Severity.ERROR)],
)
def test_metric_volume_sanity_uses_barrel_thresholds(bottom_md, severity):
    # 1270 mm bore: about 1.27 m3 per metre
    result = GeometryValidator.validate_wellbore(
        [casing(1, 0.0, bottom_md, od=1397.0, id_diameter=1270.0)],
        bottom_md,
        UnitSystem.METRIC,
    )

    assert [f.severity for f in result.findings] == [severity]
    assert " m3 " in result.findings[0].message


def test_metric_messages_use_metric_units():
    sections = [
        casing(1, 10.0, 300.0, od=244.5, id_diameter=220.5),
        casing(2, 300.0, 900.0, od=250.0, id_diameter=157.1),
    ]

    result = GeometryValidator.validate(
        sections,
        [component(1, 1000.0, od=127.0, id_diameter=108.6)],
        900.0,
        UnitSystem.METRIC,
    )

    assert messages(result, Severity.ERROR) == [
        "The first section must start at 0.00 m",
        "OD (250.000 mm) is greater than or equal to the ID (220.500 mm) of the "
        "section above. The wellbore does not follow a telescopic progression",
        "Drill string exceeds well depth by 100.00 m. "
        "Shorten components or revise the drill string configuration",
    ]

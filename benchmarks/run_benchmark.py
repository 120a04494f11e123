import numpy as np

from services.wellbore_geometry_service import WellboreGeometryService

benchmarks = {
    "casing_capacity": {
        "request": {
            "sections": [
                {
                    "id": 1,
                    "name": "Surface",
                    "section_type": "Casing",
                    "top_md": 0.0,
                    "bottom_md": 1000.0,
                    "od": 13.375,
                    "id_diameter": 12.615,
                }
            ],
        },
        "section_volumes": [154.57],
        "atol": 0.05,
    },
    "open_hole_washout": {
        "request": {
            "sections": [
                {
                    "id": 1,
                    "name": "Open Hole",
                    "section_type": "OpenHole",
                    "top_md": 0.0,
                    "bottom_md": 100.0,
                    "od": 8.5,
                    "washout_percent": 12.5,
                }
            ],
        },
        "section_volumes": [6.96],
        "atol": 0.02,
    },
    "bha_on_bottom": {
        "request": {
            "sections": [
                {
                    "id": 1,
                    "name": "Intermediate",
                    "section_type": "Casing",
                    "top_md": 0.0,
                    "bottom_md": 3000.0,
                    "od": 9.625,
                    "id_diameter": 8.681,
                },
                {
                    "id": 2,
                    "name": "Open Hole",
                    "section_type": "OpenHole",
                    "top_md": 3000.0,
                    "bottom_md": 5000.0,
                    "od": 8.5,
                    "washout_percent": 10.0,
                },
            ],
            "drill_string": [
                {
                    "id": 1,
                    "name": "Bit",
                    "component_type": "Bit",
                    "length": 100.0,
                    "od": 8.5,
                    "id_diameter": 2.5,
                },
                {
                    "id": 2,
                    "name": "DC",
                    "component_type": "DC",
                    "length": 300.0,
                    "od": 6.5,
                    "id_diameter": 2.8125,
                },
                {
                    "id": 3,
                    "name": "DrillPipe",
                    "component_type": "DrillPipe",
                    "length": 4600.0,
                    "od": 5.0,
                    "id_diameter": 4.276,
                },
            ],
        },
        "string_intervals": [(0.0, 4600.0), (4600.0, 4900.0), (4900.0, 5000.0)],
        "atol": 1e-9,
    },
}


def _validate_reconciliation(response, tol=1e-9):
    """
    Segments of one section must be contiguous half-open intervals that
    start and end on the section boundaries.
    """
    for section in response.sections:
        own = [
            s for s in response.annular_segments if s.wellbore_section_id == section.id
        ]
        if not own:
            continue
        if not np.isclose(own[0].top_md, section.top_md, atol=tol):
            raise AssertionError(f"Section {section.name} breakdown starts too deep.")
        if not np.isclose(own[-1].bottom_md, section.bottom_md, atol=tol):
            raise AssertionError(f"Section {section.name} breakdown ends too shallow.")
        for a, b in zip(own, own[1:]):
            if a.bottom_md != b.top_md:
                raise AssertionError(
                    f"Segments {a.label} and {b.label} are not contiguous."
                )


if __name__ == "__main__":
    for k, v in benchmarks.items():
        print("==========================")
        print(f"Running benchmark {k}")
        print("==========================")

        try:
            r = WellboreGeometryService.process_request(v["request"])
            atol = v["atol"]

            if "section_volumes" in v:
                volumes = np.asarray([s.volume for s in r.sections], dtype=float)
                assert np.allclose(volumes, v["section_volumes"], rtol=0.0, atol=atol)

            if "string_intervals" in v:
                intervals = np.asarray(
                    [(s.top_md, s.bottom_md) for s in r.drill_string], dtype=float
                )
                assert np.allclose(intervals, v["string_intervals"], atol=atol)

            assert r.is_valid, [f.message for f in r.findings]
            _validate_reconciliation(r)
            print(f"Benchmark {k} passed: totals {r.totals.model_dump()}")

        except Exception as e:
            print(f"Benchmark {k} failed: {e}")

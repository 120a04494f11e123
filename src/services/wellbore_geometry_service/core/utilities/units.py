from __future__ import annotations

from typing import Literal

from services.wellbore_geometry_service.core.models import UnitSystem
from services.wellbore_geometry_service.core.utilities.constants import (
    BBL_TO_M3,
    FT_TO_M,
    IN_TO_MM,
    M_TO_FT,
)

Quantity = Literal["length", "diameter", "volume"]

# (imperial -> metric, metric -> imperial) multipliers
_CONVERSIONS: dict[str, tuple[float, float]] = {
    "length": (FT_TO_M, M_TO_FT),
    "diameter": (IN_TO_MM, 1.0 / IN_TO_MM),
    "volume": (BBL_TO_M3, 1.0 / BBL_TO_M3),
}


def convert_value(
    value: float,
    from_unit: UnitSystem,
    to_unit: UnitSystem,
    quantity: Quantity,
) -> float:
    """
    Convert a length (ft/m), diameter (in/mm) or volume (bbl/m3) between unit systems.
    Unknown quantities are returned unchanged.
    """
    if from_unit == to_unit or quantity not in _CONVERSIONS:
        return value

    to_metric, to_imperial = _CONVERSIONS[quantity]
    if from_unit == UnitSystem.IMPERIAL:
        return value * to_metric
    return value * to_imperial

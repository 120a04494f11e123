from __future__ import annotations

from services.wellbore_geometry_service.core.models import ComponentType

_COMPONENT_TYPE_LABELS: dict[ComponentType, str] = {
    ComponentType.DRILL_PIPE: "Drill Pipe",
    ComponentType.HWDP: "HWDP",
    ComponentType.CASING: "Casing",
    ComponentType.LINER: "Liner",
    ComponentType.SETTING_TOOL: "Setting Tool",
    ComponentType.DC: "DC",
    ComponentType.LWD: "LWD",
    ComponentType.MWD: "MWD",
    ComponentType.PWO: "PWO",
    ComponentType.PWD: "PWD",
    ComponentType.MOTOR: "Motor",
    ComponentType.XO: "XO",
    ComponentType.JAR: "JAR",
    ComponentType.ACCELERATOR: "Accelerator",
    ComponentType.NEAR_BIT: "Near Bit",
    ComponentType.STABILIZER: "Stabilizer",
    ComponentType.BIT: "Bit",
    ComponentType.BIT_SUB: "Bit Sub",
}

_LABEL_COMPONENT_TYPES: dict[str, ComponentType] = {
    label: component_type for component_type, label in _COMPONENT_TYPE_LABELS.items()
}


def component_type_display_name(component_type: ComponentType) -> str:
    return _COMPONENT_TYPE_LABELS.get(component_type, component_type.value)


def parse_component_type(label: str) -> ComponentType:
    """Map a display label back to its component type, DrillPipe when unknown."""
    return _LABEL_COMPONENT_TYPES.get(label.strip(), ComponentType.DRILL_PIPE)

from enum import Enum


class UnitSystem(str, Enum):
    IMPERIAL = "Imperial"
    METRIC = "Metric"


class WellboreSectionType(str, Enum):
    OPEN_HOLE = "OpenHole"
    CASING = "Casing"
    LINER = "Liner"


class ComponentType(str, Enum):
    DRILL_PIPE = "DrillPipe"
    HWDP = "HWDP"
    CASING = "Casing"
    LINER = "Liner"
    SETTING_TOOL = "SettingTool"
    DC = "DC"
    LWD = "LWD"
    MWD = "MWD"
    PWO = "PWO"
    PWD = "PWD"
    MOTOR = "Motor"
    XO = "XO"
    JAR = "Jar"
    ACCELERATOR = "Accelerator"
    NEAR_BIT = "NearBit"
    STABILIZER = "Stabilizer"
    BIT = "Bit"
    BIT_SUB = "BitSub"


class Severity(str, Enum):
    ERROR = "Error"
    WARNING = "Warning"


class DepthDifferentialStatus(str, Enum):
    ON_BOTTOM = "OnBottom"
    SHORT = "Short"
    OVERRUN = "Overrun"

# bbl = (diameter_in)^2 * length_ft / 1029.4
BBL_VOLUME_CONSTANT = 1029.4
# m3 = pi * (diameter_mm / 2)^2 * length_m / 1e6
METRIC_VOLUME_CONSTANT = 1.0e6
MM_PER_M = 1000.0

# zero-diameter threshold, inches
DIAMETER_ATOL = 0.001
# depth comparisons, feet
DEPTH_ATOL = 0.001
GAP_TOLERANCE = 0.01
CASING_OVERRIDE_TOLERANCE = 0.01
FORCE_TO_BOTTOM_TOLERANCE = 0.01
ON_BOTTOM_TOLERANCE = 0.01

OD_MIN = 2.0
OD_MAX = 60.0
ID_MIN = 1.5
ID_MAX = 55.0
# values this large are usually thousandths typed without a decimal point
DIAMETER_TYPO_THRESHOLD = 1000.0

WASHOUT_MIN = 0.01
WASHOUT_MAX = 50.0

VOLUME_WARNING_THRESHOLD = 10_000.0
VOLUME_ERROR_THRESHOLD = 100_000.0

FT_TO_M = 0.3048
M_TO_FT = 3.28084
IN_TO_MM = 25.4
BBL_TO_M3 = 0.158987

JET_SIZE_DENOMINATOR = 32.0

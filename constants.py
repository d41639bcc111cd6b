from __future__ import annotations

# Default example settings (°C): one warm-day point and one cold-day point.
DEFAULT_WARM_OUTSIDE: float = 20.0
DEFAULT_WARM_FLOW: float = 25.0
DEFAULT_COLD_OUTSIDE: float = -10.0
DEFAULT_COLD_FLOW: float = 40.0
DEFAULT_OUTSIDE: float = 10.0

# Rounding used for display
SLOPE_DECIMALS: int = 4
INTERCEPT_DECIMALS: int = 2
RESULT_DECIMALS: int = 1

DEGENERATE_INPUT_MESSAGE = "Point 1 and Point 2 must have different outside temperatures."
INVALID_EQUATION = "Invalid"

# Chart
CHART_PADDING_C: float = 5.0
CHART_SAMPLES: int = 50
COLOR_CURVE = "#1976d2"
COLOR_POINTS = "#2e7d32"
COLOR_QUERY = "#d32f2f"

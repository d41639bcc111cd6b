"""Linear heating curve fitted through two example settings."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from constants import (
    DEGENERATE_INPUT_MESSAGE,
    INTERCEPT_DECIMALS,
    INVALID_EQUATION,
    SLOPE_DECIMALS,
)
from utils.numbers import format_compact, round_half_away, to_number

_LOGGER = logging.getLogger(__name__)


class DegenerateInputError(ValueError):
    """Both example points share the same outside temperature."""

    def __init__(self, message: str = DEGENERATE_INPUT_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Point:
    outside_temp: float
    flow_temp: float


@dataclass(frozen=True)
class LinearModel:
    """flow = slope * outside + intercept"""

    slope: float
    intercept: float


@dataclass(frozen=True)
class CurveResult:
    model: Optional[LinearModel]
    flow_temp: Optional[float]
    equation: str
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error is None


def fit(p1: Point, p2: Point) -> LinearModel:
    """
    Line through two points.

    Raises:
        DegenerateInputError: if both points have the same outside temperature.
    """
    if p1.outside_temp == p2.outside_temp:
        raise DegenerateInputError()
    slope = (p2.flow_temp - p1.flow_temp) / (p2.outside_temp - p1.outside_temp)
    intercept = p1.flow_temp - slope * p1.outside_temp
    _LOGGER.debug("Fitted heating curve: slope=%.4f, intercept=%.2f", slope, intercept)
    return LinearModel(slope=slope, intercept=intercept)


def evaluate(model: LinearModel, outside_temp: float) -> float:
    # Extrapolation outside the example points is allowed
    return model.slope * outside_temp + model.intercept


def format_equation(model: LinearModel) -> str:
    """Render e.g. 'y = -0.5x + 35'."""
    slope = format_compact(model.slope, SLOPE_DECIMALS)
    intercept = round_half_away(model.intercept, INTERCEPT_DECIMALS)
    sign = "+" if intercept >= 0 else "-"
    return f"y = {slope}x {sign} {format_compact(abs(intercept), INTERCEPT_DECIMALS)}"


def compute(
    warm_outside: Any,
    warm_flow: Any,
    cold_outside: Any,
    cold_flow: Any,
    outside: Any,
) -> CurveResult:
    """
    Fit the curve from raw form values and evaluate it at `outside`.
    Non-numeric values count as 0. Equal outside temperatures give an
    invalid result carrying the error message instead of raising.
    """
    p1 = Point(to_number(warm_outside), to_number(warm_flow))
    p2 = Point(to_number(cold_outside), to_number(cold_flow))
    try:
        model = fit(p1, p2)
    except DegenerateInputError as e:
        _LOGGER.debug("Cannot fit heating curve: %s", e)
        return CurveResult(model=None, flow_temp=None, equation=INVALID_EQUATION, error=str(e))
    flow_temp = evaluate(model, to_number(outside))
    return CurveResult(model=model, flow_temp=flow_temp, equation=format_equation(model))


def curve_points(model: LinearModel, start: float, stop: float, samples: int = 50) -> pd.DataFrame:
    """
    Sample the curve at `samples` evenly spaced outside temperatures from
    `start` to `stop` (both included) for plotting. The row count does not
    depend on how wide the range is.
    """
    if samples < 2:
        raise ValueError("At least two samples are needed.")
    width = stop - start
    xs = [start + width * i / (samples - 1) for i in range(samples - 1)] + [stop]
    return pd.DataFrame(
        {
            "outside_temp": xs,
            "flow_temp": [evaluate(model, x) for x in xs],
        },
        columns=["outside_temp", "flow_temp"],
    )

from __future__ import annotations

import plotly.graph_objects as go

from constants import CHART_PADDING_C, CHART_SAMPLES, COLOR_CURVE, COLOR_POINTS, COLOR_QUERY
from curve import LinearModel, Point, curve_points, evaluate


def build_curve_figure(
    model: LinearModel,
    p1: Point,
    p2: Point,
    outside_temp: float,
    *,
    height: int = 420,
) -> go.Figure:
    fig = go.Figure()
    x_low = min(p1.outside_temp, p2.outside_temp)
    x_high = max(p1.outside_temp, p2.outside_temp)
    start = min(x_low, outside_temp) - CHART_PADDING_C
    stop = max(x_high, outside_temp) + CHART_PADDING_C

    line = curve_points(model, start, stop, CHART_SAMPLES)
    fig.add_trace(
        go.Scatter(
            x=line["outside_temp"],
            y=line["flow_temp"],
            mode="lines",
            name="Heating curve",
            line=dict(color=COLOR_CURVE),
            hovertemplate="Outside %{x:.1f}°C<br>Flow %{y:.1f}°C<extra></extra>",
        )
    )

    # Shade the interpolated span between the two example points
    fig.add_vrect(x0=x_low, x1=x_high, fillcolor="rgba(46,125,50,0.06)", line_width=0, layer="below")

    fig.add_trace(
        go.Scatter(
            x=[p1.outside_temp, p2.outside_temp],
            y=[p1.flow_temp, p2.flow_temp],
            mode="markers+text",
            name="Example settings",
            text=["Warm day", "Cold day"],
            textposition="top center",
            marker=dict(size=10, color=COLOR_POINTS),
        )
    )

    flow_temp = evaluate(model, outside_temp)
    extrapolated = not (x_low <= outside_temp <= x_high)
    fig.add_trace(
        go.Scatter(
            x=[outside_temp],
            y=[flow_temp],
            mode="markers",
            name="Extrapolated" if extrapolated else "Current",
            # Open marker when outside the example range
            marker=dict(
                size=14,
                color=COLOR_QUERY,
                symbol="circle-open" if extrapolated else "circle",
                line=dict(width=2),
            ),
        )
    )
    # Dotted guides from the current outside temperature to the curve
    fig.add_vline(x=outside_temp, line_dash="dot", line_color=COLOR_QUERY, line_width=1)
    fig.add_hline(y=flow_temp, line_dash="dot", line_color=COLOR_QUERY, line_width=1)

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Outside temperature (°C)",
        yaxis_title="Flow temperature (°C)",
    )
    return fig

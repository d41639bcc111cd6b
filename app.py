from __future__ import annotations

import logging

import streamlit as st

from charts import build_curve_figure
from constants import RESULT_DECIMALS, SLOPE_DECIMALS
from curve import CurveResult, Point, compute
from forms import render_points_form, render_query_input
from utils.numbers import format_fixed, to_number

_LOGGER = logging.getLogger(__name__)


def _render_summary(result: CurveResult) -> None:
    if not result.valid:
        st.error(result.error)
        return
    st.write("We calculated a simple straight-line rule from your two example points.")
    st.markdown(
        "Slope (how much flow changes per 1°C outside) = "
        f"**{format_fixed(result.model.slope, SLOPE_DECIMALS)}**"
    )
    st.markdown(f"Formula: `{result.equation}`")


def _render_result(result: CurveResult) -> None:
    if not result.valid:
        st.error(result.error)
        return
    st.metric("Target flow temp", f"~{format_fixed(result.flow_temp, RESULT_DECIMALS)}°C")
    st.caption("Target flow temp based on your two example settings")
    st.caption("~ Results are approximate - actual system temps may vary.")


def _render_quick_checks() -> None:
    st.markdown(
        "**Quick checks:**\n"
        "1. If outside temp equals x₁ you'll get y₁; if it equals x₂ you'll get y₂.\n"
        "2. Between x₁ and x₂ values are interpolated on the straight line.\n"
        "3. Outside of the defined points the curve extrapolates (may produce high/low temps)."
    )


def _render_tips_and_faq() -> None:
    with st.expander("Advanced tips"):
        st.markdown(
            "- Keep your slope shallow for UFH and steeper for radiators that need hotter water.\n"
            "- Experiment with different settings to achieve highest COP.\n"
            "- When in doubt, ask your installer for recommended field settings."
        )
    with st.expander("FAQ"):
        st.markdown(
            "- **Weather compensation / Water Law:** the pump decides the water flow temperature "
            "in your rads/UFH based on how cold it is outside; colder outside means hotter water.\n"
            "- **COP:** Coefficient of Performance, how efficient the heat pump is. "
            "1 kW consumed and 4 kW generated gives a COP of 4.\n"
            "- **Why lower flow helps efficiency:** heat pumps work better with lower flow temps "
            "(e.g. underfloor heating).\n"
            "- **Outside the points:** between your two example points we interpolate, outside "
            "that range we extrapolate and values can grow beyond what you expect."
        )


def main() -> None:
    st.set_page_config(page_title="Heat Pump Heating Curve", page_icon="🌡️", layout="wide")
    st.title("🌡️ Heat pump heating curve")
    st.caption(
        "Turn two example settings from your heat pump into a formula for the target water "
        "(flow) temperature as the outside temperature changes."
    )

    col_left, col_right = st.columns(2)
    with col_left:
        warm_outside, warm_flow, cold_outside, cold_flow = render_points_form()
    with col_right:
        outside = render_query_input()

    # Streamlit reruns on every input change, so this is always current
    result = compute(warm_outside, warm_flow, cold_outside, cold_flow, outside)
    _LOGGER.debug("Heating curve result: %s", result)

    with col_left:
        _render_summary(result)
    with col_right:
        st.caption("Result")
        _render_result(result)
        _render_quick_checks()

    if result.valid:
        fig = build_curve_figure(
            result.model,
            Point(to_number(warm_outside), to_number(warm_flow)),
            Point(to_number(cold_outside), to_number(cold_flow)),
            to_number(outside),
        )
        st.plotly_chart(fig, use_container_width=True)

    _render_tips_and_faq()


if __name__ == "__main__":
    main()

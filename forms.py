from __future__ import annotations

from typing import Tuple

import streamlit as st

from constants import (
    DEFAULT_COLD_FLOW,
    DEFAULT_COLD_OUTSIDE,
    DEFAULT_OUTSIDE,
    DEFAULT_WARM_FLOW,
    DEFAULT_WARM_OUTSIDE,
)


def _temperature_input(label: str, default: float, key: str) -> str:
    # Raw text; coercion happens in curve.compute
    return st.text_input(label, value=f"{default:g}", placeholder=f"e.g. {default:g}", key=key)


def render_points_form() -> Tuple[str, str, str, str]:
    """
    Two example settings: "when it's this outside, I want the water this warm".
    Returns (warm_outside, warm_flow, cold_outside, cold_flow) as entered.
    """
    st.subheader("Two example settings")
    st.caption(
        "Tell the tool: \"When it's this outside, I want the water to be this warm.\" "
        "Use one warm-day point and one cold-day point."
    )
    col1, col2 = st.columns(2)
    with col1:
        warm_outside = _temperature_input("Warm day - Outside (°C)", DEFAULT_WARM_OUTSIDE, "warm_outside")
        cold_outside = _temperature_input("Cold day - Outside (°C)", DEFAULT_COLD_OUTSIDE, "cold_outside")
    with col2:
        warm_flow = _temperature_input("Warm day - Flow (°C)", DEFAULT_WARM_FLOW, "warm_flow")
        cold_flow = _temperature_input("Cold day - Flow (°C)", DEFAULT_COLD_FLOW, "cold_flow")
    return warm_outside, warm_flow, cold_outside, cold_flow


def render_query_input() -> str:
    st.subheader("Calculate flow temperature")
    return _temperature_input("Current outside temp (°C)", DEFAULT_OUTSIDE, "current_outside")

"""Squad status component showing purse and quota usage."""

import streamlit as st

from ...analysis import SquadComposition
from ...config import SquadConfig
from ...models import format_crores


def render_squad_status(
    spent: float,
    remaining: float,
    composition: SquadComposition,
    rules: SquadConfig,
) -> None:
    """
    Render purse and squad metrics.

    Args:
        spent: Purse spent so far.
        remaining: Purse still available.
        composition: Current squad counts.
        rules: Squad rules.
    """
    st.metric(
        label="Purse Remaining",
        value=format_crores(remaining),
        delta=f"{format_crores(spent)} / {format_crores(rules.total_purse)} spent",
        delta_color="off",
    )
    st.progress(min(max(spent / rules.total_purse, 0.0), 1.0) if rules.total_purse else 1.0)

    col1, col2 = st.columns(2)
    with col1:
        st.metric(
            label="Squad Size",
            value=f"{composition.total} / {rules.max_squad_size}",
        )
    with col2:
        st.metric(
            label="Overseas",
            value=f"{composition.overseas} / {rules.max_overseas}",
        )

    with st.expander("Composition", expanded=False):
        st.write(f"Domestic: {composition.domestic}")
        st.write(f"Batsmen: {composition.batsmen}")
        st.write(f"Bowlers: {composition.bowlers}")
        st.write(f"All-Rounders: {composition.all_rounders}")

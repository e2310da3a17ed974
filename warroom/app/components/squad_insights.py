"""Gap diagnostics and best-XI display components."""

from typing import Optional, Sequence

import streamlit as st

from ...analysis import BestLineup, GapPriority, SquadGap
from ...config import SquadConfig


def render_gaps(gaps: Sequence[SquadGap]) -> None:
    """Render squad gaps, most severe first."""
    st.subheader("Squad Gaps & Priorities")

    if not gaps:
        st.success("✓ Well-balanced squad!")
        return

    for gap in gaps:
        text = (
            f"**{gap.priority.name}** · {gap.category}: {gap.description} "
            f"(Current: {gap.current} / Needed: {gap.needed})"
        )
        if gap.priority == GapPriority.CRITICAL:
            st.error(text)
        elif gap.priority == GapPriority.HIGH:
            st.warning(text)
        else:
            st.info(text)


def render_best_lineup(lineup: Optional[BestLineup], rules: SquadConfig) -> None:
    """Render the projected best XI."""
    st.subheader("Projected Best XI")

    if lineup is None:
        st.info(f"Add at least {rules.lineup_size} players to project a best XI.")
        return

    slots = [
        ("Keeper", [lineup.keeper] if lineup.keeper is not None else []),
        ("Openers", lineup.openers),
        ("Middle Order", lineup.middle_order),
        ("All-Rounders", lineup.all_rounders),
        ("Bowlers", lineup.bowlers),
    ]
    for label, players in slots:
        if players:
            names = ", ".join(p.name for p in players)
            st.markdown(f"**{label}:** {names}")

    st.caption(f"{lineup.total_players} players · {lineup.overseas_count} overseas")
    if not lineup.is_valid:
        st.error(
            f"Too many overseas players in XI "
            f"({lineup.overseas_count}/{rules.lineup_max_overseas})"
        )

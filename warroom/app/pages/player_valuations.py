"""Player valuations page: search, filter, sort and breakdown detail."""

from typing import Sequence

import streamlit as st

from ...models import Role, NationalityClass, ValuedPlayer, format_crores
from ..state import get_engine


SORT_OPTIONS = {
    "value-desc": "Highest Value",
    "value-asc": "Lowest Value",
    "war-desc": "Highest WAR",
    "name": "Name (A-Z)",
}


def _filter_players(
    players: Sequence[ValuedPlayer],
    search: str,
    role: str,
    nationality: str,
) -> list[ValuedPlayer]:
    """Filter players by search term (name or team), role and nationality class."""
    term = search.strip().lower()
    filtered = list(players)
    if term:
        filtered = [
            p for p in filtered
            if term in p.record.name.lower() or term in p.record.team.lower()
        ]
    if role != "All":
        filtered = [p for p in filtered if p.record.role.value == role]
    if nationality != "All":
        filtered = [p for p in filtered if p.record.nationality.value == nationality]
    return filtered


def _sort_players(players: Sequence[ValuedPlayer], sort_by: str) -> list[ValuedPlayer]:
    """Sort players by one of SORT_OPTIONS."""
    if sort_by == "value-asc":
        return sorted(players, key=lambda p: p.final_value)
    if sort_by == "war-desc":
        return sorted(players, key=lambda p: p.war, reverse=True)
    if sort_by == "name":
        return sorted(players, key=lambda p: p.record.name)
    return sorted(players, key=lambda p: p.final_value, reverse=True)


def _render_breakdown(player: ValuedPlayer) -> None:
    """Render the valuation breakdown and career stats for one player."""
    valuation = player.valuation.rounded()
    record = player.record

    cols = st.columns(4)
    cols[0].metric("Estimated Value", format_crores(valuation.final_value))
    cols[1].metric("WAR", f"{valuation.war:.2f}", delta=valuation.grade.value, delta_color="off")
    cols[2].metric("Base Value", format_crores(valuation.base_value))
    cols[3].metric("Confidence Adjusted", format_crores(valuation.adjusted_base))

    cols = st.columns(4)
    cols[0].metric("Confidence", f"{valuation.confidence:.2f}")
    cols[1].metric("Age Multiplier", f"{valuation.age_multiplier}x")
    cols[2].metric("Scarcity Multiplier", f"{valuation.scarcity_multiplier}x")
    cols[3].metric("Form Multiplier", f"{valuation.form_multiplier}x")

    if record.batting is not None:
        bat = record.batting
        st.caption(
            f"🏏 {bat.matches} matches · {bat.runs} runs @ SR {bat.strike_rate} · "
            f"{bat.fours} fours · {bat.sixes} sixes · batting WAR {valuation.batting_war:.2f}"
        )
    if record.bowling is not None:
        bowl = record.bowling
        st.caption(
            f"⚡ {bowl.matches} matches · {bowl.wickets} wkts @ Eco {bowl.economy} · "
            f"{bowl.death_overs} death overs · bowling WAR {valuation.bowling_war:.2f}"
        )


def render() -> None:
    """Render the player valuations page."""
    engine = get_engine()
    players = engine.get_valued_players()

    st.title("Player Valuations")

    feed_error = st.session_state.get("feed_error")
    if feed_error:
        st.warning(f"Player feed unavailable, showing sample players: {feed_error}")

    col1, col2 = st.columns(2)
    col1.metric("Players", len(players))
    col2.metric("Total Value", format_crores(sum(p.final_value for p in players)))

    st.divider()

    filter_cols = st.columns([2, 1, 1, 1])
    with filter_cols[0]:
        search = st.text_input("Search players or teams...", key="search")
    with filter_cols[1]:
        role = st.selectbox("Role", ["All"] + [r.value for r in Role], key="role_filter")
    with filter_cols[2]:
        nationality = st.selectbox(
            "Type",
            ["All"] + [n.value for n in NationalityClass],
            key="nationality_filter",
        )
    with filter_cols[3]:
        sort_by = st.selectbox(
            "Sort",
            list(SORT_OPTIONS),
            format_func=SORT_OPTIONS.get,
            key="sort_by",
        )

    shown = _sort_players(_filter_players(players, search, role, nationality), sort_by)

    if not shown:
        st.info("No players found matching your criteria")
        return

    for player in shown:
        title = (
            f"{player.record.name} · {player.record.role.value} · "
            f"{format_crores(player.final_value)}"
        )
        with st.expander(title):
            _render_breakdown(player)

"""Squad builder page for buying players and reviewing the squad."""

import streamlit as st

from ...models import format_crores
from ..components import (
    render_best_lineup,
    render_gaps,
    render_player_table,
    render_squad_status,
)
from ..state import get_engine
from .player_valuations import _sort_players


def _add_player(player_id: str) -> None:
    """Buy a player, surfacing the engine's message."""
    result = get_engine().add_player(player_id)
    st.session_state.last_message = (result.success, result.message)


def _remove_player(player_id: str) -> None:
    """Release a player."""
    result = get_engine().remove_player(player_id)
    st.session_state.last_message = (result.success, result.message)


def _clear_squad() -> None:
    """Release every player."""
    result = get_engine().clear_roster()
    st.session_state.last_message = (result.success, result.message)


def render() -> None:
    """Render the squad builder page."""
    engine = get_engine()
    rules = engine.config.squad
    squad = engine.get_squad()

    st.title("Squad Builder")

    message = st.session_state.pop("last_message", None)
    if message is not None:
        success, text = message
        if success:
            st.success(text)
        else:
            st.error(text)

    squad_col, players_col = st.columns([1, 1.5])

    with squad_col:
        st.header("Your Squad")
        render_squad_status(
            engine.get_spent(),
            engine.get_remaining(),
            engine.get_composition(),
            rules,
        )

        st.subheader("Squad")
        if squad:
            for entry in squad:
                cols = st.columns([4, 1])
                with cols[0]:
                    st.markdown(f"**{entry.name}**")
                    st.caption(
                        f"{entry.record.role.value} · {entry.record.nationality.value} · "
                        f"{format_crores(entry.final_value)}"
                    )
                with cols[1]:
                    st.button(
                        "🗑️",
                        key=f"remove_{entry.id}",
                        on_click=_remove_player,
                        args=(entry.id,),
                        help="Remove player",
                    )
            st.button("Clear Squad", on_click=_clear_squad)
        else:
            st.info("No players selected. Add players from the list on the right.")

        st.divider()
        render_gaps(engine.get_gaps())
        st.divider()
        render_best_lineup(engine.get_best_lineup(), rules)

    with players_col:
        st.header("Available Players")
        owned = {entry.id for entry in squad}
        available = [p for p in engine.get_valued_players() if p.id not in owned]
        render_player_table(
            _sort_players(available, "value-desc"),
            squad,
            rules,
            on_add=_add_player,
        )

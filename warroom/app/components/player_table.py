"""Player table component for displaying and buying players."""

from typing import Callable, Optional, Sequence

import streamlit as st

from ...analysis import can_add_player
from ...config import SquadConfig
from ...models import RosterEntry, ValuedPlayer, format_crores


def render_player_table(
    players: Sequence[ValuedPlayer],
    roster: Sequence[RosterEntry],
    rules: SquadConfig,
    on_add: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Render a table of valued players with buy buttons.

    Args:
        players: Players to display.
        roster: Current roster for validation context.
        rules: Squad rules for validation context.
        on_add: Callback receiving the player ID when bought.
    """
    if not players:
        st.info("No players found matching your criteria.")
        return

    for player in players:
        _render_player_row(player, roster, rules, on_add)


def _render_player_row(
    player: ValuedPlayer,
    roster: Sequence[RosterEntry],
    rules: SquadConfig,
    on_add: Optional[Callable[[str], None]] = None,
) -> None:
    """Render a single player row."""
    record = player.record
    cols = st.columns([3, 1, 1, 1])

    with cols[0]:
        st.markdown(f"**{record.name}**")
        st.caption(
            f"{record.team} · {record.role.value} · {record.nationality.value} · {record.age}y"
        )

    with cols[1]:
        st.markdown(f"**{format_crores(player.final_value)}**")

    with cols[2]:
        st.caption(f"WAR {player.war:.2f} · {player.valuation.grade.value}")

    with cols[3]:
        if on_add is not None:
            validation = can_add_player(roster, player, rules)

            help_text = None
            if not validation.is_valid and validation.errors:
                help_text = validation.errors[0].message

            st.button(
                "➕",
                key=f"add_{player.id}",
                disabled=not validation.is_valid,
                help=help_text,
                on_click=on_add,
                args=(player.id,),
            )

    st.divider()

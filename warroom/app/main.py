"""Main Streamlit application entry point."""

import logging
import sys
from pathlib import Path

# Add project root to path for direct execution
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from warroom.app.pages import player_valuations, squad_builder

# Navigation
PAGES = {
    "Player Valuations": player_valuations,
    "Squad Builder": squad_builder,
}


def main() -> None:
    """Run the main application."""
    logging.basicConfig(level=logging.INFO)

    st.set_page_config(
        page_title="IPL Auction War Room",
        page_icon="🏏",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.sidebar.title("IPL Auction War Room")
    st.sidebar.markdown("*Advanced Player Valuation & Analytics*")
    st.sidebar.divider()

    # Page selection
    page_name = st.sidebar.radio("Navigation", list(PAGES.keys()), label_visibility="collapsed")

    # Run selected page
    page = PAGES[page_name]
    page.render()


if __name__ == "__main__":
    main()

"""Session state shared by the application pages."""

import logging
import os
from pathlib import Path

import streamlit as st

from ..auction import AuctionEngine, JsonFileStore
from ..config import load_config
from ..feeds import FeedError, create_sample_players, load_player_pool
from ..models import PlayerStatRecord


logger = logging.getLogger(__name__)

# Optional JSON config overriding the default calibration
CONFIG_PATH_ENV = "WARROOM_CONFIG"

# Optional URL of a JSON player feed replacing the bundled sample pool
FEED_URL_ENV = "WARROOM_FEED_URL"


def _load_players() -> list[PlayerStatRecord]:
    """Load the player pool, falling back to the sample pool if the feed fails."""
    feed_url = os.environ.get(FEED_URL_ENV)
    try:
        return load_player_pool(feed_url)
    except FeedError as e:
        logger.error("Player feed %s failed: %s", feed_url, e)
        st.session_state.feed_error = str(e)
        return create_sample_players()


def get_engine() -> AuctionEngine:
    """Get the session's engine, creating it on first use."""
    if "engine" not in st.session_state:
        config_path = os.environ.get(CONFIG_PATH_ENV)
        st.session_state.engine = AuctionEngine(
            _load_players(),
            config=load_config(Path(config_path) if config_path else None),
            store=JsonFileStore(),
        )
    return st.session_state.engine

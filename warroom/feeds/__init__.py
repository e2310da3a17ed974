"""Input feeds for player statistics."""

from .base import (
    CACHE_DIR,
    FeedCache,
    FeedError,
    FetchError,
    JsonFeed,
    ParseError,
    RateLimitError,
)
from .players import (
    PlayerFeed,
    SAMPLE_PLAYERS_PATH,
    create_sample_players,
    load_player_pool,
    load_players_from_json,
    parse_nationality,
    parse_player,
    parse_players,
    parse_role,
)

__all__ = [
    # Base
    "CACHE_DIR",
    "FeedCache",
    "FeedError",
    "FetchError",
    "JsonFeed",
    "ParseError",
    "RateLimitError",
    # Players
    "PlayerFeed",
    "SAMPLE_PLAYERS_PATH",
    "create_sample_players",
    "load_player_pool",
    "load_players_from_json",
    "parse_nationality",
    "parse_player",
    "parse_players",
    "parse_role",
]

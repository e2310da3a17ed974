"""Player statistics feed: parsing, file loading and HTTP fetching."""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from ..models import (
    BattingCareer,
    BowlingCareer,
    NationalityClass,
    PlayerStatRecord,
    Role,
)
from .base import FeedCache, JsonFeed, ParseError


logger = logging.getLogger(__name__)


# Bundled sample dataset
SAMPLE_PLAYERS_PATH = Path(__file__).parent.parent / "data" / "players.json"

ROLE_MAP = {
    "batsman": Role.BATSMAN,
    "batter": Role.BATSMAN,
    "bowler": Role.BOWLER,
    "all-rounder": Role.ALL_ROUNDER,
    "allrounder": Role.ALL_ROUNDER,
    "all rounder": Role.ALL_ROUNDER,
}

NATIONALITY_MAP = {
    "domestic": NationalityClass.DOMESTIC,
    "indian": NationalityClass.DOMESTIC,
    "overseas": NationalityClass.OVERSEAS,
}

BATTING_FIELDS = {
    "matches": "matches",
    "runs": "runs",
    "fours": "fours",
    "sixes": "sixes",
    "strikeRate": "strike_rate",
    "runsInWins": "runs_in_wins",
    "highPressureRuns": "high_pressure_runs",
}

BOWLING_FIELDS = {
    "matches": "matches",
    "overs": "overs",
    "economy": "economy",
    "wickets": "wickets",
    "deathOvers": "death_overs",
    "deathEconomy": "death_economy",
    "powerplayWickets": "powerplay_wickets",
}


def parse_role(text: str) -> Role:
    """
    Parse a role label.

    Raises:
        ParseError: If the role is not recognized.
    """
    role = ROLE_MAP.get(text.strip().lower())
    if role is None:
        raise ParseError(f"Unknown role: {text}")
    return role


def parse_nationality(text: str) -> NationalityClass:
    """
    Parse a nationality class label.

    Raises:
        ParseError: If the label is not recognized.
    """
    nationality = NATIONALITY_MAP.get(text.strip().lower())
    if nationality is None:
        raise ParseError(f"Unknown nationality class: {text}")
    return nationality


def _parse_block(data: Optional[Mapping[str, Any]], names: Mapping[str, str]) -> dict[str, Any]:
    """Rename the known keys of a stats block to model field names."""
    if not data:
        return {}
    return {field: data[key] for key, field in names.items() if key in data}


def parse_player(data: Mapping[str, Any]) -> PlayerStatRecord:
    """
    Build a player record from a raw feed dictionary.

    Args:
        data: Dictionary with id, name, team, role, type, age and optional
            battingStats / bowlingStats blocks.

    Returns:
        The parsed PlayerStatRecord.

    Raises:
        ParseError: If required fields are missing or malformed.
        InvalidStatsError: If the statistics violate record invariants.
    """
    try:
        batting = _parse_block(data.get("battingStats"), BATTING_FIELDS)
        bowling = _parse_block(data.get("bowlingStats"), BOWLING_FIELDS)
        return PlayerStatRecord(
            id=str(data["id"]),
            name=data["name"],
            team=data.get("team", ""),
            role=parse_role(data["role"]),
            nationality=parse_nationality(data.get("type", data.get("nationality", ""))),
            age=int(data["age"]),
            batting=BattingCareer(**batting) if batting else None,
            bowling=BowlingCareer(**bowling) if bowling else None,
            is_wicket_keeper=data.get("isWicketKeeper"),
        )
    except KeyError as e:
        raise ParseError(f"Missing field {e} in player {data.get('id', '?')}")
    except TypeError as e:
        raise ParseError(f"Malformed player {data.get('id', '?')}: {e}")


def parse_players(items: Any) -> list[PlayerStatRecord]:
    """Parse a JSON array of raw player dictionaries."""
    if not isinstance(items, list):
        raise ParseError("Player feed must be a JSON array")
    return [parse_player(item) for item in items]


def load_players_from_json(json_path: Optional[Path] = None) -> list[PlayerStatRecord]:
    """
    Load player records from a JSON file.

    Args:
        json_path: Path to JSON file. Defaults to the bundled sample dataset.

    Returns:
        Player records in file order.
    """
    path = json_path or SAMPLE_PLAYERS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_players(data)


def create_sample_players() -> list[PlayerStatRecord]:
    """Load the bundled sample player pool."""
    return load_players_from_json(SAMPLE_PLAYERS_PATH)


class PlayerFeed(JsonFeed):
    """Player pool published as a JSON array over HTTP."""

    def load(self, use_cache: bool = True) -> list[PlayerStatRecord]:
        """Fetch and parse the player pool."""
        return parse_players(self.fetch(use_cache=use_cache))


def load_player_pool(
    feed_url: Optional[str] = None,
    cache: Optional[FeedCache] = None,
) -> list[PlayerStatRecord]:
    """
    Load the player pool the engine is built from.

    Args:
        feed_url: URL of a JSON player feed. The bundled sample dataset is
            used when None or empty.
        cache: Document cache for the feed; defaults to the user cache.

    Returns:
        Player records in feed order.

    Raises:
        FeedError: If the feed cannot be fetched or parsed.
    """
    if not feed_url:
        return create_sample_players()
    players = PlayerFeed(feed_url, cache=cache or FeedCache()).load()
    logger.info("Loaded %d players from %s", len(players), feed_url)
    return players

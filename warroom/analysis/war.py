"""Wins Above Replacement calculator for batting, bowling and all-rounders."""

from dataclasses import dataclass
from typing import Optional

from ..config import ValuationConfig
from ..models.player import BattingCareer, BowlingCareer, PlayerStatRecord, Role
from .normalizer import SeasonBatting, SeasonBowling, normalize_batting, normalize_bowling


@dataclass(frozen=True)
class WarBreakdown:
    """
    WAR components for a single player.

    Attributes:
        batting: Batting WAR (0 when no batting block).
        bowling: Bowling WAR (0 when no bowling block).
        total: WAR selected by the player's role.
    """

    batting: float
    bowling: float
    total: float


def strike_rate_bonus(strike_rate: float, config: ValuationConfig) -> float:
    """
    Percentage bonus on runs for scoring quickly.

    Zero at or below the threshold, then linear and capped.
    """
    if strike_rate <= config.strike_rate_threshold:
        return 0.0
    bonus = (strike_rate - config.strike_rate_threshold) / config.strike_rate_bonus_scale
    return min(bonus, config.strike_rate_bonus_cap)


def batting_runs_created(season: SeasonBatting, config: ValuationConfig) -> float:
    """
    Calculate Batting Runs Created for one season.

    Args:
        season: Season-normalized batting production.
        config: Valuation configuration.

    Returns:
        Runs created, before the replacement baseline is subtracted.
    """
    runs = season.runs
    runs += season.boundaries * config.boundary_bonus
    runs += season.runs * strike_rate_bonus(season.strike_rate, config)
    runs += season.runs_in_wins * config.winning_runs_weight
    runs += season.high_pressure_runs * config.pressure_runs_weight
    return runs


def bowling_runs_saved(season: SeasonBowling, config: ValuationConfig) -> float:
    """
    Calculate Bowling Runs Saved for one season.

    Args:
        season: Season-normalized bowling production.
        config: Valuation configuration.

    Returns:
        Runs saved, before the replacement baseline is subtracted.
    """
    expected_runs = season.overs * config.league_average_economy
    actual_runs = season.overs * season.economy
    runs = expected_runs - actual_runs

    runs += season.wickets * config.wicket_run_value

    # Death premium only rewards beating the league death economy
    if season.death_overs > 0:
        death_saved = season.death_overs * (
            config.league_average_death_economy - season.death_economy
        )
        runs += max(0.0, death_saved) * config.death_overs_weight

    runs += season.powerplay_wickets * config.powerplay_wicket_bonus
    return runs


def batting_war(
    career: Optional[BattingCareer],
    config: ValuationConfig,
    player_id: str = "",
) -> float:
    """Convert a batting career to WAR, clamped at zero."""
    if career is None:
        return 0.0
    brc = batting_runs_created(normalize_batting(career, config, player_id), config)
    return max(0.0, (brc - config.replacement_level_batting) / config.runs_per_win)


def bowling_war(
    career: Optional[BowlingCareer],
    config: ValuationConfig,
    player_id: str = "",
) -> float:
    """Convert a bowling career to WAR, clamped at zero."""
    if career is None:
        return 0.0
    brs = bowling_runs_saved(normalize_bowling(career, config, player_id), config)
    return max(0.0, (brs - config.replacement_level_bowling) / config.runs_per_win)


def all_rounder_war(bat_war: float, bowl_war: float, config: ValuationConfig) -> float:
    """Combine both disciplines with the flexibility premium."""
    return max(0.0, (bat_war + bowl_war) * config.flexibility_premium)


def calculate_war(record: PlayerStatRecord, config: ValuationConfig) -> WarBreakdown:
    """
    Calculate the role-selected WAR for a player.

    Args:
        record: The player's statistics.
        config: Valuation configuration.

    Returns:
        WarBreakdown with per-discipline and role-selected totals.
    """
    bat = batting_war(record.batting, config, record.id)
    bowl = bowling_war(record.bowling, config, record.id)

    if record.role == Role.BATSMAN:
        total = bat
    elif record.role == Role.BOWLER:
        total = bowl
    else:
        total = all_rounder_war(bat, bowl, config)

    return WarBreakdown(batting=bat, bowling=bowl, total=total)

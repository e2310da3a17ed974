"""Career-to-season normalization of counting statistics."""

from dataclasses import dataclass

from ..config import ValuationConfig
from ..models.player import BattingCareer, BowlingCareer, InvalidStatsError


@dataclass(frozen=True)
class SeasonBatting:
    """Batting production scaled to one representative season."""

    runs: float
    boundaries: float
    strike_rate: float
    runs_in_wins: float
    high_pressure_runs: float


@dataclass(frozen=True)
class SeasonBowling:
    """Bowling production scaled to one representative season."""

    overs: float
    economy: float
    wickets: float
    death_overs: float
    death_economy: float
    powerplay_wickets: float


def season_factor(matches: int, config: ValuationConfig, player_id: str = "") -> float:
    """
    Compute the scale from career totals to a single season.

    Args:
        matches: Career matches in the block being scaled.
        config: Valuation configuration (supplies matches per season).
        player_id: Player the block belongs to, for error reporting.

    Returns:
        matches_per_season / matches.

    Raises:
        InvalidStatsError: If matches is not positive.
    """
    if matches <= 0:
        raise InvalidStatsError(player_id, "cannot normalize a career with no matches")
    return config.matches_per_season / matches


def normalize_batting(
    career: BattingCareer,
    config: ValuationConfig,
    player_id: str = "",
) -> SeasonBatting:
    """Scale a batting career to per-season figures. Rates are not scaled."""
    factor = season_factor(career.matches, config, player_id)
    return SeasonBatting(
        runs=career.runs * factor,
        boundaries=(career.fours + career.sixes) * factor,
        strike_rate=career.strike_rate,
        runs_in_wins=career.runs_in_wins * factor,
        high_pressure_runs=career.high_pressure_runs * factor,
    )


def normalize_bowling(
    career: BowlingCareer,
    config: ValuationConfig,
    player_id: str = "",
) -> SeasonBowling:
    """Scale a bowling career to per-season figures. Rates are not scaled."""
    factor = season_factor(career.matches, config, player_id)
    return SeasonBowling(
        overs=career.overs * factor,
        economy=career.economy,
        wickets=career.wickets * factor,
        death_overs=career.death_overs * factor,
        death_economy=career.death_economy,
        powerplay_wickets=career.powerplay_wickets * factor,
    )

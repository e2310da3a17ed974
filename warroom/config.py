"""Engine configuration for player valuation and squad construction."""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .models.player import Role


# Season calibration (IPL T20)
MATCHES_PER_SEASON = 14
RUNS_PER_WIN = 22.0
MARKET_RATE_PER_WAR = 2.5
REPLACEMENT_LEVEL_BATTING = 280.0
REPLACEMENT_LEVEL_BOWLING = 150.0
WICKET_RUN_VALUE = 6.0
LEAGUE_AVERAGE_ECONOMY = 9.0
LEAGUE_AVERAGE_DEATH_ECONOMY = 10.5
FLEXIBILITY_PREMIUM = 1.17

# Batting bonuses
BOUNDARY_BONUS = 0.5
STRIKE_RATE_THRESHOLD = 150.0
STRIKE_RATE_BONUS_SCALE = 1000.0
STRIKE_RATE_BONUS_CAP = 0.10
WINNING_RUNS_WEIGHT = 0.10
PRESSURE_RUNS_WEIGHT = 0.15

# Bowling bonuses
DEATH_OVERS_WEIGHT = 0.5
POWERPLAY_WICKET_BONUS = 2.0

# Confidence shrinkage
CONFIDENCE_STEPS = ((50, 0.95), (30, 0.80), (14, 0.60))
CONFIDENCE_FLOOR = 0.50
LEAGUE_AVERAGE_VALUE = 5.0

# Age curve
AGE_WINDOWS = {
    Role.BATSMAN: (27, 32),
    Role.BOWLER: (26, 32),
    Role.ALL_ROUNDER: (27, 31),
}
PEAK_AGE_MULTIPLIER = 1.05
YOUTH_BONUS_PER_YEAR = 0.02
DECLINE_PER_YEAR = 0.03
MIN_AGE_MULTIPLIER = 0.85

# Form
FORM_STRIKE_RATE = 150.0
FORM_ECONOMY = 7.5
FORM_MULTIPLIER = 1.1

# Squad rules
TOTAL_PURSE = 120.0
MAX_SQUAD_SIZE = 25
MAX_OVERSEAS = 8
MIN_RESERVE_PER_SLOT = 0.2
LINEUP_SIZE = 11
LINEUP_MAX_OVERSEAS = 4


@dataclass(frozen=True)
class ScarcityConfig:
    """Thresholds and multipliers for the scarcity rule table."""

    death_specialist_overs: float = 50
    death_specialist_domestic: float = 1.5
    death_specialist_overseas: float = 1.3
    domestic_pace_wickets: float = 40
    domestic_pace: float = 1.4
    domestic_opener_strike_rate: float = 140.0
    domestic_opener: float = 1.35
    wicket_taker_wickets: float = 45
    wicket_taker: float = 1.25
    domestic_all_rounder: float = 1.3
    overseas_all_rounder: float = 0.95


@dataclass(frozen=True)
class ValuationConfig:
    """
    Calibration constants for the valuation pipeline.

    Every number that ties the model to a league's scoring environment
    lives here so a new season can be recalibrated without touching
    the algorithms.
    """

    matches_per_season: int = MATCHES_PER_SEASON
    runs_per_win: float = RUNS_PER_WIN
    market_rate_per_war: float = MARKET_RATE_PER_WAR
    replacement_level_batting: float = REPLACEMENT_LEVEL_BATTING
    replacement_level_bowling: float = REPLACEMENT_LEVEL_BOWLING
    wicket_run_value: float = WICKET_RUN_VALUE
    league_average_economy: float = LEAGUE_AVERAGE_ECONOMY
    league_average_death_economy: float = LEAGUE_AVERAGE_DEATH_ECONOMY
    flexibility_premium: float = FLEXIBILITY_PREMIUM
    boundary_bonus: float = BOUNDARY_BONUS
    strike_rate_threshold: float = STRIKE_RATE_THRESHOLD
    strike_rate_bonus_scale: float = STRIKE_RATE_BONUS_SCALE
    strike_rate_bonus_cap: float = STRIKE_RATE_BONUS_CAP
    winning_runs_weight: float = WINNING_RUNS_WEIGHT
    pressure_runs_weight: float = PRESSURE_RUNS_WEIGHT
    death_overs_weight: float = DEATH_OVERS_WEIGHT
    powerplay_wicket_bonus: float = POWERPLAY_WICKET_BONUS
    confidence_steps: tuple[tuple[int, float], ...] = CONFIDENCE_STEPS
    confidence_floor: float = CONFIDENCE_FLOOR
    league_average_value: float = LEAGUE_AVERAGE_VALUE
    age_windows: Mapping[Role, tuple[int, int]] = field(
        default_factory=lambda: dict(AGE_WINDOWS)
    )
    peak_age_multiplier: float = PEAK_AGE_MULTIPLIER
    youth_bonus_per_year: float = YOUTH_BONUS_PER_YEAR
    decline_per_year: float = DECLINE_PER_YEAR
    min_age_multiplier: float = MIN_AGE_MULTIPLIER
    form_strike_rate: float = FORM_STRIKE_RATE
    form_economy: float = FORM_ECONOMY
    form_multiplier: float = FORM_MULTIPLIER
    scarcity: ScarcityConfig = field(default_factory=ScarcityConfig)

    def __post_init__(self) -> None:
        """Validate calibration values."""
        if self.matches_per_season <= 0:
            raise ValueError("matches_per_season must be positive")
        if self.runs_per_win <= 0:
            raise ValueError("runs_per_win must be positive")
        if self.flexibility_premium <= 1.0:
            raise ValueError("flexibility_premium must be greater than 1")
        if not 0 < self.min_age_multiplier <= 1.0:
            raise ValueError("min_age_multiplier must be in (0, 1]")
        thresholds = [steps[0] for steps in self.confidence_steps]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError("confidence_steps must be ordered by descending matches")


@dataclass(frozen=True)
class SquadConfig:
    """Purse and roster-composition rules."""

    total_purse: float = TOTAL_PURSE
    max_squad_size: int = MAX_SQUAD_SIZE
    max_overseas: int = MAX_OVERSEAS
    min_reserve_per_slot: float = MIN_RESERVE_PER_SLOT
    lineup_size: int = LINEUP_SIZE
    lineup_max_overseas: int = LINEUP_MAX_OVERSEAS
    death_bowler_overs: float = 30
    opener_strike_rate: float = 130.0
    spinner_economy: float = 8.0

    def __post_init__(self) -> None:
        """Validate squad rules."""
        if self.total_purse < 0:
            raise ValueError("total_purse cannot be negative")
        if self.max_squad_size <= 0:
            raise ValueError("max_squad_size must be positive")
        if self.max_overseas < 0:
            raise ValueError("max_overseas cannot be negative")
        if self.min_reserve_per_slot < 0:
            raise ValueError("min_reserve_per_slot cannot be negative")


@dataclass(frozen=True)
class EngineConfig:
    """Complete configuration handed to the engine at construction."""

    valuation: ValuationConfig = field(default_factory=ValuationConfig)
    squad: SquadConfig = field(default_factory=SquadConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """
        Build a config from a nested mapping, starting from the defaults.

        Args:
            data: Mapping with optional "valuation" and "squad" sections.
                The valuation section may hold a nested "scarcity" section.

        Returns:
            EngineConfig with overrides applied.

        Raises:
            ValueError: If a section or key is unknown.
        """
        unknown = set(data) - {"valuation", "squad"}
        if unknown:
            raise ValueError(f"Unknown config sections: {sorted(unknown)}")

        valuation_data = dict(data.get("valuation", {}))
        scarcity = _override(ScarcityConfig(), valuation_data.pop("scarcity", {}))

        if "age_windows" in valuation_data:
            valuation_data["age_windows"] = {
                **AGE_WINDOWS,
                **{
                    Role(role): tuple(window)
                    for role, window in valuation_data["age_windows"].items()
                },
            }
        if "confidence_steps" in valuation_data:
            valuation_data["confidence_steps"] = tuple(
                (int(matches), float(weight))
                for matches, weight in valuation_data["confidence_steps"]
            )

        valuation = _override(ValuationConfig(scarcity=scarcity), valuation_data)
        squad = _override(SquadConfig(), data.get("squad", {}))
        return cls(valuation=valuation, squad=squad)


def _override(base: Any, overrides: Mapping[str, Any]) -> Any:
    """Return a copy of a frozen dataclass with overrides applied."""
    names = {f.name for f in fields(base)}
    unknown = set(overrides) - names
    if unknown:
        raise ValueError(
            f"Unknown {type(base).__name__} keys: {sorted(unknown)}"
        )
    return replace(base, **overrides)


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """
    Load engine configuration from a JSON file.

    Args:
        path: Path to the JSON file. Defaults are used when None or missing.

    Returns:
        The loaded EngineConfig.
    """
    if path is None or not path.exists():
        return EngineConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return EngineConfig.from_dict(data)

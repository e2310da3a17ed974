"""Valuation pipeline turning WAR into an estimated auction price."""

from dataclasses import dataclass
from typing import Callable, Iterable

from ..config import ScarcityConfig, ValuationConfig
from ..models.player import NationalityClass, PlayerStatRecord, Role
from ..models.valuation import ValuationResult, ValuedPlayer
from .war import calculate_war


@dataclass(frozen=True)
class ScarcityRule:
    """
    One row of the scarcity table.

    Attributes:
        name: Short label for the skill profile.
        applies: Predicate deciding whether the rule matches a player.
        multiplier: Premium (>1) or discount (<1) for the profile.
    """

    name: str
    applies: Callable[[PlayerStatRecord], bool]
    multiplier: float


def _death_overs(record: PlayerStatRecord) -> float:
    return record.bowling.death_overs if record.bowling is not None else 0.0


def _wickets(record: PlayerStatRecord) -> int:
    return record.bowling.wickets if record.bowling is not None else 0


def _strike_rate(record: PlayerStatRecord) -> float:
    return record.batting.strike_rate if record.batting is not None else 0.0


def _is_domestic(record: PlayerStatRecord) -> bool:
    return record.nationality == NationalityClass.DOMESTIC


def scarcity_rules(config: ScarcityConfig) -> list[ScarcityRule]:
    """
    Build the scarcity table in priority order.

    The first matching rule decides the multiplier.
    """
    return [
        ScarcityRule(
            name="domestic death specialist",
            applies=lambda r: _death_overs(r) > config.death_specialist_overs and _is_domestic(r),
            multiplier=config.death_specialist_domestic,
        ),
        ScarcityRule(
            name="overseas death specialist",
            applies=lambda r: _death_overs(r) > config.death_specialist_overs,
            multiplier=config.death_specialist_overseas,
        ),
        ScarcityRule(
            name="domestic pace bowler",
            applies=lambda r: (
                r.role == Role.BOWLER
                and _is_domestic(r)
                and _wickets(r) > config.domestic_pace_wickets
            ),
            multiplier=config.domestic_pace,
        ),
        ScarcityRule(
            name="explosive domestic batsman",
            applies=lambda r: (
                r.role == Role.BATSMAN
                and _is_domestic(r)
                and _strike_rate(r) > config.domestic_opener_strike_rate
            ),
            multiplier=config.domestic_opener,
        ),
        ScarcityRule(
            name="wicket-taking spinner",
            applies=lambda r: r.role == Role.BOWLER and _wickets(r) > config.wicket_taker_wickets,
            multiplier=config.wicket_taker,
        ),
        ScarcityRule(
            name="domestic all-rounder",
            applies=lambda r: r.role == Role.ALL_ROUNDER and _is_domestic(r),
            multiplier=config.domestic_all_rounder,
        ),
        ScarcityRule(
            name="overseas all-rounder",
            applies=lambda r: r.role == Role.ALL_ROUNDER and not _is_domestic(r),
            multiplier=config.overseas_all_rounder,
        ),
    ]


def match_scarcity_rule(
    record: PlayerStatRecord,
    rules: Iterable[ScarcityRule],
) -> float:
    """Return the multiplier of the first matching rule, or 1.0."""
    for rule in rules:
        if rule.applies(record):
            return rule.multiplier
    return 1.0


def calculate_scarcity_multiplier(record: PlayerStatRecord, config: ValuationConfig) -> float:
    """Calculate the market scarcity multiplier for a player."""
    return match_scarcity_rule(record, scarcity_rules(config.scarcity))


def calculate_confidence(matches: int, config: ValuationConfig) -> float:
    """
    Step-function confidence weight for a sample size.

    Args:
        matches: Career matches in the sample.
        config: Valuation configuration.

    Returns:
        Weight in (0, 1]; never decreases as matches grow.
    """
    for min_matches, weight in config.confidence_steps:
        if matches >= min_matches:
            return weight
    return config.confidence_floor


def apply_confidence(base_value: float, confidence: float, config: ValuationConfig) -> float:
    """Blend a base value toward the league-average price."""
    return base_value * confidence + config.league_average_value * (1 - confidence)


def calculate_age_multiplier(age: int, role: Role, config: ValuationConfig) -> float:
    """
    Age-curve multiplier for a role.

    Flat bonus inside the peak window, growing bonus for youth below it,
    linear decline above it floored at the configured minimum.
    """
    peak_min, peak_max = config.age_windows[role]

    if peak_min <= age <= peak_max:
        return config.peak_age_multiplier
    if age < peak_min:
        return 1.0 + (peak_min - age) * config.youth_bonus_per_year
    return max(config.min_age_multiplier, 1.0 - (age - peak_max) * config.decline_per_year)


def calculate_form_multiplier(record: PlayerStatRecord, config: ValuationConfig) -> float:
    """
    Small bonus for strong current rates.

    Conditions override rather than compound; the economy check runs last.
    """
    multiplier = 1.0
    if record.batting is not None and record.batting.strike_rate > config.form_strike_rate:
        multiplier = config.form_multiplier
    if record.bowling is not None and record.bowling.economy < config.form_economy:
        multiplier = config.form_multiplier
    return multiplier


def value_player(record: PlayerStatRecord, config: ValuationConfig) -> ValuationResult:
    """
    Run the full valuation pipeline for a player.

    Args:
        record: The player's statistics.
        config: Valuation configuration.

    Returns:
        ValuationResult at full precision.

    Raises:
        InvalidStatsError: If the record's statistics cannot be valued.
    """
    war = calculate_war(record, config)

    # Step 1: base value
    base_value = war.total * config.market_rate_per_war

    # Step 2: confidence shrinkage
    confidence = calculate_confidence(record.sample_matches, config)
    adjusted_base = apply_confidence(base_value, confidence, config)

    # Steps 3-5: multipliers
    age_multiplier = calculate_age_multiplier(record.age, record.role, config)
    scarcity_multiplier = calculate_scarcity_multiplier(record, config)
    form_multiplier = calculate_form_multiplier(record, config)

    final_value = adjusted_base * age_multiplier * scarcity_multiplier * form_multiplier

    return ValuationResult(
        war=war.total,
        base_value=base_value,
        adjusted_base=adjusted_base,
        age_multiplier=age_multiplier,
        scarcity_multiplier=scarcity_multiplier,
        form_multiplier=form_multiplier,
        final_value=max(0.0, final_value),
        confidence=confidence,
        batting_war=war.batting,
        bowling_war=war.bowling,
    )


def value_players(
    records: Iterable[PlayerStatRecord],
    config: ValuationConfig,
) -> list[ValuedPlayer]:
    """Value every record, preserving input order."""
    return [ValuedPlayer(record=r, valuation=value_player(r, config)) for r in records]

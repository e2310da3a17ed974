"""Analysis modules for player valuation and squad construction."""

from .normalizer import (
    SeasonBatting,
    SeasonBowling,
    normalize_batting,
    normalize_bowling,
    season_factor,
)
from .war import (
    WarBreakdown,
    all_rounder_war,
    batting_runs_created,
    batting_war,
    bowling_runs_saved,
    bowling_war,
    calculate_war,
    strike_rate_bonus,
)
from .valuation import (
    ScarcityRule,
    apply_confidence,
    calculate_age_multiplier,
    calculate_confidence,
    calculate_form_multiplier,
    calculate_scarcity_multiplier,
    match_scarcity_rule,
    scarcity_rules,
    value_player,
    value_players,
)
from .validator import (
    ValidationResult,
    can_add_player,
    can_remove_player,
    find_affordable_players,
    get_max_player_value,
    get_overseas_count,
    get_overseas_slots_remaining,
    get_remaining_purse,
    get_reserve_for_remaining_slots,
    get_spent,
    get_squad_slots_remaining,
)
from .composition import (
    BestLineup,
    GapPriority,
    SquadComposition,
    SquadGap,
    get_best_lineup,
    get_composition,
    get_gaps,
    is_lineup_keeper,
    is_wicket_keeper_eligible,
    sort_gaps,
)

__all__ = [
    # Normalizer
    "SeasonBatting",
    "SeasonBowling",
    "normalize_batting",
    "normalize_bowling",
    "season_factor",
    # WAR
    "WarBreakdown",
    "all_rounder_war",
    "batting_runs_created",
    "batting_war",
    "bowling_runs_saved",
    "bowling_war",
    "calculate_war",
    "strike_rate_bonus",
    # Valuation
    "ScarcityRule",
    "apply_confidence",
    "calculate_age_multiplier",
    "calculate_confidence",
    "calculate_form_multiplier",
    "calculate_scarcity_multiplier",
    "match_scarcity_rule",
    "scarcity_rules",
    "value_player",
    "value_players",
    # Validator
    "ValidationResult",
    "can_add_player",
    "can_remove_player",
    "find_affordable_players",
    "get_max_player_value",
    "get_overseas_count",
    "get_overseas_slots_remaining",
    "get_remaining_purse",
    "get_reserve_for_remaining_slots",
    "get_spent",
    "get_squad_slots_remaining",
    # Composition
    "BestLineup",
    "GapPriority",
    "SquadComposition",
    "SquadGap",
    "get_best_lineup",
    "get_composition",
    "get_gaps",
    "is_lineup_keeper",
    "is_wicket_keeper_eligible",
    "sort_gaps",
]

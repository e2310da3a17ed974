"""Squad constraint validation for auction purchases."""

from dataclasses import dataclass, field
from typing import Sequence

from ..config import SquadConfig
from ..models.squad import RosterEntry, SquadValidationError
from ..models.valuation import ValuedPlayer


# Float slack when comparing summed prices
PRICE_TOLERANCE = 1e-9


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes:
        is_valid: Whether the validation passed.
        errors: List of validation errors (empty if valid).
    """

    is_valid: bool
    errors: list[SquadValidationError] = field(default_factory=list)


def get_spent(roster: Sequence[RosterEntry]) -> float:
    """Total purse spent on the roster."""
    return sum(entry.final_value for entry in roster)


def get_remaining_purse(roster: Sequence[RosterEntry], rules: SquadConfig) -> float:
    """Purse left after the roster's purchases."""
    return rules.total_purse - get_spent(roster)


def get_overseas_count(roster: Sequence[RosterEntry]) -> int:
    """Number of overseas players in the roster."""
    return sum(1 for entry in roster if entry.is_overseas)


def get_reserve_for_remaining_slots(roster: Sequence[RosterEntry], rules: SquadConfig) -> float:
    """
    Purse that must stay unspent after the next purchase.

    Covers every slot still open once one more player is added, at the
    minimum price per slot.
    """
    open_after_purchase = max(0, rules.max_squad_size - len(roster) - 1)
    return open_after_purchase * rules.min_reserve_per_slot


def get_max_player_value(roster: Sequence[RosterEntry], rules: SquadConfig) -> float:
    """
    Highest price the next purchase may carry.

    Returns:
        Remaining purse less the reserve (0 if nothing is affordable).
    """
    available = get_remaining_purse(roster, rules) - get_reserve_for_remaining_slots(roster, rules)
    return max(0.0, round(available, 9))


def get_squad_slots_remaining(roster: Sequence[RosterEntry], rules: SquadConfig) -> int:
    """Number of players that can still be added."""
    return max(0, rules.max_squad_size - len(roster))


def get_overseas_slots_remaining(roster: Sequence[RosterEntry], rules: SquadConfig) -> int:
    """Number of overseas players that can still be added."""
    return max(0, rules.max_overseas - get_overseas_count(roster))


def can_add_player(
    roster: Sequence[RosterEntry],
    player: ValuedPlayer,
    rules: SquadConfig,
) -> ValidationResult:
    """
    Check if a player can be bought into the roster.

    Every check runs against the same roster snapshot.

    Args:
        roster: The current roster.
        player: The valued player to potentially add.
        rules: Squad rules.

    Returns:
        ValidationResult indicating if the purchase is valid.
    """
    errors: list[SquadValidationError] = []

    # Check if player already in squad
    if any(entry.id == player.id for entry in roster):
        errors.append(
            SquadValidationError(
                code="DUPLICATE_PLAYER",
                message=f"{player.name} is already in the squad",
            )
        )
        return ValidationResult(is_valid=False, errors=errors)

    # Check squad size
    if len(roster) >= rules.max_squad_size:
        errors.append(
            SquadValidationError(
                code="SQUAD_FULL",
                message=f"Squad full! Maximum {rules.max_squad_size} players allowed",
            )
        )

    # Check overseas quota
    if player.is_overseas and get_overseas_count(roster) >= rules.max_overseas:
        errors.append(
            SquadValidationError(
                code="OVERSEAS_LIMIT",
                message=f"Maximum {rules.max_overseas} overseas players allowed",
            )
        )

    # Check budget, keeping a reserve for the slots still to fill
    reserve = get_reserve_for_remaining_slots(roster, rules)
    remaining = get_remaining_purse(roster, rules)
    if player.final_value - (remaining - reserve) > PRICE_TOLERANCE:
        errors.append(
            SquadValidationError(
                code="INSUFFICIENT_BUDGET",
                message=f"Not enough budget for {player.name} "
                f"(₹{player.final_value:.2f} Cr): ₹{remaining:.2f} Cr left and "
                f"₹{reserve:.2f} Cr must be reserved for remaining slots",
            )
        )

    return ValidationResult(is_valid=len(errors) == 0, errors=errors)


def can_remove_player(roster: Sequence[RosterEntry], player_id: str) -> ValidationResult:
    """Check if a player can be released from the roster."""
    if any(entry.id == player_id for entry in roster):
        return ValidationResult(is_valid=True)
    return ValidationResult(
        is_valid=False,
        errors=[
            SquadValidationError(
                code="PLAYER_NOT_FOUND",
                message=f"Player {player_id} is not in the squad",
            )
        ],
    )


def find_affordable_players(
    roster: Sequence[RosterEntry],
    candidates: Sequence[ValuedPlayer],
    rules: SquadConfig,
) -> list[ValuedPlayer]:
    """
    Filter candidates down to those that could be bought right now.

    Args:
        roster: The current roster.
        candidates: Valued players to consider.
        rules: Squad rules.

    Returns:
        Candidates that would pass can_add_player, in input order.
    """
    return [c for c in candidates if can_add_player(roster, c, rules).is_valid]

"""Roster store holding the players bought at auction."""

import logging

from ..analysis.validator import can_add_player, can_remove_player
from ..config import SquadConfig
from ..models.squad import RosterEntry, TransactionResult
from ..models.valuation import ValuedPlayer


logger = logging.getLogger(__name__)


class RosterStore:
    """
    Ordered set of roster entries keyed by player ID.

    The only ways to change the roster are add(), remove() and clear();
    add() runs the constraint validator before committing.
    """

    def __init__(self, rules: SquadConfig) -> None:
        self.rules = rules
        self._entries: list[RosterEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, player_id: object) -> bool:
        return any(entry.id == player_id for entry in self._entries)

    def snapshot(self) -> tuple[RosterEntry, ...]:
        """Read-only view of the roster in purchase order."""
        return tuple(self._entries)

    def add(self, candidate: ValuedPlayer) -> TransactionResult:
        """
        Buy a player into the roster if every constraint allows it.

        Args:
            candidate: The valued player to add.

        Returns:
            TransactionResult; the roster is unchanged when rejected.
        """
        result = can_add_player(self.snapshot(), candidate, self.rules)
        if not result.is_valid:
            logger.debug("Rejected %s: %s", candidate.id, result.errors[0].code)
            return TransactionResult(
                accepted=False,
                reason=result.errors[0].message,
                errors=tuple(result.errors),
            )

        self._entries.append(candidate)
        return TransactionResult(accepted=True, reason=f"{candidate.name} added to squad!")

    def remove(self, player_id: str) -> TransactionResult:
        """Release a player from the roster."""
        result = can_remove_player(self.snapshot(), player_id)
        if not result.is_valid:
            return TransactionResult(
                accepted=False,
                reason=result.errors[0].message,
                errors=tuple(result.errors),
            )

        self._entries = [e for e in self._entries if e.id != player_id]
        return TransactionResult(accepted=True, reason="Player removed from squad.")

    def clear(self) -> TransactionResult:
        """Release every player."""
        self._entries = []
        return TransactionResult(accepted=True, reason="Squad cleared!")

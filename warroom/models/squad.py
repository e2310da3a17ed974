"""Squad transaction data model."""

from dataclasses import dataclass, field
from typing import Optional

from .valuation import ValuedPlayer


# A roster entry is a valued player currently held in the squad.
RosterEntry = ValuedPlayer


@dataclass(frozen=True)
class SquadValidationError:
    """Represents a constraint violation for a squad transaction."""

    code: str
    message: str


@dataclass(frozen=True)
class TransactionResult:
    """
    Outcome of a roster transaction.

    Attributes:
        accepted: Whether the roster was changed.
        reason: Human-readable explanation, surfaced verbatim to the user.
        errors: Every constraint that rejected the transaction.
    """

    accepted: bool
    reason: str = ""
    errors: tuple[SquadValidationError, ...] = field(default_factory=tuple)

    @property
    def error_code(self) -> Optional[str]:
        """Code of the first rejecting constraint, if any."""
        return self.errors[0].code if self.errors else None

"""Data models for the IPL auction war room."""

from .player import (
    BattingCareer,
    BowlingCareer,
    InvalidStatsError,
    NationalityClass,
    PlayerStatRecord,
    Role,
)
from .valuation import ValuationResult, ValuedPlayer, ValueGrade, format_crores
from .squad import RosterEntry, SquadValidationError, TransactionResult

__all__ = [
    # Player
    "BattingCareer",
    "BowlingCareer",
    "InvalidStatsError",
    "NationalityClass",
    "PlayerStatRecord",
    "Role",
    # Valuation
    "ValuationResult",
    "ValuedPlayer",
    "ValueGrade",
    "format_crores",
    # Squad
    "RosterEntry",
    "SquadValidationError",
    "TransactionResult",
]

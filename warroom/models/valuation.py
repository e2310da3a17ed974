"""Valuation result data model."""

from dataclasses import dataclass
from enum import Enum

from .player import PlayerStatRecord


class ValueGrade(Enum):
    """Qualitative grade derived from WAR."""

    ELITE = "Elite"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"

    @classmethod
    def from_war(cls, war: float) -> "ValueGrade":
        """Grade a WAR figure."""
        if war >= 2.0:
            return cls.ELITE
        if war >= 1.5:
            return cls.VERY_GOOD
        if war >= 1.0:
            return cls.GOOD
        if war >= 0.5:
            return cls.AVERAGE
        return cls.BELOW_AVERAGE


@dataclass(frozen=True)
class ValuationResult:
    """
    Auditable breakdown of a player's valuation.

    Monetary fields are in crores and kept at full precision; use
    rounded() for display.

    Attributes:
        war: Role-selected wins above replacement.
        base_value: WAR priced at the market rate.
        adjusted_base: Base value shrunk toward the league average.
        age_multiplier: Age-curve multiplier.
        scarcity_multiplier: Market-scarcity multiplier.
        form_multiplier: Current-form multiplier.
        final_value: Estimated auction price.
        confidence: Sample-size confidence weight used for shrinkage.
        batting_war: Batting component of WAR.
        bowling_war: Bowling component of WAR.
    """

    war: float
    base_value: float
    adjusted_base: float
    age_multiplier: float
    scarcity_multiplier: float
    form_multiplier: float
    final_value: float
    confidence: float = 1.0
    batting_war: float = 0.0
    bowling_war: float = 0.0

    def rounded(self) -> "ValuationResult":
        """Return a copy with every field rounded to two decimals."""
        return ValuationResult(
            war=round(self.war, 2),
            base_value=round(self.base_value, 2),
            adjusted_base=round(self.adjusted_base, 2),
            age_multiplier=round(self.age_multiplier, 2),
            scarcity_multiplier=round(self.scarcity_multiplier, 2),
            form_multiplier=round(self.form_multiplier, 2),
            final_value=round(self.final_value, 2),
            confidence=round(self.confidence, 2),
            batting_war=round(self.batting_war, 2),
            bowling_war=round(self.bowling_war, 2),
        )

    @property
    def grade(self) -> ValueGrade:
        """Qualitative grade for this valuation."""
        return ValueGrade.from_war(self.war)


@dataclass(frozen=True)
class ValuedPlayer:
    """A player record paired with its computed valuation."""

    record: PlayerStatRecord
    valuation: ValuationResult

    @property
    def id(self) -> str:
        """Player identifier."""
        return self.record.id

    @property
    def name(self) -> str:
        """Player name."""
        return self.record.name

    @property
    def final_value(self) -> float:
        """Estimated price at full precision."""
        return self.valuation.final_value

    @property
    def war(self) -> float:
        """Wins above replacement."""
        return self.valuation.war

    @property
    def is_overseas(self) -> bool:
        """Check if player counts against the overseas quota."""
        return self.record.is_overseas


def format_crores(value: float) -> str:
    """Format a monetary value in crores for display."""
    return f"₹{value:.2f} Cr"

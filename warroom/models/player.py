"""Player statistics data model for auction valuation."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Union


class Role(Enum):
    """Playing role used to select the valuation path."""

    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-Rounder"


class NationalityClass(Enum):
    """Squad-quota classification of a player."""

    DOMESTIC = "Domestic"
    OVERSEAS = "Overseas"


class InvalidStatsError(ValueError):
    """Raised when a player's statistics cannot be valued."""

    def __init__(self, player_id: str, message: str) -> None:
        self.player_id = player_id
        super().__init__(f"{player_id}: {message}")


@dataclass(frozen=True)
class BattingCareer:
    """
    Cumulative career batting statistics.

    Attributes:
        matches: Matches batted in.
        runs: Total runs scored.
        fours: Total fours hit.
        sixes: Total sixes hit.
        strike_rate: Career strike rate (runs per 100 balls).
        runs_in_wins: Runs scored in matches the team won.
        high_pressure_runs: Runs scored in high-pressure situations.
    """

    matches: int
    runs: int
    fours: int = 0
    sixes: int = 0
    strike_rate: float = 0.0
    runs_in_wins: int = 0
    high_pressure_runs: int = 0


@dataclass(frozen=True)
class BowlingCareer:
    """
    Cumulative career bowling statistics.

    Attributes:
        matches: Matches bowled in.
        overs: Total overs bowled.
        economy: Career runs conceded per over.
        wickets: Total wickets taken.
        death_overs: Overs bowled in the death phase.
        death_economy: Runs conceded per over in the death phase.
        powerplay_wickets: Wickets taken in the powerplay.
    """

    matches: int
    overs: float
    economy: float
    wickets: int
    death_overs: float = 0.0
    death_economy: float = 0.0
    powerplay_wickets: int = 0


def _check_career(player_id: str, career: Union["BattingCareer", "BowlingCareer"]) -> None:
    """Reject career blocks that would poison downstream math."""
    if career.matches <= 0:
        raise InvalidStatsError(player_id, "career block has no matches")
    for f in fields(career):
        if getattr(career, f.name) < 0:
            raise InvalidStatsError(player_id, f"{f.name} cannot be negative")


@dataclass(frozen=True)
class PlayerStatRecord:
    """
    Immutable input record for a single player.

    Attributes:
        id: Unique identifier for the player.
        name: Player's full name.
        team: Franchise the player last represented.
        role: Batsman, bowler or all-rounder.
        nationality: Domestic or overseas quota class.
        age: Age in years.
        batting: Career batting block (required for batsmen and all-rounders).
        bowling: Career bowling block (required for bowlers and all-rounders).
        is_wicket_keeper: Explicit keeper flag when the source provides one.
    """

    id: str
    name: str
    team: str
    role: Role
    nationality: NationalityClass
    age: int
    batting: Optional[BattingCareer] = None
    bowling: Optional[BowlingCareer] = None
    is_wicket_keeper: Optional[bool] = None

    def __post_init__(self) -> None:
        """Validate role/career consistency after initialization."""
        if self.role in (Role.BATSMAN, Role.ALL_ROUNDER) and self.batting is None:
            raise InvalidStatsError(self.id, f"{self.role.value} requires batting stats")
        if self.role in (Role.BOWLER, Role.ALL_ROUNDER) and self.bowling is None:
            raise InvalidStatsError(self.id, f"{self.role.value} requires bowling stats")
        if self.age <= 0:
            raise InvalidStatsError(self.id, "age must be positive")
        if self.batting is not None:
            _check_career(self.id, self.batting)
        if self.bowling is not None:
            _check_career(self.id, self.bowling)

    @property
    def is_overseas(self) -> bool:
        """Check if player counts against the overseas quota."""
        return self.nationality == NationalityClass.OVERSEAS

    @property
    def sample_matches(self) -> int:
        """Matches used as the sample size for confidence weighting."""
        if self.batting is not None:
            return self.batting.matches
        return self.bowling.matches

"""Squad composition analytics: counts, gap diagnostics and best XI."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from ..config import SquadConfig
from ..models.player import NationalityClass, PlayerStatRecord, Role
from ..models.squad import RosterEntry


class GapPriority(Enum):
    """Severity of a squad gap, most severe first."""

    CRITICAL = 0
    HIGH = 1
    MEDIUM = 2
    LOW = 3


@dataclass(frozen=True)
class SquadComposition:
    """Aggregate roster counts by nationality class and role."""

    total: int
    domestic: int
    overseas: int
    batsmen: int
    bowlers: int
    all_rounders: int


@dataclass(frozen=True)
class SquadGap:
    """
    A positional need the roster does not yet cover.

    Attributes:
        priority: How urgently the gap should be filled.
        category: Short label for the need.
        current: Players currently meeting the need.
        needed: Players required to close the gap.
        description: Human-readable explanation.
    """

    priority: GapPriority
    category: str
    current: int
    needed: int
    description: str


@dataclass
class BestLineup:
    """
    Greedy best-XI projection.

    Attributes:
        keeper: Selected wicket-keeper, if the roster has one.
        openers: Two highest-WAR batsmen.
        middle_order: Next three batsmen by WAR.
        all_rounders: Top two all-rounders by WAR.
        bowlers: Highest-WAR bowlers filling the remaining places.
        overseas_count: Overseas players in the selection.
        is_valid: Whether the overseas cap is respected.
    """

    keeper: Optional[RosterEntry] = None
    openers: list[RosterEntry] = field(default_factory=list)
    middle_order: list[RosterEntry] = field(default_factory=list)
    all_rounders: list[RosterEntry] = field(default_factory=list)
    bowlers: list[RosterEntry] = field(default_factory=list)
    overseas_count: int = 0
    is_valid: bool = False

    @property
    def players(self) -> list[RosterEntry]:
        """Every selected player in batting-card order."""
        selected = list(self.openers)
        if self.keeper is not None:
            selected.append(self.keeper)
        return selected + self.middle_order + self.all_rounders + self.bowlers

    @property
    def total_players(self) -> int:
        """Number of players selected."""
        return len(self.players)


# Default name fragments for keeper detection when no explicit flag is set
KEEPER_NAME_HINTS = ("pant", "samson", "kishan", "dhoni")

# Name fragments the best XI accepts as keepers
LINEUP_KEEPER_NAME_HINTS = ("pant", "samson", "kishan")

KeeperPredicate = Callable[[PlayerStatRecord], bool]


def _matches_keeper(record: PlayerStatRecord, hints: Sequence[str]) -> bool:
    """
    Keeper check shared by the default predicates.

    Uses the record's explicit flag when present, otherwise falls back to
    matching name fragments among players with batting records.
    """
    if record.is_wicket_keeper is not None:
        return record.is_wicket_keeper
    if record.batting is None:
        return False
    name = record.name.lower()
    return any(hint in name for hint in hints)


def is_wicket_keeper_eligible(record: PlayerStatRecord) -> bool:
    """Default keeper check for gap diagnostics."""
    return _matches_keeper(record, KEEPER_NAME_HINTS)


def is_lineup_keeper(record: PlayerStatRecord) -> bool:
    """Default keeper check for the best XI."""
    return _matches_keeper(record, LINEUP_KEEPER_NAME_HINTS)


def get_composition(roster: Sequence[RosterEntry]) -> SquadComposition:
    """Count roster players by nationality class and role."""
    nationalities = Counter(entry.record.nationality for entry in roster)
    roles = Counter(entry.record.role for entry in roster)
    return SquadComposition(
        total=len(roster),
        domestic=nationalities[NationalityClass.DOMESTIC],
        overseas=nationalities[NationalityClass.OVERSEAS],
        batsmen=roles[Role.BATSMAN],
        bowlers=roles[Role.BOWLER],
        all_rounders=roles[Role.ALL_ROUNDER],
    )


def sort_gaps(gaps: Sequence[SquadGap]) -> list[SquadGap]:
    """Order gaps by severity, keeping rule order within a priority."""
    return sorted(gaps, key=lambda gap: gap.priority.value)


def get_gaps(
    roster: Sequence[RosterEntry],
    rules: SquadConfig,
    is_keeper: KeeperPredicate = is_wicket_keeper_eligible,
) -> list[SquadGap]:
    """
    Diagnose positional needs the roster does not cover.

    Args:
        roster: The current roster.
        rules: Squad rules supplying the profile thresholds.
        is_keeper: Predicate identifying keeper-eligible players.

    Returns:
        Gaps sorted most severe first.
    """
    records = [entry.record for entry in roster]

    death_bowlers = sum(
        1 for r in records
        if r.bowling is not None and r.bowling.death_overs > rules.death_bowler_overs
    )
    openers = sum(
        1 for r in records
        if r.batting is not None and r.batting.strike_rate > rules.opener_strike_rate
    )
    spinners = sum(
        1 for r in records
        if r.role == Role.BOWLER
        and r.bowling is not None
        and r.bowling.economy < rules.spinner_economy
    )
    all_rounders = sum(1 for r in records if r.role == Role.ALL_ROUNDER)
    keepers = sum(1 for r in records if is_keeper(r))

    checks = [
        (GapPriority.CRITICAL, "Death Bowling", death_bowlers, 2, "Need specialist death bowlers"),
        (GapPriority.HIGH, "Opening Batsmen", openers, 2, "Need quality opening batsmen"),
        (GapPriority.MEDIUM, "Spin Bowling", spinners, 2, "Need quality spinners"),
        (GapPriority.MEDIUM, "All-Rounders", all_rounders, 2, "Need all-round options for balance"),
        (GapPriority.CRITICAL, "Wicket-Keeper", keepers, 1, "Need at least one keeper-batsman"),
    ]

    gaps = [
        SquadGap(
            priority=priority,
            category=category,
            current=current,
            needed=needed,
            description=description,
        )
        for priority, category, current, needed, description in checks
        if current < needed
    ]
    return sort_gaps(gaps)


def _top_by_war(
    roster: Sequence[RosterEntry],
    role: Role,
    exclude: set[str],
    count: int,
) -> list[RosterEntry]:
    """Highest-WAR players of a role, roster order breaking ties."""
    pool = [e for e in roster if e.record.role == role and e.id not in exclude]
    return sorted(pool, key=lambda e: e.war, reverse=True)[:max(0, count)]


def get_best_lineup(
    roster: Sequence[RosterEntry],
    rules: SquadConfig,
    is_keeper: KeeperPredicate = is_lineup_keeper,
) -> Optional[BestLineup]:
    """
    Project a starting XI with a single greedy pass.

    Picks a keeper, five batsmen, two all-rounders and enough bowlers to
    fill the side. The overseas cap is reported, not enforced.

    Args:
        roster: The current roster.
        rules: Squad rules (lineup size and overseas cap).
        is_keeper: Predicate identifying keeper-eligible players.

    Returns:
        BestLineup, or None if the roster is smaller than a lineup.
    """
    if len(roster) < rules.lineup_size:
        return None

    lineup = BestLineup()
    lineup.keeper = next((e for e in roster if is_keeper(e.record)), None)
    taken = {lineup.keeper.id} if lineup.keeper is not None else set()

    batsmen = _top_by_war(roster, Role.BATSMAN, taken, 5)
    lineup.openers = batsmen[:2]
    lineup.middle_order = batsmen[2:5]
    lineup.all_rounders = _top_by_war(roster, Role.ALL_ROUNDER, taken, 2)

    bowlers_needed = rules.lineup_size - (
        len(batsmen) + len(lineup.all_rounders) + len(taken)
    )
    lineup.bowlers = _top_by_war(roster, Role.BOWLER, taken, bowlers_needed)

    lineup.overseas_count = sum(1 for e in lineup.players if e.is_overseas)
    lineup.is_valid = lineup.overseas_count <= rules.lineup_max_overseas
    return lineup

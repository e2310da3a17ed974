"""Auction engine: the query surface used by the presentation layer."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..analysis.composition import (
    BestLineup,
    KeeperPredicate,
    SquadComposition,
    SquadGap,
    get_best_lineup,
    get_composition,
    get_gaps,
    is_lineup_keeper,
    is_wicket_keeper_eligible,
)
from ..analysis.validator import PRICE_TOLERANCE, get_remaining_purse, get_spent
from ..analysis.valuation import value_players
from ..config import EngineConfig
from ..models.player import InvalidStatsError, PlayerStatRecord
from ..models.squad import RosterEntry, TransactionResult
from ..models.valuation import ValuedPlayer
from .persistence import (
    ROSTER_KEY,
    KeyValueStore,
    MemoryStore,
    StorageError,
    deserialize_roster,
    serialize_roster,
)
from .roster import RosterStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a user action, with a message to show verbatim."""

    success: bool
    message: str


class AuctionEngine:
    """
    Values a player pool and manages one squad built from it.

    Args:
        players: Player records from the input feed; never mutated.
        config: Valuation and squad configuration.
        store: Persistence collaborator for the roster.
        key: Key the roster is saved under.
        is_keeper: Predicate identifying keepers. When None, gaps and the
            best XI each use their own default.

    Raises:
        InvalidStatsError: If a record cannot be valued or IDs repeat.
    """

    def __init__(
        self,
        players: Iterable[PlayerStatRecord],
        config: Optional[EngineConfig] = None,
        store: Optional[KeyValueStore] = None,
        key: str = ROSTER_KEY,
        is_keeper: Optional[KeeperPredicate] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.store = store if store is not None else MemoryStore()
        self.key = key
        self.is_keeper = is_keeper

        self._valued = value_players(players, self.config.valuation)
        self._by_id: dict[str, ValuedPlayer] = {}
        for player in self._valued:
            if player.id in self._by_id:
                raise InvalidStatsError(player.id, "duplicate player id in feed")
            self._by_id[player.id] = player

        self.roster = RosterStore(self.config.squad)
        self._restore()

    def _restore(self) -> None:
        """Rebuild the roster from the store, revalidating each purchase."""
        try:
            data = self.store.load(self.key)
            if data is None:
                return
            picks = deserialize_roster(data)
        except StorageError as e:
            logger.warning("Could not load saved squad, starting empty: %s", e)
            return

        dropped = 0
        for pick in picks:
            player = self._by_id.get(pick.id)
            if player is None:
                logger.warning("Dropping saved player %s: not in player feed", pick.id)
                dropped += 1
                continue
            result = self.roster.add(player)
            if not result.accepted:
                logger.warning("Dropping saved player %s: %s", pick.id, result.reason)
                dropped += 1
                continue
            if pick.final_value is None:
                continue
            if abs(player.final_value - pick.final_value) > PRICE_TOLERANCE:
                logger.info(
                    "Price of %s changed since purchase: %.2f -> %.2f",
                    pick.id,
                    pick.final_value,
                    player.final_value,
                )

        logger.info("Restored squad of %d players", len(self.roster))
        if dropped:
            self._save()

    def _save(self) -> None:
        """Persist the roster; failures leave the in-memory roster authoritative."""
        try:
            self.store.save(self.key, serialize_roster(self.roster.snapshot()))
        except StorageError as e:
            logger.warning("Could not save squad: %s", e)

    def _commit(self, result: TransactionResult) -> ActionResult:
        if result.accepted:
            self._save()
        return ActionResult(success=result.accepted, message=result.reason)

    def get_valued_players(self) -> list[ValuedPlayer]:
        """Every player in feed order with its valuation."""
        return list(self._valued)

    def get_player(self, player_id: str) -> Optional[ValuedPlayer]:
        """Look up a valued player by ID."""
        return self._by_id.get(player_id)

    def get_squad(self) -> tuple[RosterEntry, ...]:
        """Current roster in purchase order."""
        return self.roster.snapshot()

    def add_player(self, player_id: str) -> ActionResult:
        """Buy a player into the squad."""
        player = self._by_id.get(player_id)
        if player is None:
            return ActionResult(success=False, message=f"Unknown player {player_id}")
        return self._commit(self.roster.add(player))

    def remove_player(self, player_id: str) -> ActionResult:
        """Release a player from the squad."""
        return self._commit(self.roster.remove(player_id))

    def clear_roster(self) -> ActionResult:
        """Release every player from the squad."""
        return self._commit(self.roster.clear())

    def get_spent(self) -> float:
        """Purse spent so far."""
        return get_spent(self.roster.snapshot())

    def get_remaining(self) -> float:
        """Purse still available."""
        return get_remaining_purse(self.roster.snapshot(), self.config.squad)

    def get_composition(self) -> SquadComposition:
        """Squad counts by nationality class and role."""
        return get_composition(self.roster.snapshot())

    def get_gaps(self) -> list[SquadGap]:
        """Positional needs, most severe first."""
        return get_gaps(
            self.roster.snapshot(),
            self.config.squad,
            self.is_keeper or is_wicket_keeper_eligible,
        )

    def get_best_lineup(self) -> Optional[BestLineup]:
        """Greedy best XI, or None while the squad is too small."""
        return get_best_lineup(
            self.roster.snapshot(),
            self.config.squad,
            self.is_keeper or is_lineup_keeper,
        )

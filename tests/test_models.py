"""Tests for data models."""

import pytest

from warroom.models import (
    BattingCareer,
    BowlingCareer,
    InvalidStatsError,
    NationalityClass,
    PlayerStatRecord,
    Role,
    TransactionResult,
    SquadValidationError,
    ValuationResult,
    ValuedPlayer,
    ValueGrade,
    format_crores,
)


BATTING = BattingCareer(matches=14, runs=400, fours=30, sixes=15, strike_rate=140.0)
BOWLING = BowlingCareer(matches=14, overs=50, economy=7.5, wickets=15)


class TestPlayerStatRecord:
    """Tests for PlayerStatRecord model."""

    def test_create_batsman(self) -> None:
        """Test basic batsman creation."""
        record = PlayerStatRecord(
            id="p1",
            name="Virat Kohli",
            team="RCB",
            role=Role.BATSMAN,
            nationality=NationalityClass.DOMESTIC,
            age=36,
            batting=BATTING,
        )
        assert record.name == "Virat Kohli"
        assert record.bowling is None
        assert record.is_overseas is False
        assert record.is_wicket_keeper is None

    def test_overseas_flag(self) -> None:
        """Test overseas nationality check."""
        record = PlayerStatRecord(
            id="p1",
            name="Rashid Khan",
            team="GT",
            role=Role.BOWLER,
            nationality=NationalityClass.OVERSEAS,
            age=26,
            bowling=BOWLING,
        )
        assert record.is_overseas is True

    def test_batsman_requires_batting(self) -> None:
        """A batsman without batting stats is rejected."""
        with pytest.raises(InvalidStatsError, match="requires batting"):
            PlayerStatRecord(
                id="p1",
                name="No Bat",
                team="X",
                role=Role.BATSMAN,
                nationality=NationalityClass.DOMESTIC,
                age=25,
                bowling=BOWLING,
            )

    def test_bowler_requires_bowling(self) -> None:
        """A bowler without bowling stats is rejected."""
        with pytest.raises(InvalidStatsError, match="requires bowling"):
            PlayerStatRecord(
                id="p1",
                name="No Ball",
                team="X",
                role=Role.BOWLER,
                nationality=NationalityClass.DOMESTIC,
                age=25,
                batting=BATTING,
            )

    def test_all_rounder_requires_both(self) -> None:
        """An all-rounder needs both career blocks."""
        with pytest.raises(InvalidStatsError):
            PlayerStatRecord(
                id="p1",
                name="Half Rounder",
                team="X",
                role=Role.ALL_ROUNDER,
                nationality=NationalityClass.DOMESTIC,
                age=25,
                batting=BATTING,
            )

    def test_zero_matches_rejected(self) -> None:
        """A career block with no matches is a data error."""
        with pytest.raises(InvalidStatsError) as exc_info:
            PlayerStatRecord(
                id="zero",
                name="Zero",
                team="X",
                role=Role.BATSMAN,
                nationality=NationalityClass.DOMESTIC,
                age=25,
                batting=BattingCareer(matches=0, runs=0),
            )
        assert exc_info.value.player_id == "zero"

    def test_negative_counts_rejected(self) -> None:
        """Negative counting stats are rejected."""
        with pytest.raises(InvalidStatsError, match="runs cannot be negative"):
            PlayerStatRecord(
                id="p1",
                name="Negative",
                team="X",
                role=Role.BATSMAN,
                nationality=NationalityClass.DOMESTIC,
                age=25,
                batting=BattingCareer(matches=10, runs=-5),
            )

    def test_sample_matches_prefers_batting(self) -> None:
        """Sample size comes from batting matches when present."""
        record = PlayerStatRecord(
            id="p1",
            name="All Round",
            team="X",
            role=Role.ALL_ROUNDER,
            nationality=NationalityClass.DOMESTIC,
            age=28,
            batting=BattingCareer(matches=40, runs=800),
            bowling=BowlingCareer(matches=35, overs=100, economy=8.0, wickets=30),
        )
        assert record.sample_matches == 40

    def test_record_is_immutable(self) -> None:
        """Records cannot be changed after creation."""
        record = PlayerStatRecord(
            id="p1",
            name="Frozen",
            team="X",
            role=Role.BATSMAN,
            nationality=NationalityClass.DOMESTIC,
            age=25,
            batting=BATTING,
        )
        with pytest.raises(AttributeError):
            record.age = 30


class TestValuationResult:
    """Tests for ValuationResult and ValuedPlayer."""

    def test_rounded(self) -> None:
        """Rounding is applied to every field."""
        result = ValuationResult(
            war=1.23456,
            base_value=3.08641,
            adjusted_base=4.0,
            age_multiplier=1.05,
            scarcity_multiplier=1.35,
            form_multiplier=1.1,
            final_value=6.23699,
        )
        rounded = result.rounded()
        assert rounded.war == 1.23
        assert rounded.base_value == 3.09
        assert rounded.final_value == 6.24
        assert result.final_value == 6.23699

    def test_grade(self) -> None:
        """Grade follows WAR thresholds."""
        assert ValueGrade.from_war(2.5) == ValueGrade.ELITE
        assert ValueGrade.from_war(2.0) == ValueGrade.ELITE
        assert ValueGrade.from_war(1.7) == ValueGrade.VERY_GOOD
        assert ValueGrade.from_war(1.0) == ValueGrade.GOOD
        assert ValueGrade.from_war(0.5) == ValueGrade.AVERAGE
        assert ValueGrade.from_war(0.1) == ValueGrade.BELOW_AVERAGE

    def test_valued_player_delegates(self) -> None:
        """ValuedPlayer exposes record identity and valuation."""
        record = PlayerStatRecord(
            id="p9",
            name="Delegate",
            team="X",
            role=Role.BATSMAN,
            nationality=NationalityClass.OVERSEAS,
            age=25,
            batting=BATTING,
        )
        result = ValuationResult(
            war=1.5,
            base_value=3.75,
            adjusted_base=4.0,
            age_multiplier=1.0,
            scarcity_multiplier=1.0,
            form_multiplier=1.0,
            final_value=4.0,
        )
        player = ValuedPlayer(record=record, valuation=result)
        assert player.id == "p9"
        assert player.name == "Delegate"
        assert player.final_value == 4.0
        assert player.war == 1.5
        assert player.is_overseas is True


class TestTransactionResult:
    """Tests for TransactionResult."""

    def test_error_code(self) -> None:
        """error_code returns the first error's code."""
        result = TransactionResult(
            accepted=False,
            reason="full",
            errors=(SquadValidationError(code="SQUAD_FULL", message="full"),),
        )
        assert result.error_code == "SQUAD_FULL"

    def test_accepted_has_no_code(self) -> None:
        """Accepted transactions carry no error code."""
        assert TransactionResult(accepted=True).error_code is None


def test_format_crores() -> None:
    """Currency is formatted to two decimals in crores."""
    assert format_crores(12.345) == "₹12.35 Cr"
    assert format_crores(0) == "₹0.00 Cr"

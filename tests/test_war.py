"""Tests for stat normalization and the WAR calculator."""

import pytest

from warroom.analysis.normalizer import normalize_batting, normalize_bowling, season_factor
from warroom.analysis.war import (
    all_rounder_war,
    batting_runs_created,
    batting_war,
    bowling_runs_saved,
    bowling_war,
    calculate_war,
    strike_rate_bonus,
)
from warroom.config import ValuationConfig
from warroom.models import (
    BattingCareer,
    BowlingCareer,
    InvalidStatsError,
    NationalityClass,
    PlayerStatRecord,
    Role,
)


CONFIG = ValuationConfig()

# One season of batting: BRC = 500 + 30 + 5 + 20 + 15 = 570
SEASON_BATTING = BattingCareer(
    matches=14,
    runs=500,
    fours=40,
    sixes=20,
    strike_rate=160.0,
    runs_in_wins=200,
    high_pressure_runs=100,
)

# One season of bowling: BRS = 100 + 120 + 5 + 10 = 235
SEASON_BOWLING = BowlingCareer(
    matches=14,
    overs=50,
    economy=7.0,
    wickets=20,
    death_overs=10,
    death_economy=9.5,
    powerplay_wickets=5,
)


class TestNormalizer:
    """Tests for career-to-season normalization."""

    def test_season_factor(self) -> None:
        """Factor scales career matches to a season."""
        assert season_factor(14, CONFIG) == 1.0
        assert season_factor(28, CONFIG) == 0.5
        assert season_factor(7, CONFIG) == 2.0

    def test_zero_matches_raises(self) -> None:
        """Zero matches is a precondition violation, not a division by zero."""
        with pytest.raises(InvalidStatsError) as exc_info:
            season_factor(0, CONFIG, player_id="p0")
        assert exc_info.value.player_id == "p0"

    def test_batting_scaled(self) -> None:
        """Counting stats scale, rates do not."""
        career = BattingCareer(
            matches=28,
            runs=1000,
            fours=80,
            sixes=40,
            strike_rate=145.0,
            runs_in_wins=600,
            high_pressure_runs=200,
        )
        season = normalize_batting(career, CONFIG)
        assert season.runs == 500
        assert season.boundaries == 60
        assert season.strike_rate == 145.0
        assert season.runs_in_wins == 300
        assert season.high_pressure_runs == 100

    def test_bowling_scaled(self) -> None:
        """Counting stats scale, economies do not."""
        career = BowlingCareer(
            matches=42,
            overs=150,
            economy=7.5,
            wickets=60,
            death_overs=30,
            death_economy=9.0,
            powerplay_wickets=12,
        )
        season = normalize_bowling(career, CONFIG)
        assert season.overs == pytest.approx(50)
        assert season.wickets == pytest.approx(20)
        assert season.death_overs == pytest.approx(10)
        assert season.powerplay_wickets == pytest.approx(4)
        assert season.economy == 7.5
        assert season.death_economy == 9.0

    def test_respects_configured_season_length(self) -> None:
        """A longer season scales totals up."""
        config = ValuationConfig(matches_per_season=16)
        season = normalize_batting(BattingCareer(matches=8, runs=200), config)
        assert season.runs == 400


class TestStrikeRateBonus:
    """Tests for the strike-rate bonus."""

    def test_no_bonus_at_threshold(self) -> None:
        """No bonus at or below the threshold."""
        assert strike_rate_bonus(150.0, CONFIG) == 0.0
        assert strike_rate_bonus(120.0, CONFIG) == 0.0

    def test_linear_above_threshold(self) -> None:
        """Bonus grows linearly above the threshold."""
        assert strike_rate_bonus(170.0, CONFIG) == pytest.approx(0.02)

    def test_capped(self) -> None:
        """Bonus never exceeds the cap."""
        assert strike_rate_bonus(400.0, CONFIG) == CONFIG.strike_rate_bonus_cap


class TestBatting:
    """Tests for Batting Runs Created and batting WAR."""

    def test_runs_created(self) -> None:
        """All bonuses add onto season runs."""
        season = normalize_batting(SEASON_BATTING, CONFIG)
        assert batting_runs_created(season, CONFIG) == pytest.approx(570)

    def test_batting_war(self) -> None:
        """WAR is runs above replacement per win."""
        assert batting_war(SEASON_BATTING, CONFIG) == pytest.approx(290 / 22)

    def test_below_replacement_clamped(self) -> None:
        """A below-replacement batsman has zero WAR, never negative."""
        career = BattingCareer(matches=14, runs=100, strike_rate=110.0)
        assert batting_war(career, CONFIG) == 0.0

    def test_missing_career(self) -> None:
        """No batting block means no batting WAR."""
        assert batting_war(None, CONFIG) == 0.0

    def test_replacement_level_configurable(self) -> None:
        """Lowering the replacement level raises WAR."""
        config = ValuationConfig(replacement_level_batting=170.0)
        assert batting_war(SEASON_BATTING, config) == pytest.approx(400 / 22)


class TestBowling:
    """Tests for Bowling Runs Saved and bowling WAR."""

    def test_runs_saved(self) -> None:
        """Economy, wickets, death and powerplay components add up."""
        season = normalize_bowling(SEASON_BOWLING, CONFIG)
        assert bowling_runs_saved(season, CONFIG) == pytest.approx(235)

    def test_bowling_war(self) -> None:
        """WAR is runs above replacement per win."""
        assert bowling_war(SEASON_BOWLING, CONFIG) == pytest.approx(85 / 22)

    def test_no_death_premium_without_death_overs(self) -> None:
        """The death premium needs death overs."""
        career = BowlingCareer(
            matches=14, overs=50, economy=7.0, wickets=20, death_economy=5.0
        )
        season = normalize_bowling(career, CONFIG)
        assert bowling_runs_saved(season, CONFIG) == pytest.approx(220)

    def test_expensive_death_bowling_not_penalized(self) -> None:
        """Death economy worse than league average adds nothing."""
        career = BowlingCareer(
            matches=14, overs=50, economy=7.0, wickets=20,
            death_overs=10, death_economy=13.0,
        )
        season = normalize_bowling(career, CONFIG)
        assert bowling_runs_saved(season, CONFIG) == pytest.approx(220)

    def test_expensive_bowler_clamped(self) -> None:
        """A bowler conceding heavily has zero WAR."""
        career = BowlingCareer(matches=14, overs=50, economy=11.0, wickets=5)
        assert bowling_war(career, CONFIG) == 0.0


class TestAllRounder:
    """Tests for combined all-rounder WAR."""

    def test_flexibility_premium(self) -> None:
        """Combined WAR carries the premium."""
        assert all_rounder_war(1.0, 2.0, CONFIG) == pytest.approx(3.0 * 1.17)

    def test_beats_either_discipline(self) -> None:
        """An all-rounder is worth more than either half alone."""
        bat = batting_war(SEASON_BATTING, CONFIG)
        bowl = bowling_war(SEASON_BOWLING, CONFIG)
        combined = all_rounder_war(bat, bowl, CONFIG)
        assert combined > bat
        assert combined > bowl


class TestCalculateWar:
    """Tests for role-selected WAR."""

    def _record(self, role: Role, **kwargs) -> PlayerStatRecord:
        return PlayerStatRecord(
            id="p1",
            name="Test Player",
            team="X",
            role=role,
            nationality=NationalityClass.DOMESTIC,
            age=28,
            **kwargs,
        )

    def test_batsman_uses_batting(self) -> None:
        """Batsmen are valued on batting alone."""
        record = self._record(Role.BATSMAN, batting=SEASON_BATTING, bowling=SEASON_BOWLING)
        war = calculate_war(record, CONFIG)
        assert war.total == pytest.approx(290 / 22)
        assert war.bowling == pytest.approx(85 / 22)

    def test_bowler_uses_bowling(self) -> None:
        """Bowlers are valued on bowling alone."""
        record = self._record(Role.BOWLER, bowling=SEASON_BOWLING)
        war = calculate_war(record, CONFIG)
        assert war.total == pytest.approx(85 / 22)
        assert war.batting == 0.0

    def test_all_rounder_combines(self) -> None:
        """All-rounders combine both with the premium."""
        record = self._record(Role.ALL_ROUNDER, batting=SEASON_BATTING, bowling=SEASON_BOWLING)
        war = calculate_war(record, CONFIG)
        assert war.total == pytest.approx((290 / 22 + 85 / 22) * 1.17)

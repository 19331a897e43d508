"""下注配置单元测试."""

from decimal import Decimal

import pytest

from casino_sim.core import BettingConfig, DEFAULT_ODDS_TIERS, GameConfigError


@pytest.mark.unit
@pytest.mark.fast
class TestBettingConfig:
    """下注配置测试类."""

    def test_default_config(self):
        """测试默认配置."""
        config = BettingConfig.default()

        assert config.rtp == 0.95
        assert config.min_bet == Decimal("5")
        assert config.starting_balance == Decimal("100")
        assert config.odds_tiers == DEFAULT_ODDS_TIERS
        assert config.player_id == "player1"
        assert config.random_seed is None
        assert config.lowest_multiplier == Decimal("1.2")

    def test_numeric_values_converted(self):
        config = BettingConfig(min_bet=2.5, starting_balance=10)
        assert config.min_bet == Decimal("2.5")
        assert config.starting_balance == Decimal("10")

    def test_tiers_converted(self):
        config = BettingConfig(odds_tiers=((10, 1.2), (None, "2")))
        assert config.odds_tiers == ((Decimal("10"), Decimal("1.2")), (None, Decimal("2")))

    @pytest.mark.parametrize("rtp", [0, -0.5, 1.01])
    def test_invalid_rtp(self, rtp):
        with pytest.raises(GameConfigError):
            BettingConfig(rtp=rtp)

    def test_rtp_above_lowest_multiplier(self):
        """获胜概率不能超过1."""
        tiers = ((Decimal("10"), Decimal("0.9")), (None, Decimal("2")))
        with pytest.raises(GameConfigError):
            BettingConfig(rtp=0.95, odds_tiers=tiers)

    def test_invalid_min_bet(self):
        with pytest.raises(GameConfigError):
            BettingConfig(min_bet=0)

    def test_negative_starting_balance(self):
        with pytest.raises(GameConfigError):
            BettingConfig(starting_balance=-1)

    @pytest.mark.parametrize("kwargs", [
        {"min_bet": "5.005"},
        {"starting_balance": "100.001"},
        {"starting_balance": "abc"},
    ])
    def test_amounts_must_be_whole_cents(self, kwargs):
        with pytest.raises(GameConfigError):
            BettingConfig(**kwargs)

    def test_debug_flag_is_not_config(self):
        """调试开关只影响日志级别，不属于下注配置."""
        with pytest.raises(TypeError):
            BettingConfig(debug_mode=True)

    def test_zero_starting_balance_allowed(self):
        assert BettingConfig(starting_balance=0).starting_balance == Decimal("0")

    def test_empty_player_id(self):
        with pytest.raises(GameConfigError):
            BettingConfig(player_id="")

    @pytest.mark.parametrize("tiers", [
        (),
        ((Decimal("10"), Decimal("1.2")),),
        ((Decimal("50"), Decimal("1.2")), (Decimal("10"), Decimal("1.5")), (None, Decimal("2"))),
        ((Decimal("10"), Decimal("1.2")), (None, Decimal("0"))),
        ((None, Decimal("1.2")), (None, Decimal("2"))),
    ])
    def test_invalid_tiers(self, tiers):
        with pytest.raises(GameConfigError):
            BettingConfig(odds_tiers=tiers)

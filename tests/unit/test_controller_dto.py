"""数据传输对象单元测试."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from casino_sim.controller import PlayerSnapshot, RoundResult, SessionSettings, SessionSummary
from casino_sim.core import BettingConfig


@pytest.mark.unit
@pytest.mark.fast
class TestDTOValidation:
    """DTO校验测试类."""

    def test_player_snapshot_rejects_negative_balance(self):
        with pytest.raises(ValidationError):
            PlayerSnapshot(player_id="p", balance=Decimal("-1"), min_bet=Decimal("5"), max_bet=Decimal("0"))

    def test_player_snapshot_can_bet(self):
        snapshot = PlayerSnapshot(player_id="p", balance=Decimal("4"), min_bet=Decimal("5"), max_bet=Decimal("4"))
        assert not snapshot.can_bet

    def test_round_result_rejects_zero_stake(self):
        with pytest.raises(ValidationError):
            RoundResult(
                round_number=1, player_id="p", stake=Decimal("0"), odds=Decimal("1.2"),
                won=False, payout=Decimal("0"), balance_after=Decimal("10"),
                win_chance=0.5, rtp_percent=60.0,
            )

    def test_summary_without_rounds(self):
        summary = SessionSummary(
            player_id="p", rounds_played=0, rounds_won=0, total_wagered=Decimal("0"),
            total_paid_out=Decimal("0"), total_deposited=Decimal("0"), final_balance=Decimal("100"),
        )
        assert summary.observed_rtp_percent == 0.0
        assert summary.net_result == Decimal("0")


@pytest.mark.unit
@pytest.mark.fast
class TestSessionSettings:
    """会话设置测试类."""

    def test_defaults_match_config_defaults(self):
        config = SessionSettings().to_config()
        default = BettingConfig.default()

        assert config.rtp == default.rtp
        assert config.min_bet == default.min_bet
        assert config.starting_balance == default.starting_balance
        assert config.player_id == default.player_id

    def test_player_id_is_stripped(self):
        assert SessionSettings(player_id="  alice ").player_id == "alice"

    def test_blank_player_id_rejected(self):
        with pytest.raises(ValidationError):
            SessionSettings(player_id="   ")

    @pytest.mark.parametrize("rtp", [0, 1.5])
    def test_rtp_range(self, rtp):
        with pytest.raises(ValidationError):
            SessionSettings(rtp=rtp)

    def test_seed_carried_to_config(self):
        assert SessionSettings(random_seed=3).to_config().random_seed == 3

    def test_rtp_upper_bound_accepted(self):
        assert SessionSettings(rtp=1.0).to_config().rtp == 1.0

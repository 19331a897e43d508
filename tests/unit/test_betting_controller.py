"""下注控制器单元测试.

测试回合流程、失败回合的余额回滚、存款和会话统计。
"""

from decimal import Decimal

import pytest

from casino_sim.controller import BettingController, RoundResult
from casino_sim.core import (
    BettingConfig, EventType, InsufficientBalanceError, InvalidAmountError,
    RandomSourceError, RandomSourceKind, SeededRandomSource
)


@pytest.mark.unit
@pytest.mark.fast
class TestBettingController:
    """下注控制器测试类."""

    def test_default_construction(self):
        """测试默认配置创建控制器."""
        controller = BettingController()

        snapshot = controller.get_snapshot()
        assert snapshot.player_id == "player1"
        assert snapshot.balance == Decimal("100")
        assert snapshot.min_bet == Decimal("5")
        assert snapshot.max_bet == Decimal("100")
        assert snapshot.can_bet

    def test_create_bet(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        bet = controller.create_bet(Decimal("20"))
        assert bet.odds == Decimal("1.5")
        assert controller.balance == Decimal("100")

    def test_winning_round(self, make_controller, sequence_rng, win_draw):
        """余额100，下注20，赢后余额110."""
        controller = make_controller(sequence_rng(win_draw))

        result = controller.play_round(Decimal("20"))

        assert isinstance(result, RoundResult)
        assert result.round_number == 1
        assert result.won
        assert result.odds == Decimal("1.5")
        assert result.payout == Decimal("30")
        assert result.balance_after == Decimal("110")
        assert result.net_result == Decimal("10")
        assert result.rtp_percent == pytest.approx(95.0)
        assert controller.balance == Decimal("110")

    def test_losing_round(self, make_controller, sequence_rng, loss_draw):
        """余额100，下注20，输后余额80."""
        controller = make_controller(sequence_rng(loss_draw))

        result = controller.play_round(Decimal("20"))

        assert not result.won
        assert result.payout == Decimal("0")
        assert controller.balance == Decimal("80")

    def test_invalid_amount(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        with pytest.raises(InvalidAmountError):
            controller.play_round(Decimal("0"))
        assert controller.balance == Decimal("100")

    def test_insufficient_balance(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        with pytest.raises(InsufficientBalanceError):
            controller.play_round(Decimal("150"))
        assert controller.balance == Decimal("100")

    def test_random_failure_rolls_back_stake(self, make_controller, failing_rng, event_bus):
        """随机源失败时本回合中止，余额恢复到下注前."""
        controller = make_controller(failing_rng)

        with pytest.raises(RandomSourceError):
            controller.play_round(Decimal("20"))

        assert controller.balance == Decimal("100")
        assert controller.get_summary().rounds_played == 0
        aborted = event_bus.get_event_history(EventType.ROUND_ABORTED)
        assert len(aborted) == 1
        assert aborted[0].data["stake"] == Decimal("20")

    def test_session_continues_after_aborted_round(self, make_controller, sequence_rng, win_draw):
        controller = make_controller(sequence_rng(1.5, win_draw))

        with pytest.raises(RandomSourceError):
            controller.play_round(Decimal("10"))
        result = controller.play_round(Decimal("10"))

        assert result.round_number == 1
        assert controller.balance == Decimal("102")

    def test_events_emitted(self, make_controller, sequence_rng, win_draw, event_bus):
        controller = make_controller(sequence_rng(win_draw))
        controller.play_round(Decimal("10"))

        types = [e.event_type for e in event_bus.get_event_history()]
        assert types == [EventType.BET_PLACED, EventType.ROUND_RESOLVED]

    def test_deposit(self, make_controller, sequence_rng, event_bus):
        """测试存款."""
        controller = make_controller(sequence_rng(), balance="3")
        assert controller.needs_deposit()

        snapshot = controller.deposit(Decimal("50"))

        assert snapshot.balance == Decimal("53")
        assert not controller.needs_deposit()
        assert controller.get_summary().total_deposited == Decimal("50")
        assert event_bus.get_event_history(EventType.DEPOSIT_MADE)[0].data["amount"] == Decimal("50")

    def test_needs_deposit_boundary(self, make_controller, sequence_rng):
        """余额恰好等于最小下注时仍可下注."""
        assert not make_controller(sequence_rng(), balance="5").needs_deposit()
        assert make_controller(sequence_rng(), balance="4.99").needs_deposit()

    def test_oversized_deposit_leaves_balance(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        with pytest.raises(InvalidAmountError):
            controller.deposit(Decimal("1e28"))
        assert controller.balance == Decimal("100")
        assert controller.get_summary().total_deposited == Decimal("0")

    def test_invalid_deposit(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        with pytest.raises(InvalidAmountError):
            controller.deposit(Decimal("-10"))
        assert controller.balance == Decimal("100")

    def test_max_bet_is_balance(self, make_controller, sequence_rng, loss_draw):
        controller = make_controller(sequence_rng(loss_draw))
        controller.play_round(Decimal("30"))
        assert controller.max_bet() == Decimal("70")

    def test_summary(self, make_controller, sequence_rng, win_draw, loss_draw):
        """测试会话汇总."""
        controller = make_controller(sequence_rng(win_draw, loss_draw, win_draw))
        controller.play_round(Decimal("10"))   # +12
        controller.play_round(Decimal("20"))   # 0
        controller.play_round(Decimal("60"))   # +120

        summary = controller.get_summary()
        assert summary.rounds_played == 3
        assert summary.rounds_won == 2
        assert summary.total_wagered == Decimal("90")
        assert summary.total_paid_out == Decimal("132")
        assert summary.net_result == Decimal("42")
        assert summary.final_balance == Decimal("142")
        assert summary.observed_rtp_percent == pytest.approx(132 / 90 * 100)

    def test_run_simulation_does_not_touch_balance(self, make_controller, sequence_rng):
        controller = make_controller(sequence_rng())
        report = controller.run_simulation(1000, rng=SeededRandomSource(1))

        assert report.iterations == 1000
        assert report.source == RandomSourceKind.SEEDED
        assert controller.balance == Decimal("100")

    def test_run_simulation_with_custom_source(self, make_controller, sequence_rng, loss_draw):
        controller = make_controller(sequence_rng())
        report = controller.run_simulation(2, rng=sequence_rng(loss_draw, loss_draw))

        assert report.source == RandomSourceKind.CUSTOM
        assert report.rounds_won == 0
        assert report.rtp_percent == 0.0

    def test_run_simulation_defaults_to_config_seed(self):
        config = BettingConfig(random_seed=5)
        first = BettingController(config=config).run_simulation(500)
        second = BettingController(config=config).run_simulation(500)
        assert first.total_returned == second.total_returned

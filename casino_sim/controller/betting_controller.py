"""
下注游戏控制器.

这个模块提供了下注模拟器的主要控制逻辑，作为核心逻辑层和UI层之间的桥梁。
控制器持有唯一的玩家对象，负责下注、结算、存款和会话统计。
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core import (
    Bet, BettingConfig, EventBus, EventType, Player, RandomSource, RandomSourceKind,
    RandomSourceError, RoundResolver, create_player, create_random_source,
    simulate_rtp, to_amount
)
from .decorators import atomic, logged_action
from .dto import PlayerSnapshot, RoundResult, SessionSummary, SimulationReport


@dataclass
class SessionStats:
    """会话累计统计，只保存汇总数据."""

    rounds_played: int = 0
    rounds_won: int = 0
    total_wagered: Decimal = Decimal("0")
    total_paid_out: Decimal = Decimal("0")
    total_deposited: Decimal = Decimal("0")


class BettingController:
    """下注游戏控制器.

    这个类是游戏的主要控制器，负责：
    - 持有玩家余额状态
    - 创建下注并结算回合
    - 处理存款
    - 提供状态快照和会话汇总给UI层

    控制器采用依赖注入设计，支持自定义玩家、随机源、事件总线和日志记录器。
    """

    def __init__(
        self,
        config: Optional[BettingConfig] = None,
        player: Optional[Player] = None,
        rng: Optional[RandomSource] = None,
        logger: Optional[logging.Logger] = None,
        event_bus: Optional[EventBus] = None
    ):
        """初始化控制器.

        Args:
            config: 下注配置，如果为None则使用默认配置
            player: 玩家对象，如果为None则按配置创建
            rng: 均匀随机源，如果为None则按配置创建
            logger: 日志记录器，如果为None则创建默认记录器
            event_bus: 事件总线，如果为None则创建新的事件总线
        """
        self._config = config or BettingConfig.default()
        self._player = player or create_player(self._config)
        self._rng = rng or create_random_source(self._config)
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = event_bus or EventBus(logger=self._logger)
        self._resolver = RoundResolver(self._config.rtp, logger=self._logger)
        self._stats = SessionStats()

    @property
    def config(self) -> BettingConfig:
        return self._config

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def balance(self) -> Decimal:
        """玩家当前余额."""
        return self._player.balance

    def max_bet(self) -> Decimal:
        """最大下注，等于当前余额."""
        return self._player.balance

    def needs_deposit(self) -> bool:
        """余额是否低于最小下注."""
        return not self._player.can_afford(self._config.min_bet)

    def create_bet(self, amount) -> Bet:
        """按配置的赔率档位创建下注.

        Args:
            amount: 下注金额

        Returns:
            新的下注对象
        """
        return Bet.create(self._player.player_id, amount, self._config)

    @atomic
    def play_round(self, amount) -> RoundResult:
        """进行一个回合：扣除本金、抽取随机数、结算派彩.

        Args:
            amount: 下注金额

        Returns:
            回合结果

        Raises:
            InvalidAmountError: 下注金额不为正数
            InsufficientBalanceError: 下注金额超过余额
            RandomSourceError: 随机源失败，本回合中止且余额恢复
        """
        bet = self.create_bet(amount)
        self._player.place_bet(bet.stake)

        self._event_bus.emit_simple(
            EventType.BET_PLACED,
            player_id=bet.player_id,
            stake=bet.stake,
            odds=bet.odds
        )
        self._logger.info(f"玩家{bet.player_id}下注 {bet.stake:.2f}, 赔率 {bet.odds:.2f}")

        try:
            outcome = self._resolver.resolve(self._player, bet, self._rng)
        except RandomSourceError as e:
            self._logger.error(f"回合中止: {e}")
            self._event_bus.emit_simple(
                EventType.ROUND_ABORTED,
                player_id=bet.player_id,
                stake=bet.stake,
                error=str(e)
            )
            raise

        self._stats.rounds_played += 1
        self._stats.total_wagered += bet.stake
        if outcome.won:
            self._stats.rounds_won += 1
            self._stats.total_paid_out += outcome.payout

        result = RoundResult(
            round_number=self._stats.rounds_played,
            player_id=bet.player_id,
            stake=bet.stake,
            odds=bet.odds,
            won=outcome.won,
            payout=outcome.payout,
            balance_after=self._player.balance,
            win_chance=outcome.win_chance,
            rtp_percent=bet.rtp_percent(self._config.rtp),
        )

        self._event_bus.emit_simple(
            EventType.ROUND_RESOLVED,
            player_id=bet.player_id,
            won=outcome.won,
            payout=outcome.payout,
            balance=self._player.balance
        )
        self._logger.info(
            f"第{result.round_number}回合{'获胜' if result.won else '失败'}, "
            f"派彩 {result.payout:.2f}, 余额 {result.balance_after:.2f}"
        )
        return result

    @logged_action("存款")
    def deposit(self, amount) -> PlayerSnapshot:
        """玩家存款.

        Args:
            amount: 存款金额

        Returns:
            存款后的玩家快照

        Raises:
            InvalidAmountError: 存款金额不为正数
        """
        amount = to_amount(amount)
        self._player.deposit(amount)
        self._stats.total_deposited += amount

        self._event_bus.emit_simple(
            EventType.DEPOSIT_MADE,
            player_id=self._player.player_id,
            amount=amount,
            balance=self._player.balance
        )
        self._logger.info(f"玩家{self._player.player_id}存款 {amount:.2f}, 余额 {self._player.balance:.2f}")
        return self.get_snapshot()

    @logged_action("RTP模拟")
    def run_simulation(self, iterations: int, rng: Optional[RandomSource] = None) -> SimulationReport:
        """按当前配置运行蒙特卡洛RTP模拟，不影响玩家余额.

        Args:
            iterations: 模拟回合数
            rng: 模拟使用的随机源，如果为None则按配置创建新的随机源

        Returns:
            模拟报告
        """
        rng = rng or create_random_source(self._config)
        stats = simulate_rtp(self._config, iterations, rng)
        return SimulationReport(
            iterations=stats.iterations,
            rtp_constant=self._config.rtp,
            rounds_won=stats.rounds_won,
            total_wagered=stats.total_wagered,
            total_returned=stats.total_returned,
            rtp_percent=stats.rtp_percent,
            average_net=stats.average_net,
            source=getattr(rng, "kind", RandomSourceKind.CUSTOM),
        )

    def get_snapshot(self) -> PlayerSnapshot:
        """获取当前玩家状态的快照.

        Returns:
            玩家快照，可以安全地传递给UI层
        """
        return PlayerSnapshot(
            player_id=self._player.player_id,
            balance=self._player.balance,
            min_bet=self._config.min_bet,
            max_bet=self.max_bet(),
        )

    def get_summary(self) -> SessionSummary:
        """获取会话汇总."""
        return SessionSummary(
            player_id=self._player.player_id,
            rounds_played=self._stats.rounds_played,
            rounds_won=self._stats.rounds_won,
            total_wagered=self._stats.total_wagered,
            total_paid_out=self._stats.total_paid_out,
            total_deposited=self._stats.total_deposited,
            final_balance=self._player.balance,
        )

"""
蒙特卡洛RTP模拟.

使用与真实回合相同的赔率和获胜概率公式模拟大量回合，统计实际返还率.
模拟不涉及任何玩家余额.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from itertools import cycle
from typing import Optional, Sequence

from .config import BettingConfig
from .exceptions import GameConfigError, InvalidAmountError
from .odds import calculate_odds, calculate_win_chance
from .player import round_to_cents, to_amount
from .rng import RandomSource

logger = logging.getLogger(__name__)

# 默认下注序列：5, 6, ..., 14 循环
DEFAULT_STAKES = tuple(Decimal(5 + i) for i in range(10))


@dataclass(frozen=True)
class SimulationStats:
    """模拟统计结果"""
    iterations: int
    rounds_won: int
    total_wagered: Decimal
    total_returned: Decimal

    @property
    def rtp_percent(self) -> float:
        """实际RTP百分比 = 总返还 / 总下注 * 100"""
        if self.total_wagered == 0:
            return 0.0
        return float(self.total_returned / self.total_wagered * 100)

    @property
    def average_net(self) -> Decimal:
        """每回合平均净输赢（正数表示玩家盈利）"""
        return (self.total_returned - self.total_wagered) / self.iterations

    @property
    def win_rate(self) -> float:
        return self.rounds_won / self.iterations


def simulate_rtp(
    config: BettingConfig,
    iterations: int,
    rng: RandomSource,
    stakes: Optional[Sequence[Decimal]] = None,
) -> SimulationStats:
    """
    模拟指定回合数并统计RTP.

    Args:
        config: 下注配置（RTP常数和赔率档位）
        iterations: 模拟回合数
        rng: 均匀随机源
        stakes: 循环使用的下注金额序列，默认5到14

    Returns:
        SimulationStats: 模拟统计

    Raises:
        GameConfigError: 当回合数或下注序列无效时
    """
    if iterations <= 0:
        raise GameConfigError(f"模拟回合数必须大于0: {iterations}")

    try:
        stakes = tuple(to_amount(s) for s in (stakes or DEFAULT_STAKES))
    except InvalidAmountError as e:
        raise GameConfigError(f"模拟下注金额无效: {e}") from e
    if any(s <= 0 for s in stakes):
        raise GameConfigError("模拟下注金额必须大于0")

    # 每种下注金额的赔率和获胜概率只计算一次
    table = []
    for stake in stakes:
        odds = calculate_odds(stake, config.odds_tiers)
        table.append((stake, round_to_cents(stake * odds), calculate_win_chance(odds, config.rtp)))

    total_wagered = Decimal("0")
    total_returned = Decimal("0")
    rounds_won = 0

    entries = cycle(table)
    for _ in range(iterations):
        stake, payout, win_chance = next(entries)
        total_wagered += stake
        if rng.random() < win_chance:
            total_returned += payout
            rounds_won += 1

    stats = SimulationStats(
        iterations=iterations,
        rounds_won=rounds_won,
        total_wagered=total_wagered,
        total_returned=total_returned,
    )
    logger.info(f"模拟完成: {iterations}回合, RTP={stats.rtp_percent:.2f}%")
    return stats

"""
回合结算器.

每回合抽取一个均匀随机数 r，r < 获胜概率 即为赢；赢时派彩 = 本金 * 赔率 并计入余额.
本金在下注时已经扣除，输时余额不变.
"""

import logging
from decimal import Decimal
from typing import Optional

from .bet import Bet
from .enums import BetResult, RoundOutcome
from .exceptions import RandomSourceError
from .player import Player
from .rng import RandomSource


class RoundResolver:
    """
    回合结算器.

    根据下注和随机源判定输赢并结算派彩.
    """

    def __init__(self, rtp: float, logger: Optional[logging.Logger] = None):
        """
        初始化结算器.

        Args:
            rtp: RTP常数
            logger: 日志记录器
        """
        self.rtp = rtp
        self._logger = logger or logging.getLogger(__name__)

    def draw(self, rng: RandomSource) -> float:
        """
        从随机源抽取一个随机数.

        Raises:
            RandomSourceError: 当抽取值不在[0, 1)内时
        """
        value = rng.random()
        if not 0.0 <= value < 1.0:
            raise RandomSourceError(f"随机数越界: {value}")
        return value

    def resolve(self, player: Player, bet: Bet, rng: RandomSource) -> RoundOutcome:
        """
        结算一个回合.

        Args:
            player: 下注玩家，本金应已扣除
            bet: 本回合的下注
            rng: 均匀随机源

        Returns:
            RoundOutcome: 回合结果

        Raises:
            RandomSourceError: 当随机源失败时
        """
        if bet.player_id != player.player_id:
            raise ValueError(f"下注玩家{bet.player_id}与结算玩家{player.player_id}不一致")

        win_chance = bet.win_chance(self.rtp)
        value = self.draw(rng)

        if value < win_chance:
            payout = bet.potential_payout
            player.apply_payout(payout)
            result = BetResult.WIN
        else:
            payout = Decimal("0")
            result = BetResult.LOSS

        self._logger.debug(
            f"回合结算: 下注={bet.stake}, 赔率={bet.odds}, 获胜概率={win_chance:.4f}, "
            f"随机数={value:.6f}, 结果={result.value}"
        )
        return RoundOutcome(result=result, payout=payout, draw=value, win_chance=win_chance)

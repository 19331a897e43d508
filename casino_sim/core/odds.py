"""
赔率与RTP计算.

赔率按下注金额分档：下注越大，赔率越高，但获胜概率按 rtp / 赔率 同步缩小，
使每回合的期望返还恒等于RTP常数.
"""

from decimal import Decimal
from typing import Iterable

from .config import DEFAULT_ODDS_TIERS, OddsTier
from .exceptions import InvalidAmountError
from .player import Amount, to_amount


def calculate_odds(stake: Amount, tiers: Iterable[OddsTier] = DEFAULT_ODDS_TIERS) -> Decimal:
    """
    根据下注金额计算赔率倍率.

    档位上限为闭区间：默认档位下，下注<=10为1.2倍，<=50为1.5倍，其余为2.0倍.

    Args:
        stake: 下注金额
        tiers: 按上限递增排列的(上限, 倍率)档位

    Returns:
        Decimal: 赔率倍率

    Raises:
        InvalidAmountError: 当下注金额不为正数时
    """
    stake = to_amount(stake)
    if stake <= 0:
        raise InvalidAmountError(f"下注金额必须大于0: {stake}")

    for bound, multiplier in tiers:
        if bound is None or stake <= bound:
            return multiplier

    raise ValueError("赔率档位缺少无上限的最后一档")


def calculate_win_chance(odds: Amount, rtp: float) -> float:
    """
    计算获胜概率 = rtp / 赔率.

    Args:
        odds: 赔率倍率
        rtp: RTP常数

    Returns:
        float: (0, 1]之间的获胜概率
    """
    odds = Decimal(str(odds))
    if odds <= 0:
        raise ValueError(f"赔率必须大于0: {odds}")

    return min(1.0, rtp / float(odds))


def calculate_rtp_percent(win_chance: float, odds: Amount) -> float:
    """RTP百分比 = 获胜概率 * 赔率 * 100."""
    return win_chance * float(odds) * 100

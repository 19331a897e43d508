"""
下注相关枚举定义模块.

包含回合结果、随机源类型等枚举，以及回合结算结果的数据结构.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BetResult(Enum):
    """
    回合结果枚举.

    每一回合只有赢和输两种结果，没有平局.
    """

    WIN = "win"      # 赢
    LOSS = "loss"    # 输


class RandomSourceKind(Enum):
    """
    随机源类型枚举.

    SECURE 使用操作系统熵源，SEEDED 使用固定种子的伪随机数生成器，
    CUSTOM 表示外部注入的其他随机源.
    """

    SECURE = "secure"
    SEEDED = "seeded"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RoundOutcome:
    """
    单回合结算结果.

    Attributes:
        result: 回合结果（赢/输）
        payout: 派彩金额，输时为0
        draw: 本回合抽取的均匀随机数，位于[0, 1)
        win_chance: 本回合的获胜概率
    """

    result: BetResult
    payout: Decimal
    draw: float
    win_chance: float

    @property
    def won(self) -> bool:
        """本回合是否获胜."""
        return self.result == BetResult.WIN

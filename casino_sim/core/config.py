"""
游戏配置相关类的实现
包含RTP常数、最小下注、初始余额和赔率档位等设置
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from .exceptions import GameConfigError, InvalidAmountError
from .player import to_amount


# (上限, 倍率)，上限为None表示无上限
OddsTier = Tuple[Optional[Decimal], Decimal]

DEFAULT_ODDS_TIERS: Tuple[OddsTier, ...] = (
    (Decimal("10"), Decimal("1.2")),
    (Decimal("50"), Decimal("1.5")),
    (None, Decimal("2.0")),
)


@dataclass
class BettingConfig:
    """
    下注配置类
    包含会话开始时设定的所有参数
    """
    # RTP常数，获胜概率 = rtp / 赔率
    rtp: float = 0.95

    # 余额和下注限制
    min_bet: Decimal = Decimal("5")
    starting_balance: Decimal = Decimal("100")

    # 赔率档位
    odds_tiers: Tuple[OddsTier, ...] = field(default=DEFAULT_ODDS_TIERS)

    # 玩家设置
    player_id: str = "player1"

    # 随机种子，设置后使用可重现的随机源
    random_seed: Optional[int] = None

    def __post_init__(self):
        """验证配置的有效性"""
        try:
            self.min_bet = to_amount(self.min_bet)
            self.starting_balance = to_amount(self.starting_balance)
        except InvalidAmountError as e:
            raise GameConfigError(f"金额设置无效: {e}") from e
        self.odds_tiers = tuple(
            (None if bound is None else Decimal(str(bound)), Decimal(str(multiplier)))
            for bound, multiplier in self.odds_tiers
        )

        self._validate_basic_settings()
        self._validate_odds_tiers()

        # 获胜概率必须不超过1
        if self.rtp > self.lowest_multiplier:
            raise GameConfigError(
                f"RTP常数({self.rtp})不能大于最低赔率({self.lowest_multiplier})"
            )

    def _validate_basic_settings(self):
        """验证基础设置"""
        if not 0 < self.rtp <= 1:
            raise GameConfigError(f"RTP常数必须在(0, 1]之间: {self.rtp}")

        if self.min_bet <= 0:
            raise GameConfigError(f"最小下注必须大于0: {self.min_bet}")

        if self.starting_balance < 0:
            raise GameConfigError(f"初始余额不能为负数: {self.starting_balance}")

        if not self.player_id:
            raise GameConfigError("玩家ID不能为空")

    def _validate_odds_tiers(self):
        """验证赔率档位"""
        if not self.odds_tiers:
            raise GameConfigError("至少需要一个赔率档位")

        if self.odds_tiers[-1][0] is not None:
            raise GameConfigError("最后一个赔率档位必须没有上限")

        previous_bound = Decimal("0")
        for bound, multiplier in self.odds_tiers:
            if multiplier <= 0:
                raise GameConfigError(f"赔率倍率必须大于0: {multiplier}")
            if bound is None:
                continue
            if bound <= previous_bound:
                raise GameConfigError(f"赔率档位上限必须严格递增: {bound}")
            previous_bound = bound

        if any(bound is None for bound, _ in self.odds_tiers[:-1]):
            raise GameConfigError("只有最后一个赔率档位可以没有上限")

    @property
    def lowest_multiplier(self) -> Decimal:
        """所有档位中的最低倍率"""
        return min(multiplier for _, multiplier in self.odds_tiers)

    @classmethod
    def default(cls) -> 'BettingConfig':
        """
        创建默认配置
        初始余额100，最小下注5，RTP 95%
        """
        return cls()

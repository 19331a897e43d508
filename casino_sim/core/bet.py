"""
下注对象.

一次下注只用于一个回合的结算，创建后不可修改.
"""

from dataclasses import dataclass
from decimal import Decimal

from .config import BettingConfig
from .exceptions import InvalidAmountError
from .odds import calculate_odds, calculate_rtp_percent, calculate_win_chance
from .player import Amount, round_to_cents, to_amount


@dataclass(frozen=True)
class Bet:
    """
    单回合下注.

    Attributes:
        player_id: 下注玩家ID
        stake: 下注金额（大于0）
        odds: 赔率倍率（大于0）
    """

    player_id: str
    stake: Decimal
    odds: Decimal

    def __post_init__(self) -> None:
        if self.stake <= 0:
            raise InvalidAmountError(f"下注金额必须大于0: {self.stake}")
        if self.odds <= 0:
            raise InvalidAmountError(f"赔率必须大于0: {self.odds}")

    @classmethod
    def create(cls, player_id: str, stake: Amount, config: BettingConfig) -> 'Bet':
        """
        按配置的赔率档位创建下注.

        Args:
            player_id: 玩家ID
            stake: 下注金额
            config: 下注配置

        Returns:
            Bet: 新的下注对象
        """
        stake = to_amount(stake)
        odds = calculate_odds(stake, config.odds_tiers)
        return cls(player_id=player_id, stake=stake, odds=odds)

    @property
    def potential_payout(self) -> Decimal:
        """获胜时的派彩金额，四舍五入到分"""
        return round_to_cents(self.stake * self.odds)

    def win_chance(self, rtp: float) -> float:
        """本次下注的获胜概率"""
        return calculate_win_chance(self.odds, rtp)

    def rtp_percent(self, rtp: float) -> float:
        """本次下注的理论RTP百分比"""
        return calculate_rtp_percent(self.win_chance(rtp), self.odds)

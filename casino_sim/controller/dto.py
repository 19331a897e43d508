"""数据传输对象定义.

这个模块定义了控制器与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from casino_sim.core import BettingConfig, RandomSourceKind


@pydantic_dataclass
class PlayerSnapshot:
    """玩家状态快照.

    包含玩家在某个时刻的余额和可下注范围。
    """
    player_id: str = Field(..., min_length=1, description="玩家ID")
    balance: Decimal = Field(..., ge=0, description="当前余额")
    min_bet: Decimal = Field(..., gt=0, description="最小下注")
    max_bet: Decimal = Field(..., ge=0, description="最大下注（等于当前余额）")
    timestamp: datetime = Field(default_factory=datetime.now, description="快照时间戳")

    @property
    def can_bet(self) -> bool:
        """余额是否足够最小下注."""
        return self.balance >= self.min_bet


@pydantic_dataclass
class RoundResult:
    """回合结果.

    包含一个回合结算后的完整信息，用于显示。
    """
    round_number: int = Field(..., ge=1, description="回合编号")
    player_id: str = Field(..., min_length=1, description="玩家ID")
    stake: Decimal = Field(..., gt=0, description="下注金额")
    odds: Decimal = Field(..., gt=0, description="赔率倍率")
    won: bool = Field(..., description="是否获胜")
    payout: Decimal = Field(..., ge=0, description="派彩金额")
    balance_after: Decimal = Field(..., ge=0, description="结算后余额")
    win_chance: float = Field(..., gt=0, le=1, description="获胜概率")
    rtp_percent: float = Field(..., ge=0, description="理论RTP百分比")
    timestamp: datetime = Field(default_factory=datetime.now, description="结算时间戳")

    @property
    def net_result(self) -> Decimal:
        """本回合净输赢."""
        return self.payout - self.stake


@pydantic_dataclass
class SessionSummary:
    """会话汇总.

    仅包含本次进程内的累计数据，不保存逐回合历史。
    """
    player_id: str = Field(..., min_length=1, description="玩家ID")
    rounds_played: int = Field(..., ge=0, description="已完成回合数")
    rounds_won: int = Field(..., ge=0, description="获胜回合数")
    total_wagered: Decimal = Field(..., ge=0, description="累计下注")
    total_paid_out: Decimal = Field(..., ge=0, description="累计派彩")
    total_deposited: Decimal = Field(..., ge=0, description="累计存款")
    final_balance: Decimal = Field(..., ge=0, description="当前余额")

    @property
    def net_result(self) -> Decimal:
        """累计净输赢（正数表示玩家盈利）."""
        return self.total_paid_out - self.total_wagered

    @property
    def observed_rtp_percent(self) -> float:
        """实际返还率百分比."""
        if self.total_wagered == 0:
            return 0.0
        return float(self.total_paid_out / self.total_wagered * 100)


@pydantic_dataclass
class SimulationReport:
    """RTP模拟报告."""
    iterations: int = Field(..., gt=0, description="模拟回合数")
    rtp_constant: float = Field(..., gt=0, le=1, description="配置的RTP常数")
    rounds_won: int = Field(..., ge=0, description="获胜回合数")
    total_wagered: Decimal = Field(..., gt=0, description="累计下注")
    total_returned: Decimal = Field(..., ge=0, description="累计返还")
    rtp_percent: float = Field(..., ge=0, description="实际RTP百分比")
    average_net: Decimal = Field(..., description="每回合平均净输赢")
    source: RandomSourceKind = Field(..., description="随机源类型")


@pydantic_dataclass
class SessionSettings:
    """会话设置.

    CLI参数经过校验后转换为核心层的BettingConfig。
    """
    starting_balance: Decimal = Field(Decimal("100"), ge=0, description="初始余额")
    min_bet: Decimal = Field(Decimal("5"), gt=0, description="最小下注")
    rtp: float = Field(0.95, gt=0, le=1, description="RTP常数")
    player_id: str = Field("player1", description="玩家ID")
    random_seed: Optional[int] = Field(None, description="随机种子")

    @field_validator('player_id')
    @classmethod
    def validate_player_id(cls, v: str) -> str:
        """玩家ID去除首尾空白后不能为空."""
        v = v.strip()
        if not v:
            raise ValueError("玩家ID不能为空")
        return v

    def to_config(self) -> BettingConfig:
        """转换为核心层配置."""
        return BettingConfig(
            rtp=self.rtp,
            min_bet=self.min_bet,
            starting_balance=self.starting_balance,
            player_id=self.player_id,
            random_seed=self.random_seed,
        )

"""
玩家余额管理.

包含玩家的基本信息和余额账本操作：下注扣款、存款和派彩入账.
所有金额精确到分；无法精确表示的金额和余额一律拒绝，不做静默舍入.
"""

from dataclasses import dataclass
from decimal import (
    Context, Decimal, DecimalException, Inexact, InvalidOperation, Overflow, ROUND_HALF_UP
)
from typing import Callable, Union

from .exceptions import InsufficientBalanceError, InvalidAmountError

Amount = Union[Decimal, int, float, str]

# 金额的最小单位
CENT = Decimal("0.01")

# 账本运算上下文：28位有效数字，任何舍入、溢出或无效运算都会抛出异常
MONEY_CONTEXT = Context(prec=28, traps=[InvalidOperation, Overflow, Inexact])

# 派彩取整上下文：允许舍入到分
_ROUNDING_CONTEXT = Context(prec=28, rounding=ROUND_HALF_UP, traps=[InvalidOperation, Overflow])


def to_amount(value: Amount) -> Decimal:
    """
    将输入转换为精确到分的货币金额.

    浮点数先转换为字符串，避免二进制误差进入余额.

    Args:
        value: 金额

    Returns:
        Decimal: 保留两位小数的金额

    Raises:
        InvalidAmountError: 当输入无法解析为有限数值、小数位超过两位或超出账本精度时
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise InvalidAmountError(f"无法解析的金额: {value!r}")

    if not amount.is_finite():
        raise InvalidAmountError(f"金额必须为有限数值: {value!r}")

    try:
        return amount.quantize(CENT, context=MONEY_CONTEXT)
    except DecimalException:
        raise InvalidAmountError(f"金额必须精确到分且不超出账本精度: {value!r}") from None


def round_to_cents(value: Decimal) -> Decimal:
    """
    将计算得到的金额（如本金乘以赔率）四舍五入到分.

    Raises:
        InvalidAmountError: 当结果超出账本精度时
    """
    try:
        return Decimal(value).quantize(CENT, context=_ROUNDING_CONTEXT)
    except DecimalException:
        raise InvalidAmountError(f"金额超出账本精度: {value!r}") from None


def _exact(operation: Callable[[Decimal, Decimal], Decimal], left: Decimal, right: Decimal) -> Decimal:
    """在账本上下文中执行加减运算，结果必须能精确表示到分."""
    try:
        return operation(left, right).quantize(CENT, context=MONEY_CONTEXT)
    except DecimalException:
        raise InvalidAmountError(f"余额超出账本精度: {left} / {right}") from None


@dataclass
class Player:
    """
    下注玩家类.

    余额只能通过下注、存款和派彩改变，且永远不会为负数.
    """

    player_id: str
    balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        """
        验证玩家数据的有效性.

        Raises:
            ValueError: 当玩家ID为空时
            InvalidAmountError: 当初始余额无效或为负数时
        """
        if not self.player_id:
            raise ValueError("玩家ID不能为空")

        self.balance = to_amount(self.balance)
        if self.balance < 0:
            raise InvalidAmountError(f"余额不能为负数: {self.balance}")

    def can_afford(self, amount: Amount) -> bool:
        """
        检查玩家是否可以下注指定金额.

        Args:
            amount: 要下注的金额

        Returns:
            bool: 金额为正且不超过余额时返回True
        """
        amount = to_amount(amount)
        return 0 < amount <= self.balance

    def place_bet(self, amount: Amount) -> Decimal:
        """
        玩家下注，在回合结算前扣除本金.

        Args:
            amount: 下注金额

        Returns:
            Decimal: 扣款后的余额

        Raises:
            InvalidAmountError: 当下注金额不为正数时
            InsufficientBalanceError: 当下注金额超过余额时
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(f"下注金额必须大于0: {amount}")

        if amount > self.balance:
            raise InsufficientBalanceError(amount, self.balance)

        self.balance = _exact(MONEY_CONTEXT.subtract, self.balance, amount)
        return self.balance

    def deposit(self, amount: Amount) -> Decimal:
        """
        玩家存款，仅受账本精度限制.

        Args:
            amount: 存款金额

        Returns:
            Decimal: 存款后的余额

        Raises:
            InvalidAmountError: 当存款金额不为正数或存款后余额超出账本精度时
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(f"存款金额必须大于0: {amount}")

        self.balance = _exact(MONEY_CONTEXT.add, self.balance, amount)
        return self.balance

    def apply_payout(self, amount: Amount) -> Decimal:
        """
        派彩入账（赢得回合时）.

        Args:
            amount: 派彩金额，0表示无派彩

        Returns:
            Decimal: 入账后的余额
        """
        amount = to_amount(amount)
        if amount < 0:
            raise InvalidAmountError(f"派彩金额不能为负数: {amount}")

        self.balance = _exact(MONEY_CONTEXT.add, self.balance, amount)
        return self.balance

    def __str__(self) -> str:
        """返回玩家的可读表示"""
        return f"{self.player_id}: 余额{self.balance:.2f}"

"""
下注引擎业务异常定义
区分可在会话中恢复的业务异常和中止本回合的随机源异常
"""


class CasinoError(Exception):
    """下注模拟器基础异常类"""
    pass


class InvalidAmountError(CasinoError):
    """无效金额异常（下注、存款或派彩金额不为正数）"""
    pass


class InsufficientBalanceError(CasinoError):
    """余额不足异常"""

    def __init__(self, amount, balance):
        self.amount = amount
        self.balance = balance
        super().__init__(f"余额不足: 下注{amount:.2f}, 当前余额{balance:.2f}")


class RandomSourceError(CasinoError):
    """随机源异常（熵源失败或抽取值越界），仅中止当前回合"""
    pass


class GameConfigError(CasinoError):
    """游戏配置错误异常"""
    pass

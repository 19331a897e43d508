"""下注模拟器CLI输入处理模块.

这个模块负责处理用户输入，提供强校验和错误处理，
将用户输入转换为经过校验的金额和是/否选择。
"""

from decimal import Decimal

import click

from casino_sim.core import InvalidAmountError, to_amount


class AmountParamType(click.ParamType):
    """金额参数类型，将输入解析为精确到分的Decimal."""

    name = "amount"

    def convert(self, value, param, ctx):
        try:
            return to_amount(value.strip() if isinstance(value, str) else value)
        except InvalidAmountError as e:
            self.fail(f"'{value}' 不是有效的金额 ({e})", param, ctx)


AMOUNT = AmountParamType()


class CLIInputHandler:
    """CLI输入处理器.

    使用click库确保输入的有效性，输入无效时重新提示。
    是/否选择统一使用 y/n（也接受 yes/no）。
    """

    @staticmethod
    def get_continue_choice() -> bool:
        """获取是否继续游戏的选择.

        Returns:
            True表示继续，False表示退出（包括输入结束）
        """
        try:
            return click.confirm("是否继续游戏?", default=None)
        except click.Abort:
            return False

    @staticmethod
    def get_deposit_choice() -> bool:
        """询问余额不足时是否存款."""
        try:
            return click.confirm("余额不足，是否存入更多资金?", default=None)
        except click.Abort:
            return False

    @staticmethod
    def get_deposit_amount() -> Decimal:
        """获取存款金额输入.

        Returns:
            大于0的存款金额

        Raises:
            click.Abort: 用户取消输入
        """
        while True:
            amount = click.prompt("请输入存款金额", type=AMOUNT)
            if amount > 0:
                return amount
            click.echo("存款金额必须大于0，请重新输入。")

    @staticmethod
    def get_bet_amount(min_bet: Decimal, max_bet: Decimal) -> Decimal:
        """获取下注金额输入.

        Args:
            min_bet: 最小下注
            max_bet: 最大下注（当前余额）

        Returns:
            位于[min_bet, max_bet]内的下注金额

        Raises:
            click.Abort: 用户取消输入
        """
        prompt_text = f"请输入下注金额 (最小: {min_bet:.2f}, 最大: {max_bet:.2f})"

        while True:
            amount = click.prompt(prompt_text, type=AMOUNT)
            if min_bet <= amount <= max_bet:
                return amount
            click.echo("下注金额无效，请输入允许范围内的金额。")

"""下注模拟器CLI游戏界面.

这个模块提供命令行界面的会话循环和click命令入口：
- play: 交互式下注会话
- simulate: 蒙特卡洛RTP模拟
"""

import logging
from decimal import Decimal
from typing import Optional

import click
from pydantic import ValidationError

from casino_sim.controller import BettingController, SessionSettings
from casino_sim.core import (
    BettingConfig, GameConfigError, InsufficientBalanceError, InvalidAmountError,
    RandomSourceError
)
from .input_handler import AMOUNT, CLIInputHandler
from .render import CLIRenderer

DEFAULT_ITERATIONS = 1_000_000


class CasinoCLI:
    """下注模拟器CLI界面.

    会话循环：提示下注、结算、显示结果、询问是否继续；
    余额低于最小下注时提示存款，存款后仍不足则结束游戏。
    """

    def __init__(
        self,
        config: Optional[BettingConfig] = None,
        controller: Optional[BettingController] = None,
        report_rtp: bool = False,
        iterations: int = DEFAULT_ITERATIONS
    ):
        """初始化CLI游戏.

        Args:
            config: 下注配置
            controller: 控制器，如果为None则按配置创建
            report_rtp: 退出时是否运行RTP模拟
            iterations: RTP模拟回合数
        """
        self.logger = logging.getLogger(__name__)
        self.controller = controller or BettingController(config=config, logger=self.logger)
        self.report_rtp = report_rtp
        self.iterations = iterations

    def run(self) -> None:
        """运行游戏主循环."""
        click.echo(CLIRenderer.render_game_header(self.controller.get_snapshot()))

        while True:
            # 中止或被拒绝的回合不计入编号
            round_number = self.controller.get_summary().rounds_played + 1
            click.echo(CLIRenderer.render_round_header(round_number))

            if self.controller.needs_deposit():
                click.echo("您的余额低于最小下注。")
                self._offer_deposit()

            if self.controller.needs_deposit():
                click.echo(CLIRenderer.render_game_over("余额仍不足以支付最小下注"))
                break

            if not self._play_one_round():
                continue

            click.echo(CLIRenderer.render_balance(self.controller.balance))

            if not CLIInputHandler.get_continue_choice():
                break

        click.echo(CLIRenderer.render_summary(self.controller.get_summary()))
        click.echo("感谢游戏！")

        if self.report_rtp:
            report = self.controller.run_simulation(self.iterations)
            click.echo(CLIRenderer.render_simulation_report(report))

    def _play_one_round(self) -> bool:
        """进行一个回合.

        Returns:
            回合是否进入结算（包括因随机源失败而中止）；下注被拒绝时返回False
        """
        snapshot = self.controller.get_snapshot()
        amount = CLIInputHandler.get_bet_amount(snapshot.min_bet, snapshot.max_bet)

        try:
            result = self.controller.play_round(amount)
        except (InvalidAmountError, InsufficientBalanceError) as e:
            click.echo(CLIRenderer.render_error_message(str(e)))
            self._offer_deposit()
            return False
        except RandomSourceError as e:
            click.echo(CLIRenderer.render_error_message(f"本回合已中止，余额未变动 ({e})"))
            return True

        click.echo(CLIRenderer.render_round_result(result))
        return True

    def _offer_deposit(self) -> None:
        """询问并处理存款."""
        if not CLIInputHandler.get_deposit_choice():
            return

        try:
            amount = CLIInputHandler.get_deposit_amount()
        except click.Abort:
            return

        try:
            snapshot = self.controller.deposit(amount)
        except InvalidAmountError as e:
            click.echo(CLIRenderer.render_error_message(str(e)))
            return

        click.echo(CLIRenderer.render_balance(snapshot.balance))


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )


def _build_settings(**kwargs) -> SessionSettings:
    """校验CLI参数并转换为会话设置."""
    try:
        settings = SessionSettings(**kwargs)
        settings.to_config()
    except ValidationError as e:
        raise click.UsageError(f"无效的参数: {e}")
    except GameConfigError as e:
        raise click.UsageError(str(e))
    return settings


@click.group()
@click.option('--debug', is_flag=True, help="输出调试日志")
def main(debug):
    """命令行下注模拟器."""
    _setup_logging(debug)


@main.command()
@click.option('--balance', type=AMOUNT, default=Decimal("100"), show_default=True, help="初始余额")
@click.option('--min-bet', type=AMOUNT, default=Decimal("5"), show_default=True, help="最小下注")
@click.option('--rtp', type=float, default=0.95, show_default=True, help="RTP常数")
@click.option('--seed', type=int, default=None, help="随机种子，设置后结果可重现")
@click.option('--player-id', default="player1", show_default=True, help="玩家ID")
@click.option('--report-rtp', is_flag=True, help="退出时运行RTP模拟")
@click.option('--iterations', type=click.IntRange(min=1), default=DEFAULT_ITERATIONS,
              show_default=True, help="RTP模拟回合数")
def play(balance, min_bet, rtp, seed, player_id, report_rtp, iterations):
    """开始交互式下注会话."""
    settings = _build_settings(
        starting_balance=balance,
        min_bet=min_bet,
        rtp=rtp,
        player_id=player_id,
        random_seed=seed,
    )
    game = CasinoCLI(config=settings.to_config(), report_rtp=report_rtp, iterations=iterations)

    try:
        game.run()
    except click.Abort:
        click.echo("\n游戏被中断")


@main.command()
@click.option('--iterations', type=click.IntRange(min=1), default=DEFAULT_ITERATIONS,
              show_default=True, help="模拟回合数")
@click.option('--rtp', type=float, default=0.95, show_default=True, help="RTP常数")
@click.option('--seed', type=int, default=None, help="随机种子")
def simulate(iterations, rtp, seed):
    """运行蒙特卡洛RTP模拟."""
    settings = _build_settings(rtp=rtp, random_seed=seed)
    controller = BettingController(config=settings.to_config())
    report = controller.run_simulation(iterations)
    click.echo(CLIRenderer.render_simulation_report(report))


if __name__ == "__main__":
    main()

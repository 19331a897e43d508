"""下注模拟器CLI渲染模块.

这个模块负责将控制器返回的快照和结果渲染为命令行显示文本，
实现显示逻辑与核心下注逻辑的分离。金额和赔率统一保留两位小数。
"""

from decimal import Decimal

from casino_sim.controller import PlayerSnapshot, RoundResult, SessionSummary, SimulationReport
from casino_sim.core import round_to_cents


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def format_amount(amount) -> str:
        """格式化金额为两位小数，四舍五入."""
        return f"{round_to_cents(Decimal(str(amount))):.2f}"

    @staticmethod
    def render_game_header(snapshot: PlayerSnapshot) -> str:
        """渲染游戏头部信息.

        Args:
            snapshot: 初始玩家快照

        Returns:
            格式化的头部信息字符串
        """
        lines = [
            "=== 下注模拟器 CLI ===",
            f"玩家: {snapshot.player_id}",
            f"初始余额: {CLIRenderer.format_amount(snapshot.balance)}",
            f"最小下注: {CLIRenderer.format_amount(snapshot.min_bet)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_round_header(round_number: int) -> str:
        return f"\n--- 第 {round_number} 回合 ---"

    @staticmethod
    def render_bet(stake, odds) -> str:
        """渲染下注信息."""
        return f"下注金额: {CLIRenderer.format_amount(stake)}, 赔率: {CLIRenderer.format_amount(odds)}"

    @staticmethod
    def render_round_result(result: RoundResult) -> str:
        """渲染回合结果.

        Args:
            result: 回合结果

        Returns:
            格式化的结果字符串
        """
        outcome = "获胜" if result.won else "失败"
        lines = [
            CLIRenderer.render_bet(result.stake, result.odds),
            f"获胜概率: {result.win_chance * 100:.2f}%",
            f"结果: {outcome}",
            f"派彩: {CLIRenderer.format_amount(result.payout)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_balance(balance) -> str:
        return f"当前余额: {CLIRenderer.format_amount(balance)}"

    @staticmethod
    def render_summary(summary: SessionSummary) -> str:
        """渲染会话汇总.

        Args:
            summary: 会话汇总

        Returns:
            格式化的汇总字符串
        """
        lines = [
            "",
            "=== 会话汇总 ===",
            f"回合数: {summary.rounds_played} (获胜 {summary.rounds_won})",
            f"累计下注: {CLIRenderer.format_amount(summary.total_wagered)}",
            f"累计派彩: {CLIRenderer.format_amount(summary.total_paid_out)}",
            f"累计存款: {CLIRenderer.format_amount(summary.total_deposited)}",
            f"实际返还率: {summary.observed_rtp_percent:.2f}%",
            f"最终余额: {CLIRenderer.format_amount(summary.final_balance)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_simulation_report(report: SimulationReport) -> str:
        """渲染RTP模拟报告.

        Args:
            report: 模拟报告

        Returns:
            格式化的报告字符串
        """
        lines = [
            "",
            "=== RTP模拟 ===",
            f"模拟回合数: {report.iterations} (随机源: {report.source.value})",
            f"配置RTP: {report.rtp_constant * 100:.2f}%",
            f"获胜回合: {report.rounds_won}",
            f"累计下注: {CLIRenderer.format_amount(report.total_wagered)}",
            f"累计返还: {CLIRenderer.format_amount(report.total_returned)}",
            f"实际RTP: {report.rtp_percent:.2f}%",
            f"每回合平均净输赢: {CLIRenderer.format_amount(report.average_net)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_error_message(error: str) -> str:
        return f"错误: {error}"

    @staticmethod
    def render_game_over(reason: str) -> str:
        return f"游戏结束: {reason}"

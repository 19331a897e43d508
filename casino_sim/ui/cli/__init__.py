"""下注模拟器CLI用户界面模块.

这个包提供命令行界面的下注会话实现，包括：
- CLI游戏主类和click命令入口
- 渲染器（显示逻辑）
- 输入处理器（用户交互）
"""

from .cli_game import CasinoCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler, AmountParamType

__all__ = [
    'CasinoCLI',
    'main',
    'CLIRenderer',
    'CLIInputHandler',
    'AmountParamType'
]

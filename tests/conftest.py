"""
Test configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的配置、玩家和控制器fixture
- 可编排抽取序列的随机源
- 模拟熵源失败的随机源

所有测试都会自动加载这些配置。
"""

import logging
from decimal import Decimal
from typing import Iterable

import pytest

from casino_sim.controller import BettingController
from casino_sim.core import BettingConfig, EventBus, Player, RandomSourceError


class SequenceRandomSource:
    """按给定序列依次返回随机数的随机源，用于确定性测试."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            raise RandomSourceError("测试随机序列已耗尽")
        value = self._values[self.calls]
        self.calls += 1
        return value


class FailingRandomSource:
    """每次抽取都失败的随机源."""

    def random(self) -> float:
        raise RandomSourceError("熵源不可用")


# 0.0 小于任何获胜概率，0.999999 大于默认配置下的任何获胜概率
WIN_DRAW = 0.0
LOSS_DRAW = 0.999999


@pytest.fixture
def win_draw():
    return WIN_DRAW


@pytest.fixture
def loss_draw():
    return LOSS_DRAW


@pytest.fixture
def sequence_rng():
    """返回创建序列随机源的工厂函数."""
    def _make(*values: float) -> SequenceRandomSource:
        return SequenceRandomSource(values)
    return _make


@pytest.fixture
def failing_rng():
    return FailingRandomSource()


@pytest.fixture
def config():
    """默认下注配置：余额100，最小下注5，RTP 95%."""
    return BettingConfig(random_seed=42)


@pytest.fixture
def player():
    return Player(player_id="player1", balance=Decimal("100"))


@pytest.fixture
def event_bus():
    return EventBus(logger=logging.getLogger("test.events"))


@pytest.fixture
def make_controller(config, event_bus):
    """返回创建控制器的工厂函数，随机源由测试指定."""
    def _make(rng, balance: str = "100") -> BettingController:
        return BettingController(
            config=config,
            player=Player(player_id=config.player_id, balance=Decimal(balance)),
            rng=rng,
            event_bus=event_bus,
        )
    return _make

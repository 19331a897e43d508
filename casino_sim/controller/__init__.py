"""
Controller layer for the casino betting simulator.

This package provides the application controller layer that bridges
the core betting logic with the user interface layers.
"""

from .betting_controller import BettingController, SessionStats
from .dto import (
    PlayerSnapshot, RoundResult, SessionSummary, SimulationReport, SessionSettings
)
from .decorators import atomic, logged_action

__all__ = [
    'BettingController', 'SessionStats',
    'PlayerSnapshot', 'RoundResult', 'SessionSummary', 'SimulationReport', 'SessionSettings',
    'atomic', 'logged_action'
]

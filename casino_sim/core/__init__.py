"""
Core betting logic for the casino simulator.

This package contains the player balance ledger, bets, the odds/RTP
calculator, random sources, the round resolver and the RTP simulation.
"""

from decimal import Decimal

from .enums import BetResult, RandomSourceKind, RoundOutcome
from .exceptions import (
    CasinoError, InvalidAmountError, InsufficientBalanceError,
    RandomSourceError, GameConfigError
)
from .config import BettingConfig, OddsTier, DEFAULT_ODDS_TIERS
from .player import CENT, Player, round_to_cents, to_amount
from .bet import Bet
from .odds import calculate_odds, calculate_win_chance, calculate_rtp_percent
from .rng import RandomSource, SecureRandomSource, SeededRandomSource, create_random_source
from .resolver import RoundResolver
from .simulation import SimulationStats, simulate_rtp, DEFAULT_STAKES
from .events import EventBus, EventType, BettingEvent


def create_player(config: BettingConfig) -> Player:
    """Create the session player described by a configuration.

    Args:
        config: Betting configuration

    Returns:
        A new Player holding the configured starting balance.
    """
    return Player(player_id=config.player_id, balance=Decimal(config.starting_balance))


__all__ = [
    # Enums
    'BetResult', 'RandomSourceKind', 'RoundOutcome',

    # Exceptions
    'CasinoError', 'InvalidAmountError', 'InsufficientBalanceError',
    'RandomSourceError', 'GameConfigError',

    # Configuration
    'BettingConfig', 'OddsTier', 'DEFAULT_ODDS_TIERS',

    # Core classes
    'Player', 'Bet', 'RoundResolver', 'to_amount', 'round_to_cents', 'CENT',

    # Odds
    'calculate_odds', 'calculate_win_chance', 'calculate_rtp_percent',

    # Randomness
    'RandomSource', 'SecureRandomSource', 'SeededRandomSource', 'create_random_source',

    # Simulation
    'SimulationStats', 'simulate_rtp', 'DEFAULT_STAKES',

    # Events
    'EventBus', 'EventType', 'BettingEvent',

    # Convenience functions
    'create_player',
]

"""
Casino Betting Simulator

This package contains a command-line casino betting simulator: a player
stakes part of a balance, a uniform random draw decides the round and
winning stakes are paid out at tiered odds.
"""

__version__ = "0.1.0"
__author__ = "Casino Simulator Development Team"

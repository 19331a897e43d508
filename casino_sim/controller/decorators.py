"""
Controller method decorators.

atomic: a failing controller operation leaves the player's balance where it
started.
logged_action: start/finish/failure lines on the controller's logger.
"""

import functools
from typing import Any, Callable, TypeVar

from ..core import Player

F = TypeVar('F', bound=Callable[..., Any])


def _owned_player(controller) -> Player:
    try:
        player = controller._player
    except AttributeError:
        raise AttributeError(
            f"{type(controller).__name__} has no '_player'; @atomic cannot guard its balance"
        ) from None
    if not isinstance(player, Player):
        raise TypeError(f"'_player' must be a Player, got {type(player).__name__}")
    return player


def atomic(func: F) -> F:
    """
    Restore the owned player's balance when the wrapped method raises.

    A stake debited by a round that never settled is returned, then the
    exception propagates to the caller.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        player = _owned_player(self)
        balance_before = player.balance
        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            player.balance = balance_before
            logger = getattr(self, '_logger', None)
            if logger is not None:
                logger.debug(f"{func.__name__} failed, balance restored to {balance_before}: {e}")
            raise

    return wrapper


def logged_action(action_name: str = None):
    """Log entry, completion and failure of a controller action.

    Args:
        action_name: Name used in the log lines, the function name by default
    """
    def decorator(func: F) -> F:
        name = action_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            if logger is None:
                return func(self, *args, **kwargs)

            logger.debug(f"Starting {name}")
            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                logger.error(f"Failed {name}: {e}")
                raise
            logger.debug(f"Completed {name} successfully")
            return result

        return wrapper
    return decorator

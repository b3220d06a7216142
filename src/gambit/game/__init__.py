"""Game management layer: session, players and strategies.

Quick start::

    from gambit.core import Color
    from gambit.game import GameSession, StrategyPlayer

    session = GameSession(max_plies=400)
    session.new_game()
    result = session.play_game(
        StrategyPlayer.random(Color.WHITE),
        StrategyPlayer.random(Color.BLACK),
    )
"""

from gambit.game.interfaces import GamePhase, IPlayer, MoveStrategy
from gambit.game.player import StrategyPlayer
from gambit.game.session import GameSession, MoveRecord
from gambit.game.strategies import random_move, random_promotion

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    "MoveStrategy",
    # Concrete
    "GameSession",
    "MoveRecord",
    "StrategyPlayer",
    # Strategies
    "random_move",
    "random_promotion",
]

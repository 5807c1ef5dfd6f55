"""核心遊戲系統"""

from .entities import Paddle, Ball, Brick, BrickTier
from .game_state import GamePhase, GameRules, GameSession, InputState, MessageVisibility
from .state_machine import GameplayStateMachine, RandomSource
from .layout import build_session, build_tier

__all__ = [
    'Paddle', 'Ball', 'Brick', 'BrickTier',
    'GamePhase', 'GameRules', 'GameSession', 'InputState', 'MessageVisibility',
    'GameplayStateMachine', 'RandomSource',
    'build_session', 'build_tier',
]

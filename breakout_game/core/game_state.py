"""
遊戲狀態管理
"""

from enum import Enum
from typing import List
from dataclasses import dataclass, field

from .entities import Paddle, Ball, BrickTier


class GamePhase(Enum):
    """遊戲階段"""
    AWAITING_START = "awaiting_start"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


@dataclass
class InputState:
    """單幀輸入 (左、右、確認)"""
    left: bool = False
    right: bool = False
    confirm: bool = False


@dataclass
class MessageVisibility:
    """三段提示文字的可見狀態"""
    opening: bool = True
    game_over: bool = False
    player_won: bool = False


@dataclass
class GameRules:
    """
    可調整的玩法參數

    速度單位為每秒像素，與宿主引擎的積分方式一致。
    """
    paddle_speed: float = 350.0
    launch_velocity: float = -200.0
    brick_bump_speed: float = 150.0
    paddle_bounce_vy_increment: float = 5.0
    paddle_bounce_vx_increment: float = 5.0
    floor_y: float = 640.0
    ball_offset_x: float = 0.0

    def validate(self):
        """檢查參數，不合法時拋出 ValueError"""
        if self.paddle_speed <= 0:
            raise ValueError(f"paddle_speed 必須為正數: {self.paddle_speed}")
        if self.launch_velocity >= 0:
            raise ValueError(f"launch_velocity 必須向上 (負數): {self.launch_velocity}")
        if self.brick_bump_speed <= 0:
            raise ValueError(f"brick_bump_speed 必須為正數: {self.brick_bump_speed}")
        if self.paddle_bounce_vy_increment < 0 or self.paddle_bounce_vx_increment < 0:
            raise ValueError("擋板加速增量不可為負數")
        if self.floor_y <= 0:
            raise ValueError(f"floor_y 必須為正數: {self.floor_y}")


@dataclass
class GameSession:
    """單一遊戲場次的全部可變狀態"""

    paddle: Paddle
    ball: Ball
    tiers: List[BrickTier] = field(default_factory=list)
    phase: GamePhase = GamePhase.AWAITING_START
    messages: MessageVisibility = field(default_factory=MessageVisibility)

    # 統計
    bricks_removed: int = 0
    paddle_hits: int = 0
    frame: int = 0

    # 確認鍵邊緣偵測
    confirm_was_down: bool = False

    def count_active_bricks(self) -> int:
        return sum(tier.count_active() for tier in self.tiers)

    def total_bricks(self) -> int:
        return sum(len(tier) for tier in self.tiers)

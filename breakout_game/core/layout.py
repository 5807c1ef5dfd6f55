"""
場次佈局：依設定建立擋板、球與磚塊層
"""

from typing import Dict, Any, Iterable, List, Optional

from ..config.constants import (
    PADDLE_START_X, PADDLE_START_Y, PADDLE_WIDTH, PADDLE_HEIGHT,
    BALL_START_X, BALL_START_Y, BALL_RADIUS,
    BRICK_WIDTH, BRICK_HEIGHT, DEFAULT_BRICK_TIERS,
)
from .entities import Paddle, Ball, Brick, BrickTier
from .game_state import GameSession


def build_tier(tier_config: Dict[str, Any],
               brick_width: float = BRICK_WIDTH,
               brick_height: float = BRICK_HEIGHT) -> BrickTier:
    """
    建立一排磚塊

    Args:
        tier_config: 包含 name, image, color, count, x, y, step_x 的字典
    """
    tier = BrickTier(
        name=tier_config["name"],
        image_key=tier_config.get("image", tier_config["name"]),
        color=tuple(tier_config.get("color", (255, 255, 255))),
    )
    for i in range(tier_config["count"]):
        tier.bricks.append(Brick(
            x=tier_config["x"] + i * tier_config.get("step_x", brick_width),
            y=tier_config["y"],
            width=brick_width,
            height=brick_height,
            tier=tier.name,
        ))
    return tier


def build_session(brick_tiers: Optional[Iterable[Dict[str, Any]]] = None,
                  geometry: Optional[Dict[str, float]] = None) -> GameSession:
    """依設定建立新的遊戲場次 (參數為 None 時使用預設值)"""
    tier_configs = brick_tiers if brick_tiers is not None else DEFAULT_BRICK_TIERS
    geometry = geometry or {}

    paddle = Paddle(
        x=geometry.get("paddle_x", PADDLE_START_X),
        y=geometry.get("paddle_y", PADDLE_START_Y),
        width=geometry.get("paddle_width", PADDLE_WIDTH),
        height=geometry.get("paddle_height", PADDLE_HEIGHT),
    )
    ball = Ball(
        x=geometry.get("ball_x", BALL_START_X),
        y=geometry.get("ball_y", BALL_START_Y),
        radius=geometry.get("ball_radius", BALL_RADIUS),
    )
    tiers: List[BrickTier] = [
        build_tier(tier_config,
                   geometry.get("brick_width", BRICK_WIDTH),
                   geometry.get("brick_height", BRICK_HEIGHT))
        for tier_config in tier_configs
    ]
    return GameSession(paddle=paddle, ball=ball, tiers=tiers)

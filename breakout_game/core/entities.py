"""
遊戲實體：擋板、球、磚塊與磚塊層
"""

from typing import List, Tuple
from dataclasses import dataclass, field


@dataclass
class Paddle:
    """擋板 (只能水平移動，不會被球推開)"""
    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0

    @property
    def top(self) -> float:
        return self.y - self.height / 2


@dataclass
class Ball:
    """球"""
    x: float
    y: float
    radius: float
    vx: float = 0.0
    vy: float = 0.0
    active: bool = True

    def disable(self):
        """移出模擬 (不再移動也不顯示)"""
        self.active = False

    def speed(self) -> Tuple[float, float]:
        """回傳 (|vx|, |vy|)"""
        return abs(self.vx), abs(self.vy)


@dataclass
class Brick:
    """磚塊，只有 active 與 removed 兩種狀態"""
    x: float
    y: float
    width: float
    height: float
    tier: str = ""
    active: bool = True

    def remove(self) -> bool:
        """
        移除磚塊 (永久)

        Returns:
            這次呼叫是否真的移除了磚塊
        """
        if not self.active:
            return False
        self.active = False
        return True


@dataclass
class BrickTier:
    """同顏色的一排磚塊"""
    name: str
    image_key: str
    color: Tuple[int, int, int]
    bricks: List[Brick] = field(default_factory=list)

    def count_active(self) -> int:
        return sum(1 for brick in self.bricks if brick.active)

    def active_bricks(self) -> List[Brick]:
        return [brick for brick in self.bricks if brick.active]

    def __len__(self) -> int:
        return len(self.bricks)

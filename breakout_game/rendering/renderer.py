"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from ..core.game_state import InputState


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器"""
        pass

    @abstractmethod
    def load_images(self, image_paths: Dict[str, str]):
        """載入圖片資源"""
        pass

    @abstractmethod
    def clear(self):
        """清空畫面"""
        pass

    @abstractmethod
    def draw_background(self):
        """繪製背景"""
        pass

    @abstractmethod
    def draw_paddle(self, x: int, y: int, width: int, height: int):
        """繪製擋板 (x, y 為中心)"""
        pass

    @abstractmethod
    def draw_ball(self, x: int, y: int, radius: int):
        """繪製球"""
        pass

    @abstractmethod
    def draw_brick(self, x: int, y: int, width: int, height: int,
                   image_key: str, color: Tuple[int, int, int]):
        """繪製磚塊"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'message', color: Optional[Tuple[int, int, int]] = None,
                  center: bool = False):
        """繪製文字"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> dict:
        """處理事件"""
        pass

    @abstractmethod
    def read_input(self) -> InputState:
        """讀取目前按住的方向鍵與空白鍵"""
        pass

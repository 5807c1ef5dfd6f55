"""
Pygame渲染器實現
"""

import pygame
from pathlib import Path
from typing import Dict, Optional, Tuple

from .renderer import Renderer
from ..core.game_state import InputState
from ..config.constants import (
    THEME_COLORS, FONT_FAMILY_PRIMARY, FONT_SIZE_MESSAGE,
)


class PygameRenderer(Renderer):
    """Pygame渲染器"""

    def __init__(self):
        self.screen = None
        self.clock = None
        self.fonts = {}
        self.images: Dict[str, pygame.Surface] = {}
        self.width = 0
        self.height = 0

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        # SysFont 找不到字型時會自動退回預設字型
        self.fonts['message'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_MESSAGE)

    def load_images(self, image_paths: Dict[str, str]):
        """載入圖片，失敗時該物件改以色塊繪製"""
        for key, image_path in image_paths.items():
            if not image_path or not Path(image_path).exists():
                continue
            try:
                self.images[key] = pygame.image.load(image_path).convert_alpha()
            except pygame.error as e:
                print(f"[警告] 無法載入圖片 {image_path}: {e}")

    def _blit_centered(self, key: str, x: int, y: int) -> bool:
        image = self.images.get(key)
        if image is None:
            return False
        self.screen.blit(image, image.get_rect(center=(x, y)))
        return True

    def clear(self):
        """清空畫面"""
        self.screen.fill(THEME_COLORS['background'])

    def draw_background(self):
        """繪製背景"""
        self.clear()

    def draw_paddle(self, x: int, y: int, width: int, height: int):
        """繪製擋板"""
        if self._blit_centered('paddle', x, y):
            return
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (x, y)
        pygame.draw.rect(self.screen, THEME_COLORS['paddle'], rect, border_radius=6)

    def draw_ball(self, x: int, y: int, radius: int):
        """繪製球"""
        if self._blit_centered('ball', x, y):
            return
        pygame.draw.circle(self.screen, THEME_COLORS['ball'], (x, y), radius)

    def draw_brick(self, x: int, y: int, width: int, height: int,
                   image_key: str, color: Tuple[int, int, int]):
        """繪製磚塊"""
        if self._blit_centered(image_key, x, y):
            return
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (x, y)
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, THEME_COLORS['background'], rect, 2)

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'message', color: Optional[Tuple[int, int, int]] = None,
                  center: bool = False):
        """繪製文字"""
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['message'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def present(self):
        """呈現畫面"""
        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        pygame.quit()

    def handle_events(self) -> Dict:
        """處理事件"""
        events = {
            'quit': False,
            'restart': False,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events['quit'] = True
                elif event.key == pygame.K_r:
                    events['restart'] = True

        return events

    def read_input(self) -> InputState:
        """讀取方向鍵與空白鍵"""
        pressed = pygame.key.get_pressed()
        return InputState(
            left=bool(pressed[pygame.K_LEFT]),
            right=bool(pressed[pygame.K_RIGHT]),
            confirm=bool(pressed[pygame.K_SPACE]),
        )

    def tick(self, fps: float):
        """控制幀率"""
        if self.clock:
            self.clock.tick(fps)

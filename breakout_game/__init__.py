"""Breakout 遊戲核心套件"""

__version__ = "0.5.0"

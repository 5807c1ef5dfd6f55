"""配置管理模組"""

from .settings import Settings, load_settings
from .constants import *

__all__ = ['Settings', 'load_settings']

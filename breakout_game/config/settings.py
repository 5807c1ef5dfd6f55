"""
配置管理系統
"""

import copy
from pathlib import Path
from typing import Dict, Any, List
import yaml
import json

from .constants import (
    WORLD_WIDTH, WORLD_HEIGHT, DEFAULT_FPS, DEFAULT_MAX_STEPS,
    PADDLE_SPEED, LAUNCH_VELOCITY, BRICK_BUMP_SPEED,
    PADDLE_BOUNCE_VY_INCREMENT, PADDLE_BOUNCE_VX_INCREMENT, BALL_OFFSET_X,
    DEFAULT_BRICK_TIERS, ASSET_IMAGES,
)

# 以字典形式存在、載入時做合併而非整個取代的欄位
_MERGED_KEYS = ('rules', 'geometry', 'asset_images')

_TIER_KEYS = ('name', 'count', 'x', 'y')


class Settings:
    """配置管理類"""

    def __init__(self):
        # 世界設定
        self.world_width = WORLD_WIDTH
        self.world_height = WORLD_HEIGHT
        self.fps = DEFAULT_FPS
        self.max_steps = DEFAULT_MAX_STEPS

        # 玩法參數
        self.rules = {
            "paddle_speed": PADDLE_SPEED,
            "launch_velocity": LAUNCH_VELOCITY,
            "brick_bump_speed": BRICK_BUMP_SPEED,
            "paddle_bounce_vy_increment": PADDLE_BOUNCE_VY_INCREMENT,
            "paddle_bounce_vx_increment": PADDLE_BOUNCE_VX_INCREMENT,
            "ball_offset_x": BALL_OFFSET_X,
        }

        # 佈局 (空字典代表使用 constants 的預設值)
        self.geometry: Dict[str, float] = {}
        self.brick_tiers: List[Dict[str, Any]] = copy.deepcopy(DEFAULT_BRICK_TIERS)

        # 視覺化設定
        self.asset_images = dict(ASSET_IMAGES)
        self.enable_render = True

        # 自動遊玩設定
        self.autoplay_episodes = 50
        self.autoplay_seed = 0
        self.output_dir = "results_autoplay"
        self.generate_plots = True

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        self.update(config)

    def update(self, config: Dict[str, Any]):
        """以字典更新配置，未知欄位忽略"""
        for key, value in config.items():
            if not hasattr(self, key):
                continue
            if key in _MERGED_KEYS and isinstance(value, dict):
                getattr(self, key).update(value)
            else:
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'world_width': self.world_width,
            'world_height': self.world_height,
            'fps': self.fps,
            'max_steps': self.max_steps,
            'rules': dict(self.rules),
            'geometry': dict(self.geometry),
            'brick_tiers': [
                {**tier, 'color': list(tier.get('color', (255, 255, 255)))}
                for tier in self.brick_tiers
            ],
            'asset_images': dict(self.asset_images),
            'enable_render': self.enable_render,
            'autoplay_episodes': self.autoplay_episodes,
            'autoplay_seed': self.autoplay_seed,
            'output_dir': self.output_dir,
            'generate_plots': self.generate_plots,
        }

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def to_rules(self):
        """建立 GameRules，地板位置預設為世界高度"""
        from dataclasses import fields
        from ..core.game_state import GameRules

        if not isinstance(self.rules, dict) or not self.rules:
            raise ValueError(f"rules 必須是非空的字典: {self.rules!r}")
        known = {f.name for f in fields(GameRules)}
        unknown = sorted(set(self.rules) - known)
        if unknown:
            raise ValueError(f"未知的 rules 欄位: {unknown}")

        params = dict(self.rules)
        params.setdefault("floor_y", self.world_height)
        bad = sorted(k for k, v in params.items()
                     if isinstance(v, bool) or not isinstance(v, (int, float)))
        if bad:
            raise ValueError(f"rules 欄位必須是數值: {bad}")
        return GameRules(**{k: float(v) for k, v in params.items()})

    def env_params(self) -> Dict[str, Any]:
        """BreakoutEnv 的建構參數"""
        return {
            "world_width": self.world_width,
            "world_height": self.world_height,
            "fps": self.fps,
            "max_steps": self.max_steps,
            "rules": self.to_rules(),
            "brick_tiers": self.brick_tiers,
            "geometry": self.geometry,
            "asset_images": self.asset_images,
        }

    def validate(self) -> bool:
        """驗證配置的有效性"""
        if self.world_width <= 0 or self.world_height <= 0:
            raise ValueError(f"世界尺寸不合法: {self.world_width}x{self.world_height}")
        if self.fps <= 0:
            raise ValueError(f"fps 必須為正數: {self.fps}")

        self.to_rules().validate()

        if not self.brick_tiers:
            raise ValueError("至少需要一排磚塊")
        for tier in self.brick_tiers:
            missing = [k for k in _TIER_KEYS if k not in tier]
            if missing:
                raise ValueError(f"磚塊層設定缺少欄位 {missing}: {tier}")
            if tier['count'] < 1:
                raise ValueError(f"磚塊層 {tier['name']} 的 count 必須至少為 1")

        # 檢查圖片 (缺少時以色塊代替)
        for key, image_path in self.asset_images.items():
            if image_path and not Path(image_path).exists():
                print(f"警告: 圖片不存在 ({key}): {image_path}")

        return True


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)

    settings.validate()
    return settings

"""
常數定義
"""

# 世界尺寸
WORLD_WIDTH = 800
WORLD_HEIGHT = 640
DEFAULT_FPS = 60
DEFAULT_MAX_STEPS = 20000

# 擋板
PADDLE_START_X = 400
PADDLE_START_Y = 600
PADDLE_WIDTH = 128
PADDLE_HEIGHT = 32

# 球
BALL_START_X = 400
BALL_START_Y = 565
BALL_RADIUS = 16

# 玩法參數 (原始版本觀察值)
PADDLE_SPEED = 350
LAUNCH_VELOCITY = -200
BRICK_BUMP_SPEED = 150
PADDLE_BOUNCE_VY_INCREMENT = 5
PADDLE_BOUNCE_VX_INCREMENT = 5
BALL_OFFSET_X = 0

# 磚塊
BRICK_WIDTH = 64
BRICK_HEIGHT = 32
DEFAULT_BRICK_TIERS = [
    {"name": "violet", "image": "brick1", "color": (148, 80, 220),
     "count": 10, "x": 80, "y": 140, "step_x": 70},
    {"name": "yellow", "image": "brick2", "color": (240, 200, 60),
     "count": 10, "x": 80, "y": 90, "step_x": 70},
    {"name": "red", "image": "brick3", "color": (220, 60, 60),
     "count": 10, "x": 80, "y": 40, "step_x": 70},
]

# 資源
ASSET_IMAGES = {
    "ball": "assets/images/ball_32_32.png",
    "paddle": "assets/images/paddle_128_32.png",
    "brick1": "assets/images/brick1_64_32.png",
    "brick2": "assets/images/brick2_64_32.png",
    "brick3": "assets/images/brick3_64_32.png",
}

# 文字
OPENING_TEXT = "Press SPACE to Start"
GAME_OVER_TEXT = "Game Over"
PLAYER_WON_TEXT = "You won!"
FONT_FAMILY_PRIMARY = "Monaco, Courier, monospace"
FONT_SIZE_MESSAGE = 50

# 主題顏色
THEME_COLORS = {
    'background': (0, 0, 0),
    'paddle': (230, 230, 230),
    'ball': (255, 255, 255),
    'text_primary': (255, 255, 255),
}

# 獎勵
REWARD_BRICK = 1.0
REWARD_WIN = 10.0
REWARD_LOSS = -10.0

# 觀測正規化用的速度尺度
VELOCITY_SCALE = 1000.0

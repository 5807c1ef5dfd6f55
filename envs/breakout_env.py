import gymnasium as gym
from gymnasium import spaces
import numpy as np
import pygame

from breakout_game.config import constants
from breakout_game.core import (
    GameplayStateMachine, GamePhase, GameRules, InputState, build_session,
)

PHASE_INDEX = {
    GamePhase.AWAITING_START: 0,
    GamePhase.PLAYING: 1,
    GamePhase.WON: 2,
    GamePhase.LOST: 3,
}


class BreakoutEnv(gym.Env):
    """
    單人 Breakout：
      - 動作 (move, confirm): move {0=左,1=不動,2=右}, confirm {0,1}
      - 觀測 7 維: (ball_x, ball_y, ball_vx, ball_vy, paddle_x, 剩餘磚塊比例, phase)
      - 宿主只負責街機式積分、邊界與碰撞偵測；反應規則全部交給 GameplayStateMachine
      - 地板沒有碰撞，球掉出去即輸
    """

    metadata = {"render_modes": ["human"], "render_fps": constants.DEFAULT_FPS}

    def __init__(self,
                 world_width=constants.WORLD_WIDTH,
                 world_height=constants.WORLD_HEIGHT,
                 fps=constants.DEFAULT_FPS,
                 max_steps=constants.DEFAULT_MAX_STEPS,
                 rules=None,
                 brick_tiers=None,
                 geometry=None,
                 asset_images=None,
                 enable_render=False
                 ):
        super().__init__()
        self.world_width = world_width
        self.world_height = world_height
        self.fps = fps
        self.dt = 1.0 / fps
        self.max_steps = max_steps
        self.rules = rules if rules is not None else GameRules(floor_y=float(world_height))
        self.brick_tiers = brick_tiers
        self.geometry = geometry
        self.asset_images = asset_images if asset_images is not None else constants.ASSET_IMAGES
        self.enable_render = enable_render
        self.render_mode = "human" if enable_render else None

        self.machine = GameplayStateMachine(self.rules)
        self.session = None
        self.steps = 0

        self.action_space = spaces.MultiDiscrete([3, 2])
        # 球掉出地板時 y 會超過 1，因此不設上下界
        self.observation_space = spaces.Box(-np.inf, np.inf, shape=(7,), dtype=np.float32)

        self.renderer = None
        if self.enable_render:
            from breakout_game.rendering import PygameRenderer
            self.renderer = PygameRenderer()
            self.renderer.init(self.world_width, self.world_height, "Breakout")
            self.renderer.load_images(self.asset_images)

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.session = build_session(self.brick_tiers, self.geometry)
        # 磚塊碰撞的隨機方向跟著環境種子走
        self.machine.random_source = self.np_random
        self.steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        session = self.session
        if session.phase.is_terminal:
            return self._get_obs(), 0.0, True, False, self._get_info()

        input_state = self._to_input(action)
        removed_before = session.bricks_removed

        # 宿主先移動擋板，狀態機再讓待發的球對齊擋板
        self._integrate_paddle()
        self.machine.on_frame_update(session, input_state)
        self.steps += 1

        reward = 0.0
        if session.phase.is_terminal:
            reward = constants.REWARD_WIN if session.phase is GamePhase.WON else constants.REWARD_LOSS
            return self._get_obs(), reward, True, False, self._get_info()

        self._integrate_ball()
        self._collide_paddle()
        self._collide_bricks()

        reward += constants.REWARD_BRICK * (session.bricks_removed - removed_before)
        truncated = self.steps >= self.max_steps
        return self._get_obs(), reward, False, truncated, self._get_info()

    # ---------- 輸入 ----------
    @staticmethod
    def _to_input(action):
        if isinstance(action, InputState):
            return action
        move, confirm = int(action[0]), int(action[1])
        return InputState(left=(move == 0), right=(move == 2), confirm=bool(confirm))

    # ---------- 街機物理 ----------
    def _integrate_paddle(self):
        paddle = self.session.paddle
        paddle.x += paddle.vx * self.dt
        half = paddle.width / 2
        paddle.x = float(np.clip(paddle.x, half, self.world_width - half))

    def _integrate_ball(self):
        ball = self.session.ball
        if not ball.active:
            return
        ball.x += ball.vx * self.dt
        ball.y += ball.vy * self.dt

        # 左右牆與天花板 (恢復係數 1)
        r = ball.radius
        if ball.x - r < 0:
            ball.x = r
            ball.vx = abs(ball.vx)
        elif ball.x + r > self.world_width:
            ball.x = self.world_width - r
            ball.vx = -abs(ball.vx)
        if ball.y - r < 0:
            ball.y = r
            ball.vy = abs(ball.vy)

    def _ball_rect(self):
        ball = self.session.ball
        size = int(round(ball.radius * 2))
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (int(round(ball.x)), int(round(ball.y)))
        return rect

    @staticmethod
    def _body_rect(body):
        rect = pygame.Rect(0, 0, int(body.width), int(body.height))
        rect.center = (int(round(body.x)), int(round(body.y)))
        return rect

    def _collide_paddle(self):
        session = self.session
        ball, paddle = session.ball, session.paddle
        if not ball.active or ball.vy <= 0:
            return
        if not self._ball_rect().colliderect(self._body_rect(paddle)):
            return

        # 擋板不動，球被推回擋板上方並反彈
        ball.y = paddle.top - ball.radius
        ball.vy = -ball.vy
        self.machine.on_ball_paddle_collision(session, ball, paddle)

    def _collide_bricks(self):
        session = self.session
        ball = session.ball
        if not ball.active:
            return

        ball_rect = self._ball_rect()
        bounced = False
        for tier in session.tiers:
            for brick in tier.active_bricks():
                if not ball_rect.colliderect(self._body_rect(brick)):
                    continue
                if not bounced:
                    self._reflect_off(ball, brick)
                    bounced = True
                self.machine.on_ball_brick_collision(session, ball, brick)

    @staticmethod
    def _reflect_off(ball, brick):
        """沿穿透量較小的軸反彈"""
        overlap_x = (ball.radius + brick.width / 2) - abs(ball.x - brick.x)
        overlap_y = (ball.radius + brick.height / 2) - abs(ball.y - brick.y)
        if overlap_x < overlap_y:
            if ball.x < brick.x:
                ball.x -= overlap_x
                ball.vx = -abs(ball.vx)
            else:
                ball.x += overlap_x
                ball.vx = abs(ball.vx)
        else:
            if ball.y < brick.y:
                ball.y -= overlap_y
                ball.vy = -abs(ball.vy)
            else:
                ball.y += overlap_y
                ball.vy = abs(ball.vy)

    # ---------- 觀測 ----------
    def _get_obs(self):
        session = self.session
        ball, paddle = session.ball, session.paddle
        total = session.total_bricks()
        remaining = session.count_active_bricks() / total if total else 0.0
        return np.array([
            ball.x / self.world_width,
            ball.y / self.world_height,
            ball.vx / constants.VELOCITY_SCALE,
            ball.vy / constants.VELOCITY_SCALE,
            paddle.x / self.world_width,
            remaining,
            PHASE_INDEX[session.phase],
        ], dtype=np.float32)

    def _get_info(self):
        session = self.session
        return {
            "phase": session.phase.value,
            "bricks_remaining": session.count_active_bricks(),
            "bricks_removed": session.bricks_removed,
            "paddle_hits": session.paddle_hits,
            "frame": session.frame,
            "steps": self.steps,
        }

    def render(self):
        if not self.enable_render:
            return
        session = self.session
        renderer = self.renderer

        renderer.draw_background()
        for tier in session.tiers:
            for brick in tier.active_bricks():
                renderer.draw_brick(int(brick.x), int(brick.y), int(brick.width),
                                    int(brick.height), tier.image_key, tier.color)

        paddle = session.paddle
        renderer.draw_paddle(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))

        ball = session.ball
        if ball.active:
            renderer.draw_ball(int(ball.x), int(ball.y), int(ball.radius))

        # 提示文字置中
        cx, cy = self.world_width // 2, self.world_height // 2
        if session.messages.opening:
            renderer.draw_text(constants.OPENING_TEXT, cx, cy, center=True)
        if session.messages.game_over:
            renderer.draw_text(constants.GAME_OVER_TEXT, cx, cy, center=True)
        if session.messages.player_won:
            renderer.draw_text(constants.PLAYER_WON_TEXT, cx, cy, center=True)

        renderer.present()
        renderer.tick(self.fps)

    def close(self):
        if self.renderer is not None:
            self.renderer.cleanup()
            self.renderer = None

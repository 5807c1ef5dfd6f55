"""
玩法狀態機

宿主引擎每幀呼叫 on_frame_update，偵測到碰撞時呼叫
on_ball_brick_collision / on_ball_paddle_collision。
狀態機本身不輪詢也不驅動引擎。
"""

import random
from typing import Optional, Protocol

from .entities import Ball, Brick, Paddle
from .game_state import GamePhase, GameRules, GameSession, InputState


class RandomSource(Protocol):
    """回傳 [0, 1) 浮點數的亂數來源 (random.Random、numpy Generator 皆符合)"""

    def random(self) -> float:
        ...


class GameplayStateMachine:
    """玩法狀態機"""

    def __init__(self, rules: Optional[GameRules] = None,
                 random_source: Optional[RandomSource] = None):
        """
        初始化狀態機

        Args:
            rules: 玩法參數
            random_source: 磚塊碰撞時決定水平方向的亂數來源
        """
        self.rules = rules if rules is not None else GameRules()
        self.random_source = random_source if random_source is not None else random.Random()

    # ---------- 每幀更新 ----------
    def on_frame_update(self, session: GameSession, input_state: InputState):
        """處理一幀的輸入與階段轉換"""
        if session.phase.is_terminal:
            return

        if self._check_transitions(session):
            return

        paddle = session.paddle
        paddle.vx = 0.0
        # 左右同時按下時以左為準
        if input_state.left:
            paddle.vx = -self.rules.paddle_speed
        elif input_state.right:
            paddle.vx = self.rules.paddle_speed

        if session.phase is GamePhase.AWAITING_START:
            # 發球前球跟著擋板走
            session.ball.x = paddle.x + self.rules.ball_offset_x

            if input_state.confirm and not session.confirm_was_down:
                self._launch(session)

        session.confirm_was_down = input_state.confirm
        session.frame += 1

    def _launch(self, session: GameSession):
        session.phase = GamePhase.PLAYING
        session.ball.vy = self.rules.launch_velocity
        session.messages.opening = False

    def _check_transitions(self, session: GameSession) -> bool:
        """檢查輸/贏，回傳是否進入終局"""
        # 球整顆掉出地板 (上緣超過地板) 才算輸
        if session.ball.y - session.ball.radius > self.rules.floor_y:
            self._finish(session, GamePhase.LOST)
            session.messages.game_over = True
            return True
        if session.count_active_bricks() == 0:
            self._finish(session, GamePhase.WON)
            session.messages.player_won = True
            return True
        return False

    def _finish(self, session: GameSession, phase: GamePhase):
        session.phase = phase
        session.ball.disable()
        session.paddle.vx = 0.0

    # ---------- 碰撞回呼 ----------
    def on_ball_brick_collision(self, session: GameSession, ball: Ball, brick: Brick):
        """球撞到磚塊：移除磚塊，垂直移動的球給一個隨機水平速度"""
        if not brick.remove():
            return
        session.bricks_removed += 1

        if ball.vx == 0:
            if self.random_source.random() >= 0.5:
                ball.vx = self.rules.brick_bump_speed
            else:
                ball.vx = -self.rules.brick_bump_speed

    def on_ball_paddle_collision(self, session: GameSession, ball: Ball, paddle: Paddle):
        """
        球撞到擋板

        每次碰撞都加速；反彈方向由球相對擋板中心的位置決定，
        與入射角度無關。
        """
        ball.vy -= self.rules.paddle_bounce_vy_increment

        speed_x = abs(ball.vx) + self.rules.paddle_bounce_vx_increment
        if ball.x < paddle.x:
            ball.vx = -speed_x
        else:
            ball.vx = speed_x

        session.paddle_hits += 1

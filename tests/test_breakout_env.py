import numpy as np
import pytest

from breakout_game.core import GamePhase, InputState
from envs.breakout_env import BreakoutEnv

STAY = np.array([1, 0])
LAUNCH = np.array([1, 1])


@pytest.fixture
def env():
    env = BreakoutEnv()
    env.reset(seed=0)
    yield env
    env.close()


def launched(env):
    env.step(LAUNCH)
    return env.session


def test_reset_returns_observation_and_info(env):
    obs, info = env.reset(seed=3)
    assert obs.shape == (7,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["phase"] == "awaiting_start"
    assert info["bricks_remaining"] == 30
    assert obs[5] == pytest.approx(1.0)


def test_launch_step_moves_ball_up(env):
    obs, reward, terminated, truncated, info = env.step(LAUNCH)
    ball = env.session.ball
    assert info["phase"] == "playing"
    assert ball.vy == -200
    assert ball.y == pytest.approx(565 - 200 / 60)
    assert reward == 0.0
    assert not terminated and not truncated


def test_paddle_is_clamped_to_world(env):
    for _ in range(200):
        env.step(np.array([0, 0]))
    assert env.session.paddle.x == 64.0
    for _ in range(400):
        env.step(np.array([2, 0]))
    assert env.session.paddle.x == 800 - 64.0


def test_step_accepts_input_state(env):
    # 速度在下一幀才積分到位置上
    env.step(InputState(left=True, right=True))
    env.step(InputState(left=True, right=True))
    assert env.session.paddle.x < 400


def test_ball_rides_paddle_until_launch(env):
    session = env.session
    for _ in range(10):
        env.step(InputState(left=True))
        assert session.phase is GamePhase.AWAITING_START
        assert session.ball.x == session.paddle.x
    assert session.paddle.x < 400

    paddle_x = session.paddle.x
    env.step(InputState(left=True, confirm=True))
    assert session.phase is GamePhase.PLAYING
    assert session.ball.x == session.paddle.x
    assert session.ball.x != paddle_x
    assert session.ball.vx == 0.0


def test_ball_bounces_off_side_wall(env):
    ball = launched(env).ball
    ball.x, ball.y, ball.vx, ball.vy = 790.0, 300.0, 300.0, -100.0
    env.step(STAY)
    assert ball.vx == -300.0
    assert ball.x == 800 - ball.radius


def test_ball_bounces_off_ceiling(env):
    ball = launched(env).ball
    ball.x, ball.y, ball.vx, ball.vy = 760.0, 10.0, 0.0, -200.0
    env.step(STAY)
    assert ball.vy == 200.0
    assert ball.y == ball.radius


def test_ball_hits_brick_from_below(env):
    session = launched(env)
    ball = session.ball
    brick = session.tiers[0].bricks[0]
    ball.x, ball.y, ball.vx, ball.vy = brick.x, 170.0, 0.0, -200.0

    obs, reward, terminated, truncated, info = env.step(STAY)

    assert not brick.active
    assert abs(ball.vx) == 150
    assert ball.vy == 200.0
    assert reward == 1.0
    assert info["bricks_remaining"] == 29


def test_bump_direction_follows_seed():
    directions = []
    for _ in range(2):
        env = BreakoutEnv()
        env.reset(seed=42)
        session = launched(env)
        brick = session.tiers[0].bricks[2]
        session.ball.x, session.ball.y = brick.x, 170.0
        session.ball.vx, session.ball.vy = 0.0, -200.0
        env.step(STAY)
        directions.append(session.ball.vx)
        env.close()
    assert directions[0] == directions[1]


def test_ball_bounces_off_paddle(env):
    session = launched(env)
    ball, paddle = session.ball, session.paddle
    ball.x, ball.y, ball.vx, ball.vy = paddle.x - 20, 570.0, 0.0, 200.0

    env.step(STAY)

    assert session.paddle_hits == 1
    assert ball.vy == -205.0
    assert ball.vx == -5.0
    assert ball.y == paddle.top - ball.radius


def test_ball_falls_through_floor_and_loses(env):
    session = launched(env)
    session.ball.x, session.ball.y, session.ball.vy = 50.0, 655.0, 300.0
    env.step(STAY)
    assert session.ball.y - session.ball.radius > 640
    assert session.phase is GamePhase.PLAYING

    obs, reward, terminated, truncated, info = env.step(STAY)
    assert terminated
    assert reward == -10.0
    assert info["phase"] == "lost"
    assert not session.ball.active
    assert session.messages.game_over


def test_clearing_bricks_wins(env):
    session = launched(env)
    for tier in session.tiers:
        for brick in tier.bricks:
            brick.remove()
    obs, reward, terminated, truncated, info = env.step(STAY)
    assert terminated
    assert reward == 10.0
    assert session.phase is GamePhase.WON
    assert obs[6] == 2


def test_steps_after_termination_are_inert(env):
    session = launched(env)
    session.ball.y = 900.0
    env.step(STAY)
    paddle_x = session.paddle.x
    obs, reward, terminated, truncated, info = env.step(np.array([0, 1]))
    assert terminated
    assert reward == 0.0
    assert session.paddle.x == paddle_x
    assert info["phase"] == "lost"


def test_truncates_at_max_steps():
    env = BreakoutEnv(max_steps=3)
    results = [env.step(STAY) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]
    env.close()


def test_custom_tiers():
    tiers = [{"name": "only", "image": "brick1", "color": [1, 2, 3], "count": 4, "x": 100, "y": 50, "step_x": 80}]
    env = BreakoutEnv(brick_tiers=tiers)
    assert env.session.total_bricks() == 4
    assert [b.x for b in env.session.tiers[0].bricks] == [100, 180, 260, 340]
    env.close()


def test_ball_straddling_floor_is_still_in_play(env):
    session = launched(env)
    session.ball.x, session.ball.y, session.ball.vy = 50.0, 630.0, 300.0
    for _ in range(3):
        obs, reward, terminated, truncated, info = env.step(STAY)
    assert session.ball.y - session.ball.radius <= 640
    assert not terminated
    assert info["phase"] == "playing"

import numpy as np
import pandas as pd

from autoplay import BallFollowerBot, run_autoplay, run_episode, summarize
from breakout_game.config import Settings
from envs.breakout_env import BreakoutEnv


def test_bot_follows_ball():
    bot = BallFollowerBot(tolerance=0.02)
    obs = np.zeros(7, dtype=np.float32)
    obs[0], obs[4] = 0.2, 0.5
    assert list(bot.select_action(obs)) == [0, 1]
    obs[0] = 0.8
    assert list(bot.select_action(obs)) == [2, 1]
    obs[0] = 0.51
    assert list(bot.select_action(obs)) == [1, 1]


def test_run_episode_records_result():
    env = BreakoutEnv(max_steps=40)
    record = run_episode(env, BallFollowerBot(), seed=7)
    env.close()
    assert record["seed"] == 7
    assert record["result"] == "truncated"
    assert record["frames"] == 40
    assert record["bricks_removed"] == 0


def test_run_autoplay_is_reproducible():
    settings = Settings()
    settings.max_steps = 1500
    settings.autoplay_episodes = 2
    settings.autoplay_seed = 5

    first = run_autoplay(settings)
    second = run_autoplay(settings)

    assert list(first.index) == [5, 6]
    assert set(first["result"]) <= {"won", "lost", "truncated"}
    pd.testing.assert_frame_equal(first, second)
    assert (first["bricks_removed"] > 0).all()


def test_summarize():
    results = pd.DataFrame({
        "result": ["won", "lost", "lost", "truncated"],
        "bricks_removed": [30, 10, 20, 4],
        "paddle_hits": [8, 2, 4, 2],
        "frames": [4000, 900, 1100, 200],
    })
    summary = summarize(results)
    assert summary["episodes"] == 4
    assert summary["win_rate"] == 0.25
    assert summary["loss_rate"] == 0.5
    assert summary["mean_bricks_removed"] == 16.0

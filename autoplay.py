#!/usr/bin/env python3
"""
autoplay.py ─ 無畫面自動遊玩評測
====================================================================
- 以硬編碼的 BallFollowerBot 連續遊玩多個場次 (無需開視窗)。
- 每個場次使用固定種子，結果可重現。
- 使用 tqdm 顯示進度，pandas 彙整結果並輸出 CSV。
- 可選生成「擊破磚塊數」分布圖。
"""
from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Dict, List, Any

import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib import pyplot as plt
from tqdm import tqdm

from breakout_game.config import Settings, load_settings
from envs.breakout_env import BreakoutEnv


# ────────────────── 1. 自動遊玩代理 ──────────────────
class BallFollowerBot:
    """讓擋板中心追著球的 x 座標移動，第一幀就發球"""

    def __init__(self, tolerance: float = 0.02):
        self.tolerance = tolerance

    def select_action(self, obs: np.ndarray) -> np.ndarray:
        ball_x, paddle_x = obs[0], obs[4]
        if ball_x < paddle_x - self.tolerance: move = 0  # Left
        elif ball_x > paddle_x + self.tolerance: move = 2  # Right
        else: move = 1  # Stay
        return np.array([move, 1], dtype=np.int64)


# ────────────────── 2. 執行場次 ──────────────────
def run_episode(env: BreakoutEnv, bot: BallFollowerBot, seed: int) -> Dict[str, Any]:
    """執行單一場次並回傳紀錄"""
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    terminated = truncated = False

    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(bot.select_action(obs))
        total_reward += reward

    result = info["phase"] if terminated else "truncated"
    return {
        "seed": seed,
        "result": result,
        "bricks_removed": info["bricks_removed"],
        "bricks_remaining": info["bricks_remaining"],
        "paddle_hits": info["paddle_hits"],
        "frames": info["frame"],
        "total_reward": total_reward,
    }


def run_autoplay(settings: Settings) -> pd.DataFrame:
    """依設定執行所有場次"""
    params = settings.env_params()
    params["enable_render"] = False
    env = BreakoutEnv(**params)
    bot = BallFollowerBot()

    records: List[Dict[str, Any]] = []
    seeds = range(settings.autoplay_seed, settings.autoplay_seed + settings.autoplay_episodes)
    for seed in tqdm(seeds, desc="自動遊玩", unit="局"):
        records.append(run_episode(env, bot, seed))
    env.close()

    return pd.DataFrame(records).set_index("seed")


# ────────────────── 3. 報告與視覺化 ──────────────────
def summarize(results: pd.DataFrame) -> pd.Series:
    """彙整勝率與平均數據"""
    episodes = len(results)
    return pd.Series({
        "episodes": episodes,
        "win_rate": (results["result"] == "won").mean() if episodes else 0.0,
        "loss_rate": (results["result"] == "lost").mean() if episodes else 0.0,
        "mean_bricks_removed": results["bricks_removed"].mean() if episodes else 0.0,
        "mean_paddle_hits": results["paddle_hits"].mean() if episodes else 0.0,
        "mean_frames": results["frames"].mean() if episodes else 0.0,
    })


def plot_bricks_histogram(results: pd.DataFrame, output_path: Path):
    """生成擊破磚塊數分布圖"""
    plt.figure(figsize=(8, 5))
    sns.histplot(data=results, x="bricks_removed", hue="result", multiple="stack", discrete=True)
    plt.xlabel("Bricks removed")
    plt.ylabel("Episodes")
    plt.title("Bricks Removed per Episode (BallFollowerBot)")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close()
    print(f"[圖表] 分布圖已儲存至: {output_path}")


# ────────────────── 4. 主執行函數 ──────────────────
def main():
    start_time = time.time()
    print("=" * 60)
    print("       🧱 Breakout 自動遊玩評測 🧱")
    print("=" * 60)

    config_path = sys.argv[1] if len(sys.argv) > 1 else "config.yaml"
    settings = load_settings(config_path)

    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    print(f"[資訊] 場次數: {settings.autoplay_episodes}, 起始種子: {settings.autoplay_seed}")

    results = run_autoplay(settings)
    summary = summarize(results)

    timestamp = time.strftime('%Y%m%d_%H%M%S')
    csv_path = output_dir / f"autoplay_{timestamp}.csv"
    results.to_csv(csv_path)
    print(f"\n[報告] 逐局結果已儲存至: {csv_path}")

    print("\n" + "=" * 25 + " 彙整 " + "=" * 25)
    print(summary.to_string(float_format="{:.2f}".format))

    if settings.generate_plots and len(results):
        plot_bricks_histogram(results, output_dir / f"bricks_hist_{timestamp}.png")

    total_time = time.time() - start_time
    print(f"\n[完成] 自動遊玩總耗時: {total_time:.2f} 秒。")


if __name__ == "__main__":
    main()

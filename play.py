#!/usr/bin/env python3
"""
Breakout Player
鍵盤操作：← → 移動擋板，SPACE 發球，R 重新開始，ESC 離開
"""

import sys

from breakout_game.config import Settings, load_settings
from breakout_game.core import GamePhase
from envs.breakout_env import BreakoutEnv


class BreakoutPlayer:
    """互動遊玩應用"""

    def __init__(self, settings: Settings):
        """初始化"""
        self.settings = settings
        self.env = None
        self.sessions_played = 0

    def initialize(self):
        """初始化系統"""
        params = self.settings.env_params()
        params["enable_render"] = self.settings.enable_render
        self.env = BreakoutEnv(**params)
        print(f"[資訊] 世界大小: {self.env.world_width}x{self.env.world_height}, "
              f"磚塊數: {self.env.session.total_bricks()}")

    def run(self):
        """運行主迴圈"""
        running = True
        while running:
            running = self._run_session()
            self.sessions_played += 1

        self.cleanup()

    def _run_session(self) -> bool:
        """運行單個場次，回傳是否要再玩一局"""
        self.env.reset()
        reported = False

        while True:
            events = self.env.renderer.handle_events()
            if events['quit']:
                return False
            if events['restart']:
                print("[資訊] 重新開始")
                return True

            input_state = self.env.renderer.read_input()
            _, _, terminated, truncated, info = self.env.step(input_state)

            if terminated and not reported:
                self._report(info)
                reported = True
            if truncated:
                print("[警告] 達到最大步數，場次結束")
                return True

            # 終局後畫面停在結果文字上，直到關閉或按 R
            self.env.render()

    def _report(self, info: dict):
        phase = GamePhase(info['phase'])
        result = "勝利" if phase is GamePhase.WON else "失敗"
        print(f"[資訊] 場次結束: {result} | 擊破磚塊 {info['bricks_removed']}, "
              f"擋板反彈 {info['paddle_hits']} 次, 共 {info['frame']} 幀")

    def cleanup(self):
        """清理資源"""
        if self.env:
            self.env.close()
        print("[資訊] 程序正常結束。")


def main():
    """主函數"""
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config.yaml"
    settings = load_settings(config_path)
    settings.enable_render = True

    player = BreakoutPlayer(settings)
    player.initialize()
    player.run()


if __name__ == "__main__":
    main()

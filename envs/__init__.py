from envs.breakout_env import BreakoutEnv

__all__ = ['BreakoutEnv']

"""Reward function interface and reward combinators."""

from __future__ import annotations

from typing import Iterable, Sequence

from .action import Action
from .game_state import GameState
from .player_data import PlayerData


class RewardFunction:
    """Base for rewards computed per player on every step."""

    def reset(self, initial_state: GameState) -> None:
        """Called at the start of each episode."""

    def pre_step(self, state: GameState) -> None:
        """Called once per step before any reward is requested."""

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        """Reward for one player on a regular step."""
        raise RuntimeError(f"{type(self).__name__} does not provide get_reward()")

    def get_final_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        """Reward for one player on the final step of an episode."""
        return self.get_reward(player, state, prev_action)

    def get_all_rewards(
        self, state: GameState, prev_actions: Sequence[Action], final: bool
    ) -> list[float]:
        """Rewards for every player, in player order."""
        reward = self.get_final_reward if final else self.get_reward
        return [
            reward(player, state, action)
            for player, action in zip(state.players, prev_actions)
        ]


class CombinedReward(RewardFunction):
    """Weighted sum of several reward functions."""

    def __init__(
        self, reward_funcs: Sequence[RewardFunction], reward_weights: Sequence[float]
    ) -> None:
        if len(reward_funcs) != len(reward_weights):
            raise ValueError(
                f"got {len(reward_funcs)} reward functions but {len(reward_weights)} weights"
            )
        self.reward_funcs = list(reward_funcs)
        self.reward_weights = [float(w) for w in reward_weights]

    @classmethod
    def from_pairs(
        cls, funcs_with_weights: Iterable[tuple[RewardFunction, float]]
    ) -> CombinedReward:
        """Build from (function, weight) pairs."""
        pairs = list(funcs_with_weights)
        return cls([f for f, _ in pairs], [w for _, w in pairs])

    def reset(self, initial_state: GameState) -> None:
        for func in self.reward_funcs:
            func.reset(initial_state)

    def pre_step(self, state: GameState) -> None:
        for func in self.reward_funcs:
            func.pre_step(state)

    def get_all_rewards(
        self, state: GameState, prev_actions: Sequence[Action], final: bool
    ) -> list[float]:
        all_rewards = [0.0] * len(state.players)
        for func, weight in zip(self.reward_funcs, self.reward_weights):
            rewards = func.get_all_rewards(state, prev_actions, final)
            for j, reward in enumerate(rewards):
                all_rewards[j] += reward * weight
        return all_rewards


class ZeroSumReward(RewardFunction):
    """Makes a child reward zero-sum and shared within teams.

    Each player gets
    ``own * (1 - team_spirit) + team_avg * team_spirit - opponent_avg * opponent_scale``.
    An ``opponent_scale`` other than 1 is no longer zero-sum.
    """

    def __init__(
        self, child_func: RewardFunction, team_spirit: float, opponent_scale: float = 1.0
    ) -> None:
        self.child_func = child_func
        self.team_spirit = team_spirit
        self.opponent_scale = opponent_scale

    def reset(self, initial_state: GameState) -> None:
        self.child_func.reset(initial_state)

    def pre_step(self, state: GameState) -> None:
        self.child_func.pre_step(state)

    def get_all_rewards(
        self, state: GameState, prev_actions: Sequence[Action], final: bool
    ) -> list[float]:
        rewards = self.child_func.get_all_rewards(state, prev_actions, final)

        counts = [0, 0]
        totals = [0.0, 0.0]
        for player, reward in zip(state.players, rewards):
            team = int(player.team)
            counts[team] += 1
            totals[team] += reward
        averages = [total / max(count, 1) for total, count in zip(totals, counts)]

        return [
            reward * (1 - self.team_spirit)
            + averages[int(player.team)] * self.team_spirit
            - averages[1 - int(player.team)] * self.opponent_scale
            for player, reward in zip(state.players, rewards)
        ]
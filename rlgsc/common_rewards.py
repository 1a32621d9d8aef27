"""Commonly used reward functions."""

from __future__ import annotations

from dataclasses import astuple, dataclass

from .action import Action
from .common_values import (
    BALL_MAX_SPEED,
    BALL_RADIUS,
    BLUE_GOAL_BACK,
    CAR_MAX_SPEED,
    ORANGE_GOAL_BACK,
    Team,
)
from .game_state import GameState
from .player_data import PlayerData
from .rewards import RewardFunction


@dataclass
class WeightScales:
    """Weights of each event counted by ``EventReward``."""

    goal: float = 0.0
    team_goal: float = 0.0
    concede: float = 0.0
    assist: float = 0.0
    touch: float = 0.0
    shot: float = 0.0
    shot_pass: float = 0.0
    save: float = 0.0
    demo: float = 0.0
    demoed: float = 0.0
    boost_pickup: float = 0.0

    def __iter__(self):
        return iter(astuple(self))


VAL_AMOUNT = 11
_ZERO_VALUES = (0.0,) * VAL_AMOUNT


class EventReward(RewardFunction):
    """Rewards increases in per-player event counters, weighted per event."""

    def __init__(self, scales: WeightScales) -> None:
        self.weights: tuple[float, ...] = tuple(float(w) for w in scales)
        self.last_registered_values: dict[int, tuple[float, ...]] = {}

    @staticmethod
    def extract_values(player: PlayerData, state: GameState) -> tuple[float, ...]:
        """Event counters of a player, in the order of ``WeightScales``."""
        team = int(player.team)
        return (
            float(player.match_goals),
            float(state.score_line[team]),
            float(state.score_line[1 - team]),
            float(player.match_assists),
            float(player.ball_touched_step),
            float(player.match_shots),
            float(player.match_shot_passes),
            float(player.match_saves),
            float(player.match_demos),
            float(player.car_state.is_demoed),
            float(player.boost_fraction),
        )

    def reset(self, initial_state: GameState) -> None:
        self.last_registered_values = {
            player.car_id: self.extract_values(player, initial_state)
            for player in initial_state.players
        }

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        old_values = self.last_registered_values.get(player.car_id, _ZERO_VALUES)
        new_values = self.extract_values(player, state)
        reward = sum(
            max(new - old, 0.0) * weight
            for new, old, weight in zip(new_values, old_values, self.weights)
        )
        self.last_registered_values[player.car_id] = new_values
        return reward


class VelocityReward(RewardFunction):
    """Car speed relative to its maximum, negated when ``is_negative``."""

    def __init__(self, is_negative: bool = False) -> None:
        self.is_negative = is_negative

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        sign = -1.0 if self.is_negative else 1.0
        return player.phys.vel.length() / CAR_MAX_SPEED * sign


class SaveBoostReward(RewardFunction):
    """Boost fraction raised to ``exponent``, clamped to [0, 1]."""

    def __init__(self, exponent: float = 0.5) -> None:
        self.exponent = exponent

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        value = player.boost_fraction ** self.exponent
        return min(max(value, 0.0), 1.0)


class VelocityBallToGoalReward(RewardFunction):
    """Ball velocity toward the opponent's goal, or one's own with ``own_goal``."""

    def __init__(self, own_goal: bool = False) -> None:
        self.own_goal = own_goal

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        target_orange_goal = player.team == Team.BLUE
        if self.own_goal:
            target_orange_goal = not target_orange_goal
        target = ORANGE_GOAL_BACK if target_orange_goal else BLUE_GOAL_BACK
        direction = (target - state.ball.pos).normalized()
        return direction.dot(state.ball.vel / BALL_MAX_SPEED)


class VelocityPlayerToBallReward(RewardFunction):
    """Car velocity toward the ball relative to maximum car speed."""

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        direction = (state.ball.pos - player.phys.pos).normalized()
        return direction.dot(player.phys.vel / CAR_MAX_SPEED)


class FaceBallReward(RewardFunction):
    """Cosine between the car's forward axis and the direction to the ball."""

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        direction = (state.ball.pos - player.phys.pos).normalized()
        return player.car_state.rot_mat.forward.dot(direction)


class TouchBallReward(RewardFunction):
    """Reward for touching the ball, scaled up with height by ``aerial_weight``."""

    def __init__(self, aerial_weight: float = 0.0) -> None:
        self.aerial_weight = aerial_weight

    def get_reward(self, player: PlayerData, state: GameState, prev_action: Action) -> float:
        if not player.ball_touched_step:
            return 0.0
        return ((state.ball.pos.z + BALL_RADIUS) / (BALL_RADIUS * 2)) ** self.aerial_weight
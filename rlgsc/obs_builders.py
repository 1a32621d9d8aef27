"""Observation builders that turn a game state into per-player feature lists."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .action import Action
from .common_values import (
    BACK_WALL_Y,
    CAR_MAX_ANG_VEL,
    CAR_MAX_SPEED,
    CEILING_Z,
    SIDE_WALL_X,
    Team,
)
from .game_state import GameState
from .math3d import Vec
from .player_data import PlayerData

DEFAULT_POS_COEF = Vec(1 / SIDE_WALL_X, 1 / BACK_WALL_Y, 1 / CEILING_Z)
DEFAULT_VEL_COEF = 1 / CAR_MAX_SPEED
DEFAULT_ANG_VEL_COEF = 1 / CAR_MAX_ANG_VEL


class OBSBuilder(ABC):
    """Builds the observation of one player."""

    def reset(self, initial_state: GameState) -> None:
        """Called at the start of each episode."""

    def pre_step(self, state: GameState) -> None:
        """Called once per step before observations are built."""

    @abstractmethod
    def build_obs(
        self, player: PlayerData, state: GameState, prev_action: Action
    ) -> list[float]:
        """Observation of ``player``; may be called once up front to size a policy."""


class DefaultOBS(OBSBuilder):
    """Ball, previous action, boost pads, then self, teammates and opponents."""

    def __init__(
        self,
        pos_coef: Vec = DEFAULT_POS_COEF,
        vel_coef: float = DEFAULT_VEL_COEF,
        ang_vel_coef: float = DEFAULT_ANG_VEL_COEF,
    ) -> None:
        self.pos_coef = pos_coef
        self.vel_coef = vel_coef
        self.ang_vel_coef = ang_vel_coef

    def add_player_to_obs(
        self, obs: list[float], player: PlayerData, inv: bool
    ) -> list[float]:
        """Append the features of ``player`` to ``obs`` and return it."""
        phys = player.get_phys(inv)
        obs.extend(phys.pos * self.pos_coef)
        obs.extend(phys.rot_mat.forward)
        obs.extend(phys.rot_mat.up)
        obs.extend(phys.vel * self.vel_coef)
        obs.extend(phys.ang_vel * self.ang_vel_coef)
        obs.extend(
            (
                float(player.boost_fraction),
                float(player.car_state.is_on_ground),
                float(player.has_flip),
                float(player.car_state.is_demoed),
            )
        )
        return obs

    def _head(
        self, player: PlayerData, state: GameState, prev_action: Action
    ) -> tuple[list[float], bool]:
        inv = player.team == Team.ORANGE
        ball = state.get_ball_phys(inv)
        obs: list[float] = []
        obs.extend(ball.pos * self.pos_coef)
        obs.extend(ball.vel * self.vel_coef)
        obs.extend(ball.ang_vel * self.ang_vel_coef)
        obs.extend(prev_action)
        obs.extend(float(active) for active in state.get_boost_pads(inv))
        return obs, inv

    def build_obs(
        self, player: PlayerData, state: GameState, prev_action: Action
    ) -> list[float]:
        obs, inv = self._head(player, state, prev_action)
        self.add_player_to_obs(obs, player, inv)

        teammates: list[float] = []
        opponents: list[float] = []
        for other in state.players:
            if other.car_id == player.car_id:
                continue
            target = teammates if other.team == player.team else opponents
            self.add_player_to_obs(target, other, inv)

        return obs + teammates + opponents


class DefaultOBSPadded(DefaultOBS):
    """``DefaultOBS`` padded to a fixed player count.

    Teammate and opponent slots are zero-padded up to ``max_players - 1`` and
    ``max_players`` respectively, then shuffled to prevent slot bias.
    """

    def __init__(
        self,
        max_players: int,
        pos_coef: Vec = DEFAULT_POS_COEF,
        vel_coef: float = DEFAULT_VEL_COEF,
        ang_vel_coef: float = DEFAULT_ANG_VEL_COEF,
    ) -> None:
        super().__init__(pos_coef, vel_coef, ang_vel_coef)
        self.max_players = max_players

    def build_obs(
        self, player: PlayerData, state: GameState, prev_action: Action
    ) -> list[float]:
        obs, inv = self._head(player, state, prev_action)
        self_obs = self.add_player_to_obs([], player, inv)
        obs.extend(self_obs)
        player_obs_size = len(self_obs)

        teammates: list[list[float]] = []
        opponents: list[list[float]] = []
        for other in state.players:
            if other.car_id == player.car_id:
                continue
            chunk = self.add_player_to_obs([], other, inv)
            (teammates if other.team == player.team else opponents).append(chunk)

        if len(teammates) > self.max_players - 1:
            raise RuntimeError(
                "DefaultOBSPadded: Too many teammates for OBS, maximum is "
                f"{self.max_players - 1}"
            )
        if len(opponents) > self.max_players:
            raise RuntimeError(
                f"DefaultOBSPadded: Too many opponents for OBS, maximum is {self.max_players}"
            )

        for chunks, target in ((teammates, self.max_players - 1), (opponents, self.max_players)):
            chunks.extend([0.0] * player_obs_size for _ in range(target - len(chunks)))

        random.shuffle(teammates)
        random.shuffle(opponents)

        for chunk in teammates + opponents:
            obs.extend(chunk)
        return obs
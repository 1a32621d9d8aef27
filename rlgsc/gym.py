"""Gym-style environment stepping a simulated arena."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from .common_values import Team
from .game_state import GameState
from .match import Match


class GameMode(Enum):
    """Game modes an arena can run."""

    SOCCAR = "soccar"
    HOOPS = "hoops"
    HEATSEEKER = "heatseeker"
    SNOWDAY = "snowday"


@dataclass
class StepResult:
    """Outcome of one environment step."""

    obs: list[list[float]]
    reward: list[float]
    done: bool
    state: GameState


class Gym:
    """Steps an arena with actions chosen by a policy.

    The arena is expected to expose ``add_car(team, car_config)``,
    ``set_car_bump_callback(callback)``, ``step(ticks)``, ``cars``, ``game_mode``
    and whatever ``GameState`` reads. The optional event tracker exposes
    ``set_shot_callback``, ``set_goal_callback``, ``set_save_callback``,
    ``update(arena)`` and ``reset_persistent_info()``; its callbacks and the bump
    callback are called with cars only, without the arena.
    """

    def __init__(
        self,
        match: Match,
        tick_skip: int,
        arena: Any,
        car_config: Any = None,
        event_tracker: Optional[Any] = None,
    ) -> None:
        self.match = match
        self.tick_skip = tick_skip
        self.arena = arena
        self.event_tracker = event_tracker
        self.prev_state = GameState()
        self.total_ticks = 0
        self.total_steps = 0

        for _ in range(match.team_size):
            arena.add_car(Team.BLUE, car_config)
            if match.spawn_opponents:
                arena.add_car(Team.ORANGE, car_config)

        if event_tracker is not None:
            event_tracker.set_shot_callback(self.on_shot)
            event_tracker.set_goal_callback(self.on_goal)
            event_tracker.set_save_callback(self.on_save)

        arena.set_car_bump_callback(self.on_bump)

    def _increment(self, car: Any, counter: str) -> None:
        if car is None:
            return
        for player in self.prev_state.players:
            if player.car_id == car.id:
                setattr(player, counter, getattr(player, counter) + 1)

    def on_shot(self, shooter: Any, passer: Any) -> None:
        """Count a shot, and a shot pass for the passer if any."""
        self._increment(shooter, "match_shots")
        self._increment(passer, "match_shot_passes")

    def on_goal(self, scorer: Any, passer: Any) -> None:
        """Count a goal, and an assist for the passer if any."""
        self._increment(scorer, "match_goals")
        self._increment(passer, "match_assists")

    def on_save(self, saver: Any) -> None:
        """Count a save."""
        self._increment(saver, "match_saves")

    def on_bump(self, bumper: Any, victim: Any, is_demo: bool) -> None:
        """Count a bump against an opponent, and a demo if it was one."""
        if bumper.team == victim.team:
            return
        self._increment(bumper, "match_bumps")
        if is_demo:
            self._increment(bumper, "match_demos")

    def reset(self) -> list[list[float]]:
        """Start a new episode and return the first observations."""
        reset_state = self.match.reset_state(self.arena)
        self.match.episode_reset(reset_state)
        self.prev_state = reset_state
        if self.event_tracker is not None:
            self.event_tracker.reset_persistent_info()
        return self.match.build_observations(reset_state)

    def step(self, actions_data: Sequence[int]) -> StepResult:
        """Apply actions, advance ``tick_skip`` ticks and report the outcome."""
        actions = self.match.parse_actions(actions_data, self.prev_state)
        self.match.prev_actions = actions

        for car, action in zip(self.arena.cars, actions):
            car.controls = action.to_controls()

        self.arena.step(1)
        if self.event_tracker is not None and self.arena.game_mode != GameMode.HEATSEEKER:
            self.event_tracker.update(self.arena)
        # Event callbacks have updated the previous state's counters by now.
        state = copy.deepcopy(self.prev_state)
        state.update_from_arena(self.arena)
        self.arena.step(self.tick_skip - 1)
        self.total_ticks += self.tick_skip
        self.total_steps += 1

        obs = self.match.build_observations(state)
        done = self.match.is_done(state)
        rewards = self.match.get_rewards(state, done)
        self.prev_state = state

        return StepResult(obs, rewards, done, state)
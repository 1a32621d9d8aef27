"""Glue between reward, observation, action and reset components of an environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .action import Action
from .action_parsers import ActionParser
from .game_state import GameState, ScoreLine
from .obs_builders import OBSBuilder
from .rewards import RewardFunction
from .state_setters import StateSetter
from .terminal_conditions import TerminalCondition


@dataclass
class BoostPadState:
    """State applied to every boost pad on reset."""

    is_active: bool = True
    cooldown: float = 0.0


class Match:
    """Runs the components of one environment over a fixed number of players."""

    def __init__(
        self,
        reward_fn: RewardFunction,
        terminal_conditions: Sequence[TerminalCondition],
        obs_builder: OBSBuilder,
        action_parser: ActionParser,
        state_setter: StateSetter,
        team_size: int = 1,
        spawn_opponents: bool = True,
    ) -> None:
        self.reward_fn = reward_fn
        self.terminal_conditions = list(terminal_conditions)
        self.obs_builder = obs_builder
        self.action_parser = action_parser
        self.state_setter = state_setter
        self.team_size = team_size
        self.spawn_opponents = spawn_opponents
        self.player_amount = team_size * (2 if spawn_opponents else 1)
        self.prev_actions: list[Action] = [Action()] * self.player_amount

    def episode_reset(self, initial_state: GameState) -> None:
        """Clear previous actions and reset every component."""
        self.prev_actions = [Action()] * len(initial_state.players)
        for cond in self.terminal_conditions:
            cond.reset(initial_state)
        self.reward_fn.reset(initial_state)
        self.obs_builder.reset(initial_state)

    def build_observations(self, state: GameState) -> list[list[float]]:
        """One observation per player, in player order."""
        self.obs_builder.pre_step(state)
        return [
            self.obs_builder.build_obs(player, state, action)
            for player, action in zip(state.players, self.prev_actions, strict=True)
        ]

    def get_rewards(self, state: GameState, done: bool) -> list[float]:
        """One reward per player, using final rewards when ``done``."""
        self.reward_fn.pre_step(state)
        return self.reward_fn.get_all_rewards(state, self.prev_actions, done)

    def is_done(self, state: GameState) -> bool:
        """Whether any terminal condition is met."""
        return any(cond.is_terminal(state) for cond in self.terminal_conditions)

    def get_score_line(self, state: GameState) -> ScoreLine:
        """Score of the given state."""
        return state.score_line

    def parse_actions(self, actions_data: Sequence[int], game_state: GameState) -> list[Action]:
        """Parse policy outputs; demolished players get an empty action."""
        actions = list(self.action_parser.parse_actions(actions_data, game_state))
        for i, player in enumerate(game_state.players):
            if player.car_state.is_demoed:
                actions[i] = Action()
        return actions

    def reset_state(self, arena: Any) -> GameState:
        """Apply the state setter to ``arena`` and reactivate every boost pad.

        Raises RuntimeError if the player count differs from this match's.
        """
        new_state = self.state_setter.reset_state(arena)

        if len(new_state.players) != self.player_amount:
            raise RuntimeError(
                "Match.reset_state(): New state has a different amount of players, "
                f"expected {self.player_amount} but got {len(new_state.players)}.\n"
                "Changing number of players at state reset is currently not supported.\n"
                "If you want variable player amounts, set a differing player amount per env."
            )

        for pad in arena.boost_pads:
            pad.set_state(BoostPadState())

        return new_state
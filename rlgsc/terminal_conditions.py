"""Conditions that end an episode."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .game_state import GameState
from .math3d import is_ball_scored


class TerminalCondition(ABC):
    """Decides whether the current episode is over."""

    def reset(self, initial_state: GameState) -> None:
        """Called at the start of each episode."""

    @abstractmethod
    def is_terminal(self, current_state: GameState) -> bool:
        """Whether the episode ends at this state."""


class GoalScoreCondition(TerminalCondition):
    """Ends the episode when the ball crosses a goal line."""

    def is_terminal(self, current_state: GameState) -> bool:
        return is_ball_scored(current_state.ball.pos)


class NoTouchCondition(TerminalCondition):
    """Ends the episode after ``max_steps`` steps without any ball touch."""

    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        self.steps_since_touch = 0

    def reset(self, initial_state: GameState) -> None:
        self.steps_since_touch = 0

    def is_terminal(self, current_state: GameState) -> bool:
        if any(player.ball_touched_step for player in current_state.players):
            self.steps_since_touch = 0
            return False
        self.steps_since_touch += 1
        return self.steps_since_touch >= self.max_steps
"""Turn policy outputs into per-car actions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from itertools import product
from typing import Any, Sequence

from .action import Action

logger = logging.getLogger(__name__)

# Inputs to the parser are one integer per player.
Input = Sequence[int]


class ActionParser(ABC):
    """Maps discrete policy outputs to actions."""

    @abstractmethod
    def parse_actions(self, actions_data: Input, game_state: Any) -> list[Action]:
        """Return one action per entry of ``actions_data``."""

    @abstractmethod
    def get_action_amount(self) -> int:
        """Number of distinct actions the parser can produce."""


class DiscreteAction(ActionParser):
    """Lookup table of ground and aerial actions indexed by integers."""

    _announced = False

    def __init__(self) -> None:
        buttons = (0.0, 1.0)
        axes = (-1.0, 0.0, 1.0)
        self.actions: list[Action] = []

        # Ground
        for throttle, steer, boost, handbrake in product(axes, axes, buttons, buttons):
            # Throttle is pointless while boosting unless it is full forward.
            if boost == 1 and throttle != 1:
                continue
            self.actions.append(Action(throttle, steer, 0.0, steer, 0.0, 0.0, boost, handbrake))

        # Aerial
        for pitch, yaw, roll, jump, boost in product(axes, axes, axes, buttons, buttons):
            # Roll alone is enough for sideflips.
            if jump == 1 and yaw != 0:
                continue
            # Already covered by the ground actions.
            if pitch == roll == jump == 0:
                continue
            # Handbrake allows wavedashes.
            handbrake = float(jump == 1 and (pitch != 0 or yaw != 0 or roll != 0))
            self.actions.append(Action(boost, yaw, pitch, yaw, roll, jump, boost, handbrake))

        if not DiscreteAction._announced:
            DiscreteAction._announced = True
            logger.info("DiscreteAction(): Lookup table built, action count: %d", len(self.actions))

    def parse_actions(self, actions_data: Input, game_state: Any) -> list[Action]:
        """Look up the action for each index; raises IndexError for unknown indices."""
        result = []
        for idx in actions_data:
            if not 0 <= idx < len(self.actions):
                raise IndexError(f"action index {idx} out of range 0..{len(self.actions) - 1}")
            result.append(self.actions[idx])
        return result

    def get_action_amount(self) -> int:
        """Size of the lookup table."""
        return len(self.actions)
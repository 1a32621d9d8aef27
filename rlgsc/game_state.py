"""Whole-game snapshot built from a simulated arena."""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from .common_values import BOOST_LOCATIONS, BOOST_LOCATIONS_AMOUNT, team_from_y
from .math3d import is_ball_scored
from .phys_obj import PhysObj
from .player_data import BallState, PlayerData

logger = logging.getLogger(__name__)

TICK_TIME = 1 / 120

# Squared 2D distance under which an arena pad matches a known boost location.
_PAD_MATCH_DIST_SQ = 10

_index_map: Optional[list[int]] = None
_index_map_lock = threading.Lock()


def build_boost_pad_index_map(arena: Any) -> list[int]:
    """Map each entry of ``BOOST_LOCATIONS`` to the index of the arena pad at that spot.

    Raises RuntimeError if the arena's pads do not line up with the known locations.
    """
    prefix = "build_boost_pad_index_map(): "
    pads = list(arena.boost_pads)
    if len(pads) != BOOST_LOCATIONS_AMOUNT:
        raise RuntimeError(
            f"{prefix}Arena boost pad count does not match BOOST_LOCATIONS_AMOUNT "
            f"({len(pads)}/{BOOST_LOCATIONS_AMOUNT})"
        )

    index_map = []
    for target in BOOST_LOCATIONS:
        match = next(
            (j for j, pad in enumerate(pads) if pad.config.pos.dist_sq_2d(target) < _PAD_MATCH_DIST_SQ),
            None,
        )
        if match is None:
            raise RuntimeError(f"{prefix}Failed to find matching pad at {target}")
        index_map.append(match)
    return index_map


def _shared_index_map(arena: Any) -> list[int]:
    global _index_map
    if _index_map is None:
        with _index_map_lock:
            if _index_map is None:
                logger.info("Building boost pad index map...")
                _index_map = build_boost_pad_index_map(arena)
    return _index_map


@dataclass
class ScoreLine:
    """Goals scored by each team, indexed by team."""

    team_goals: list[int] = field(default_factory=lambda: [0, 0])

    def __getitem__(self, index: int) -> int:
        return self.team_goals[int(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self.team_goals[int(index)] = value


def _falses() -> list[bool]:
    return [False] * BOOST_LOCATIONS_AMOUNT


def _zeros() -> list[float]:
    return [0.0] * BOOST_LOCATIONS_AMOUNT


@dataclass
class GameState:
    """Snapshot of ball, players, boost pads and score.

    The arena is expected to expose ``tick_count``, ``ball.get_state()``,
    ``cars`` and ``boost_pads`` (each with ``config.pos`` and ``get_state()``).
    """

    delta_time: float = 0.0
    score_line: ScoreLine = field(default_factory=ScoreLine)
    last_touch_car_id: int = -1
    players: list[PlayerData] = field(default_factory=list)

    ball_state: BallState = field(default_factory=BallState)
    ball: PhysObj = field(default_factory=PhysObj)
    ball_inv: PhysObj = field(default_factory=PhysObj)

    boost_pads: list[bool] = field(default_factory=_falses)
    boost_pads_inv: list[bool] = field(default_factory=_falses)
    boost_pad_timers: list[float] = field(default_factory=_zeros)
    boost_pad_timers_inv: list[float] = field(default_factory=_zeros)

    # Last arena this state was updated from; may be None.
    last_arena: Any = None
    last_tick_count: int = 0

    @staticmethod
    def from_arena(arena: Any) -> GameState:
        """Build a fresh state from an arena."""
        state = GameState()
        state.update_from_arena(arena)
        return state

    def __deepcopy__(self, memo: dict) -> GameState:
        # The arena is shared, never copied.
        if self.last_arena is not None:
            memo.setdefault(id(self.last_arena), self.last_arena)
        result = GameState.__new__(GameState)
        memo[id(self)] = result
        for f in fields(self):
            setattr(result, f.name, copy.deepcopy(getattr(self, f.name), memo))
        return result

    def update_from_arena(self, arena: Any) -> None:
        """Refresh this state from the arena's current contents."""
        self.last_arena = arena
        tick_skip = max(arena.tick_count - self.last_tick_count, 0)
        self.delta_time = tick_skip * TICK_TIME

        self.ball_state = arena.ball.get_state()
        self.ball = PhysObj.from_state(self.ball_state)
        self.ball_inv = self.ball.invert()

        cars = list(arena.cars)
        del self.players[len(cars):]
        self.players.extend(PlayerData() for _ in range(len(cars) - len(self.players)))

        for player, car in zip(self.players, cars):
            player.update_from_car(car, arena.tick_count, tick_skip)
            if player.ball_touched_step:
                self.last_touch_car_id = player.car_id

        index_map = _shared_index_map(arena)
        pads = arena.boost_pads
        pad_states = [pads[idx].get_state() for idx in index_map]
        self.boost_pads = [s.is_active for s in pad_states]
        self.boost_pad_timers = [s.cooldown for s in pad_states]
        self.boost_pads_inv = self.boost_pads[::-1]
        self.boost_pad_timers_inv = self.boost_pad_timers[::-1]

        if is_ball_scored(self.ball.pos):
            self.score_line[1 - team_from_y(self.ball.pos.y)] += 1

        self.last_tick_count = arena.tick_count

    def get_ball_phys(self, inverted: bool) -> PhysObj:
        """Ball physics, inverted for orange's point of view when asked."""
        return self.ball_inv if inverted else self.ball

    def get_boost_pads(self, inverted: bool) -> list[bool]:
        """Boost pad activity, inverted for orange's point of view when asked."""
        return self.boost_pads_inv if inverted else self.boost_pads
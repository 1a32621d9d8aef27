from types import SimpleNamespace

import pytest

from rlgsc.action_parsers import DiscreteAction
from rlgsc.common_values import BOOST_LOCATIONS, Team
from rlgsc.gym import GameMode, Gym, StepResult
from rlgsc.match import Match
from rlgsc.math3d import Vec
from rlgsc.obs_builders import DefaultOBS
from rlgsc.player_data import BallState, CarState
from rlgsc.common_rewards import VelocityReward
from rlgsc.state_setters import KickoffState
from rlgsc.terminal_conditions import GoalScoreCondition


class FakePad:
    def __init__(self, pos):
        self.config = SimpleNamespace(pos=pos)
        self.state = SimpleNamespace(is_active=True, cooldown=0.0)

    def get_state(self):
        return self.state

    def set_state(self, state):
        self.state = state


class FakeCar:
    def __init__(self, car_id, team):
        self.id = car_id
        self.team = team
        self.state = CarState()
        self.controls = None

    def get_state(self):
        return self.state


class FakeBall:
    def __init__(self):
        self.state = BallState()

    def get_state(self):
        return self.state


class FakeArena:
    def __init__(self, game_mode=GameMode.SOCCAR):
        self.game_mode = game_mode
        self.tick_count = 0
        self.ball = FakeBall()
        self.cars = []
        self.boost_pads = [FakePad(p) for p in BOOST_LOCATIONS]
        self.bump_callback = None
        self.configs = []

    def add_car(self, team, config):
        car = FakeCar(len(self.cars) + 1, team)
        self.cars.append(car)
        self.configs.append(config)
        return car

    def set_car_bump_callback(self, callback):
        self.bump_callback = callback

    def reset_to_random_kickoff(self):
        self.tick_count = 0

    def step(self, ticks):
        self.tick_count += ticks


class FakeTracker:
    def __init__(self):
        self.callbacks = {}
        self.updates = 0
        self.resets = 0

    def set_shot_callback(self, cb):
        self.callbacks["shot"] = cb

    def set_goal_callback(self, cb):
        self.callbacks["goal"] = cb

    def set_save_callback(self, cb):
        self.callbacks["save"] = cb

    def update(self, arena):
        self.updates += 1

    def reset_persistent_info(self):
        self.resets += 1


def _gym(team_size=1, spawn=True, tick_skip=8, game_mode=GameMode.SOCCAR):
    match = Match(
        VelocityReward(),
        [GoalScoreCondition()],
        DefaultOBS(),
        DiscreteAction(),
        KickoffState(),
        team_size,
        spawn,
    )
    arena = FakeArena(game_mode)
    tracker = FakeTracker()
    return Gym(match, tick_skip, arena, "octane", tracker), arena, tracker


def test_constructor_adds_cars_alternating_teams():
    gym, arena, tracker = _gym(team_size=2)
    assert [c.team for c in arena.cars] == [Team.BLUE, Team.ORANGE, Team.BLUE, Team.ORANGE]
    assert arena.configs == ["octane"] * 4
    assert arena.bump_callback == gym.on_bump
    assert set(tracker.callbacks) == {"shot", "goal", "save"}


def test_constructor_without_opponents():
    _, arena, _ = _gym(team_size=3, spawn=False)
    assert [c.team for c in arena.cars] == [Team.BLUE] * 3


def test_reset_returns_observation_per_player():
    gym, arena, tracker = _gym()
    obs = gym.reset()
    assert len(obs) == 2
    assert len(obs[0]) == len(obs[1])
    assert tracker.resets == 1
    assert [p.car_id for p in gym.prev_state.players] == [1, 2]


def test_step_advances_ticks_and_applies_controls():
    gym, arena, tracker = _gym(tick_skip=8)
    gym.reset()
    parser = gym.match.action_parser
    result = gym.step([0, 5])
    assert isinstance(result, StepResult)
    assert arena.tick_count == 8
    assert (gym.total_ticks, gym.total_steps) == (8, 1)
    assert arena.cars[0].controls == parser.actions[0].to_controls()
    assert arena.cars[1].controls == parser.actions[5].to_controls()
    assert gym.match.prev_actions == [parser.actions[0], parser.actions[5]]
    assert tracker.updates == 1
    assert len(result.obs) == 2
    assert result.reward == pytest.approx([0.0, 0.0])
    assert result.done is False
    assert gym.prev_state is result.state


def test_step_state_time_covers_first_tick():
    gym, arena, _ = _gym(tick_skip=4)
    gym.reset()
    result = gym.step([0, 0])
    assert result.state.last_tick_count == 1
    gym.step([0, 0])
    assert gym.total_ticks == 8
    assert gym.prev_state.last_tick_count == 5


def test_heatseeker_skips_event_tracking():
    gym, _, tracker = _gym(game_mode=GameMode.HEATSEEKER)
    gym.reset()
    gym.step([0, 0])
    assert tracker.updates == 0


def test_goal_ends_episode_and_counts_score():
    gym, arena, _ = _gym()
    gym.reset()
    arena.ball.state = BallState(pos=Vec(0.0, 6000.0, 100.0))
    result = gym.step([0, 0])
    assert result.done is True
    assert result.state.score_line[Team.BLUE] == 1
    assert result.state.score_line[Team.ORANGE] == 0


def test_event_counters_carry_into_next_state():
    gym, arena, tracker = _gym()
    gym.reset()
    blue, orange = arena.cars
    tracker.callbacks["goal"](blue, orange)
    tracker.callbacks["shot"](orange, None)
    tracker.callbacks["save"](orange)
    result = gym.step([0, 0])
    p_blue, p_orange = result.state.players
    assert (p_blue.match_goals, p_orange.match_assists) == (1, 1)
    assert (p_orange.match_shots, p_orange.match_shot_passes) == (1, 0)
    assert p_orange.match_saves == 1


def test_bumps_only_count_against_opponents():
    gym, arena, _ = _gym(team_size=2)
    gym.reset()
    blue1, orange1, blue2, _ = arena.cars
    arena.bump_callback(blue1, blue2, True)
    player = gym.prev_state.players[0]
    assert (player.match_bumps, player.match_demos) == (0, 0)
    arena.bump_callback(blue1, orange1, False)
    arena.bump_callback(blue1, orange1, True)
    assert (player.match_bumps, player.match_demos) == (2, 1)


def test_callbacks_ignore_missing_car():
    gym, arena, _ = _gym()
    gym.reset()
    gym.on_goal(None, None)
    gym.on_save(None)
    assert all(p.match_goals == 0 and p.match_saves == 0 for p in gym.prev_state.players)
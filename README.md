# rlgsc

A framework for building reinforcement-learning environments on top of a
car-soccer physics arena. It supplies the pieces a training loop needs and
drives an arena object that you provide.

## What is in the package

- `rlgsc.math3d` – `Vec`, `RotMat`, `Angle` and `Quat`, plus `rand_float`,
  `rand_vec` and `is_ball_scored`.
- `rlgsc.common_values` – field dimensions, goal positions, speed limits, the
  34 `BOOST_LOCATIONS`, the `Team` enum and `team_from_y`.
- `rlgsc.action` – `CarControls`, the eight-float `Action` (with
  `from_controls` / `to_controls`; buttons count as pressed only at exactly 1)
  and the growable float list `GymSpace`.
- `rlgsc.phys_obj` – `PhysObj` with `invert()` (180° turn about Z) and
  `mirror_x()`.
- `rlgsc.player_data` – `CarState`, `BallState`, `BallHitInfo` and
  `PlayerData`, which tracks match statistics, jump/flip availability, boost
  fraction and ball touches.
- `rlgsc.game_state` – `ScoreLine` and `GameState`, a snapshot of ball,
  players, boost pads and score with team-inverted views;
  `build_boost_pad_index_map` matches arena pads to the known locations.
- `rlgsc.action_parsers` – the `ActionParser` interface and `DiscreteAction`,
  a lookup table of ground and aerial control combinations.
- `rlgsc.obs_builders` – `OBSBuilder`, `DefaultOBS` and `DefaultOBSPadded`
  (zero-padded to a fixed player count, teammate and opponent slots shuffled).
- `rlgsc.rewards` – `RewardFunction`, `CombinedReward` (weighted sum, also via
  `CombinedReward.from_pairs`) and `ZeroSumReward`.
- `rlgsc.common_rewards` – `EventReward` with `WeightScales`,
  `VelocityReward`, `SaveBoostReward`, `VelocityBallToGoalReward`,
  `VelocityPlayerToBallReward`, `FaceBallReward` and `TouchBallReward`.
- `rlgsc.terminal_conditions` – `TerminalCondition`, `GoalScoreCondition` and
  `NoTouchCondition`.
- `rlgsc.state_setters` – `StateSetter`, `KickoffState` and `RandomState`.
- `rlgsc.match` – `Match`, which ties the components together for a fixed
  number of players.
- `rlgsc.gym` – `Gym`, which steps an arena with parsed actions and returns a
  `StepResult` (`obs`, `reward`, `done`, `state`), and the `GameMode` enum.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from rlgsc.match import Match
from rlgsc.gym import Gym
from rlgsc.action_parsers import DiscreteAction
from rlgsc.obs_builders import DefaultOBS
from rlgsc.state_setters import KickoffState
from rlgsc.terminal_conditions import GoalScoreCondition, NoTouchCondition
from rlgsc.rewards import CombinedReward
from rlgsc.common_rewards import VelocityPlayerToBallReward, FaceBallReward

reward = CombinedReward.from_pairs([
    (VelocityPlayerToBallReward(), 1.0),
    (FaceBallReward(), 0.1),
])

match = Match(
    reward,
    [GoalScoreCondition(), NoTouchCondition(500)],
    DefaultOBS(),
    DiscreteAction(),
    KickoffState(),
    team_size=1,
    spawn_opponents=True,
)

gym = Gym(match, tick_skip=8, arena=arena)  # arena: your physics arena object
obs = gym.reset()
result = gym.step([0] * match.player_amount)
print(result.reward, result.done)
```

`Gym` also accepts `car_config` (passed to `arena.add_car`) and an optional
`event_tracker`; when one is given, its shot, goal and save callbacks update
the players' match statistics.

## The arena interface

The objects are duck-typed. An arena is expected to provide:

- `tick_count`, `game_mode`, `step(ticks)`, `add_car(team, car_config)`,
  `set_car_bump_callback(callback)` and `reset_to_random_kickoff()`;
- `ball` with `get_state()` and `set_state(ball_state)`;
- `cars`, each with `id`, `team`, `controls`, `get_state()` and
  `set_state(car_state)`;
- `boost_pads`, 34 of them, each with `config.pos`, `get_state()` (with
  `is_active` and `cooldown`) and `set_state(pad_state)`.

The mapping from boost pad locations to arena pads is built once, from the
first arena seen, and shared for the rest of the process.

## What the package does not do

It contains no physics simulation: there is no arena, car or ball physics and
no event tracker in this package. `Gym`, `GameState` and the state setters only
work when given an arena object with the interface above.
# stealthai

A compact framework for game AI decision making, together with a guard
simulation for a top-down stealth game. The game is a library that you drive
from your own code.

## The framework

- **Blackboards**: `stealthai.blackboard.BrainBlackboard` stores the named
  float values that an actor's brain reasons over. Reading a name that was
  never stored gives `0.0`. `stealthai.global_blackboard.GlobalBlackboard.instance()`
  returns one shared object whose integer `value` every part of the game can
  read and write.
- **Actions**: `stealthai.actions.Action` wraps a function that takes a
  blackboard and returns an `ActionStatus` (`IDLE`, `RUNNING`, `SUCCESS`,
  `FAILURE`). `SubReasonerAction` ignores its function. Its `perform()` runs
  its child reasoner's `update()` instead, and its `reset()` resets that
  reasoner.
- **Considerations and options**: `stealthai.options.Consideration` is a
  yes/no rule over a blackboard. `Option` pairs an action with a list of
  considerations.
- **Reasoners**: `stealthai.reasoner.Reasoner` is an abstract base class.
  `update()` runs `sense()`, then `think()`, then `act()`. `sense()` calls
  each function in `sensors` with the blackboard. `think()` must be supplied
  by a subclass and sets `selected_option`. `act()` performs the selected
  option's action. It raises `NoOptionSelectedError` if no option is
  selected or if the selected option has no action.
- **Brains**: `stealthai.brain.Brain` owns a fresh blackboard for its actor
  and holds a reasoner. `update()` runs one decision cycle.
- **Constructors**: subclass `stealthai.constructor.AIConstructor` and
  implement `define_actions`, `define_considerations` and `define_options`.
  `define_ai()` calls the three in that order. `option_list()` returns every
  option, or only the named ones in the order given. An unknown name raises
  `KeyError`.
- **Actors**: `stealthai.actor.Actor` holds a brain and reads and writes its
  blackboard through `add_bb_value`, `edit_bb_value`, `delete_bb_value` and
  `get_bb_value`.
- **Helpers**:
  - `stealthai.geometry` provides `Vector2`, `screen_to_grid`,
    `grid_to_screen` (grid cells are 64 units), `distance`, `rotation_of`,
    `rotate_point` and `point_in_triangle`.
  - `stealthai.randomness.RandomSource` is a seedable random source.
  - `stealthai.logger` prints `log_error`, `log_warning` and `log_message`
    lines to standard output.

## The stealth game

- `stealthai.fsm.FSMReasoner` is a state machine over `FSMState`.
  - It moves from `RESTING` to `PATROLLING` when the blackboard's `Energy`
    reaches 20.
  - It moves back to `RESTING` when `Energy` drops below 1.
  - On every change of state it calls the actor's `pre_transition()`.
  - `make_fsm_brain()` builds a brain with this reasoner, starting in the
    resting state with `OptionRest` selected.
- `stealthai.stealth_constructor.StealthConstructor` registers four actions:
  `ActionRest`, `ActionPatrol`, `ActionChase` and `ActionInvestigate`. It
  registers two options: `OptionRest` and `OptionPatrol`.
- `stealthai.guard.Guard` is an actor with behaviours for resting, patrolling
  to random grid points, investigating noises, chasing, sprinting and raising
  the alarm.
  - Energy drains while the guard moves and recovers while it stands still.
    It is capped at 20.
  - The guard sees along a triangle in front of it.
  - It hears within 384 units.
- `stealthai.game.GameController` runs the map, the player and the guards:
  - The map is 20 by 15 cells, and two guards start on it.
  - The player starts on the left edge.
  - `handle_key_press(Key.A/D/W/S)` moves the player 5 units, kept inside the
    map.
  - The game ends with a player win when the player reaches the last column.
  - It ends with a guard win when an active guard comes within 48 units of
    the player.
  - Either result is printed, and `game_running` becomes `False`.

```python
from stealthai.game import GameController, Key
from stealthai.randomness import RandomSource

game = GameController(RandomSource(42))
game.initialize()
game.start_game()

game.handle_key_press(Key.D)      # move the player right
for _ in range(60):
    game.update(1 / 60)           # advance the simulation one frame
    if not game.game_running:
        break
```

### Alarm reinforcements

When any active guard's `HasRaisedAlarm` blackboard value becomes 1,
`GameController` brings in two more guards. This happens at most once per
game. A guard sets that value when it arrives at the alarm point after
`raise_alarm()`.

## What it does not do

- The guard state machine switches only between resting and patrolling.
  Investigating, chasing, sprinting and raising the alarm are available as
  `Guard` methods, but no state transition selects them. Call them yourself
  if you want those behaviours.
- There is no window, no rendering and no keyboard or mouse handling. There
  is no command to run. You supply the game loop, call `update(dt)` and pass
  key presses to `handle_key_press`.

## Running the tests

```
pip install -e .[test]
pytest
```
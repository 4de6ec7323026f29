"""Game rules for the stealth level: map, player, guards and win conditions."""

from __future__ import annotations

import enum

from stealthai.geometry import (
    MAP_SECTION_SIZE,
    Vector2,
    distance,
    grid_to_screen,
    screen_to_grid,
)
from stealthai.guard import Guard
from stealthai.randomness import RandomSource
from stealthai.stealth_constructor import StealthConstructor


class TerrainType(enum.Enum):
    """Kinds of map tile."""

    GROUND = enum.auto()
    START_ZONE = enum.auto()
    END_ZONE = enum.auto()
    ALARM = enum.auto()


class Key(enum.Enum):
    """Keys that move the player."""

    A = "a"
    D = "d"
    W = "w"
    S = "s"


class GameController:
    """Runs the level: the player, the guards and the game-over checks."""

    MAP_WIDTH = 20
    MAP_HEIGHT = 15
    PLAYER_START_X = 0
    PLAYER_START_Y = 7
    ALARM_GUARD_COUNT = 2
    START_GUARD_COUNT = 2
    PLAYER_SPEED = 5.0
    CATCH_DISTANCE = 48.0

    _INITIAL_BLACKBOARD = (
        ("Energy", 20.0),
        ("CanSeePlayer", 0.0),
        ("CanHearPlayer", 0.0),
        ("ReachedDesintation", 0.0),
        ("HasRaisedAlarm", 0.0),
    )

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.game_running = False
        self.alarm_raised = False
        self.player = Vector2(0.0, 0.0)
        self.guards: list[Guard] = []
        self.terrain: list[list[TerrainType]] = []
        self.constructor = StealthConstructor()
        self._random = random_source if random_source is not None else RandomSource()

    # Initialisation

    def initialize(self) -> None:
        """Build the map, define the AI and place the guards and player."""
        self.create_ground(True)
        self.constructor.define_ai()
        self.guards.clear()
        self.setup_guards()
        self.setup_player()

    def create_ground(self, alarm: bool) -> None:
        """Lay out the terrain grid, indexed ``terrain[x][y]``."""

        def tile(x: int, y: int) -> TerrainType:
            if x == 0:
                return TerrainType.START_ZONE
            if x == self.MAP_WIDTH - 1:
                return TerrainType.END_ZONE
            if alarm and y == self.MAP_HEIGHT // 2 and x == self.MAP_WIDTH // 2:
                return TerrainType.ALARM
            return TerrainType.GROUND

        self.terrain = [
            [tile(x, y) for y in range(self.MAP_HEIGHT)] for x in range(self.MAP_WIDTH)
        ]

    def _new_guard(self, y_cell: int) -> Guard:
        guard = Guard("Guard", self.constructor, self._random)
        for key, value in self._INITIAL_BLACKBOARD:
            guard.add_bb_value(key, value)
        guard.set_patrol_bounds(self.MAP_WIDTH, self.MAP_HEIGHT)
        guard.spawn(grid_to_screen(self.MAP_WIDTH - 2), grid_to_screen(y_cell))
        guard.is_active = True
        return guard

    def setup_guards(self) -> None:
        """Create the starting guards, alternating top and bottom on the right."""
        for i in range(self.START_GUARD_COUNT):
            y_cell = (i % 2) * (self.MAP_HEIGHT - 1) + 1
            self.guards.append(self._new_guard(y_cell))

    def setup_player(self) -> None:
        """Place the player at the start position."""
        self.player = Vector2(
            grid_to_screen(self.PLAYER_START_X), grid_to_screen(self.PLAYER_START_Y)
        )

    # Game loop and events

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds while it is running."""
        if not self.game_running:
            return
        for guard in self.guards:
            guard.update(dt)
        self.check_guard_hearing()
        self.check_guard_los()
        self.check_guard_alarm()
        self.check_game_over()

    def handle_key_press(self, key: Key) -> None:
        """Move the player for a key press, keeping them on the map."""
        if not self.game_running:
            return
        x, y = self.player.x, self.player.y
        if key is Key.A:
            x -= self.PLAYER_SPEED
        elif key is Key.D:
            x += self.PLAYER_SPEED
        elif key is Key.W:
            y -= self.PLAYER_SPEED
        elif key is Key.S:
            y += self.PLAYER_SPEED

        max_x = self.MAP_WIDTH * MAP_SECTION_SIZE
        max_y = self.MAP_HEIGHT * MAP_SECTION_SIZE
        self.player = Vector2(min(max(x, 0.0), max_x), min(max(y, 0.0), max_y))

    # Game status

    def start_game(self) -> None:
        """Set the game running with the alarm not yet raised."""
        self.game_running = True
        self.alarm_raised = False

    def check_game_over(self) -> bool:
        """End the game if the player escaped or was caught; return whether it ended."""
        game_over = False
        if screen_to_grid(self.player.x) > self.MAP_WIDTH - 2:
            game_over = True
            print("Game Ended: Player Win")
        else:
            for i, guard in enumerate(self.guards):
                if guard.is_active and distance(guard.position, self.player) < self.CATCH_DISTANCE:
                    game_over = True
                    print(f"Game Ended: AI Win - caught by guard {i}")
        if game_over:
            self.reset_game()
        return game_over

    def check_guard_alarm(self) -> None:
        """Bring in reinforcements when any active guard has raised the alarm."""
        for guard in list(self.guards):
            if guard.is_active and guard.get_bb_value("HasRaisedAlarm") == 1:
                guard.edit_bb_value("HasRaisedAlarm", 0)
                self.trigger_alarm_guards()

    def trigger_alarm_guards(self) -> None:
        """Spawn the alarm guards; only the first call in a game has any effect."""
        if self.alarm_raised:
            return
        for i in range(self.ALARM_GUARD_COUNT):
            self.guards.append(self._new_guard((i % 2) * self.MAP_HEIGHT))
        self.alarm_raised = True

    def check_guard_los(self) -> None:
        """Tell each active guard whether it can see the player."""
        for guard in self.guards:
            if not guard.is_active:
                continue
            if guard.can_see_point(self.player):
                guard.update_can_see_player(self.player.x, self.player.y)
            else:
                guard.update_cannot_see_player()

    def check_guard_hearing(self) -> None:
        """Tell each active guard when it starts or stops hearing the player."""
        for guard in self.guards:
            if not guard.is_active:
                continue
            heard = guard.can_hear_point(self.player)
            already_heard = guard.is_player_heard()
            if heard and not already_heard:
                guard.update_can_hear_player(self.player.x, self.player.y)
            elif not heard and already_heard:
                guard.update_cannot_hear_player()

    def reset_game(self) -> None:
        """Stop the game."""
        self.game_running = False
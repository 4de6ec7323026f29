"""The guards that patrol the level, driven by a finite-state-machine brain."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from stealthai.actor import Actor
from stealthai.fsm import make_fsm_brain
from stealthai.geometry import (
    Vector2,
    distance,
    grid_to_screen,
    point_in_triangle,
    rotate_point,
    rotation_of,
)
from stealthai.randomness import RandomSource

if TYPE_CHECKING:
    from stealthai.constructor import AIConstructor


class MovementState(enum.Enum):
    """How a guard is currently moving."""

    MOVING = enum.auto()
    STATIONARY = enum.auto()
    RUNNING = enum.auto()


def _lerp(a: float, b: float, t: float) -> float:
    if t == 1:
        return b
    return a + t * (b - a)


class Guard(Actor):
    """A patrolling guard that rests, patrols, investigates noises and chases."""

    HEAR_RANGE = 384.0
    WALK_ENERGY_USE = 1.0
    RUN_ENERGY_USE = 3.0
    REST_ENERGY_GAIN = 3.0
    ENERGY_CAP = 20.0
    MOVE_SPEED = 92.0
    CHASE_REFRESH = 0.5
    ALARM_POINT = Vector2(700.0, 500.0)
    SPRINT_MULTIPLIER = 2.0

    # Line-of-sight triangle, relative to the guard, before rotation.
    _SIGHT_TRIANGLE = (Vector2(0.0, 0.0), Vector2(-128.0, 256.0), Vector2(128.0, 256.0))

    def __init__(
        self,
        actor_id: str,
        constructor: AIConstructor,
        random_source: RandomSource | None = None,
    ) -> None:
        super().__init__(actor_id)
        self.x = 0.0
        self.y = 0.0
        self.rotation = 0.0
        self.is_active = False
        self.state = MovementState.STATIONARY
        self.dt = 0.0

        self.patrol_max_x = 0
        self.patrol_max_y = 0

        self.move_target = Vector2(0.0, 0.0)
        self.move_origin = Vector2(0.0, 0.0)
        self.has_move_target = False
        self.move_time = 0.0
        self.move_point = 0.0
        self.chase_counter = 0.0
        self.is_raising_alarm = False

        self._random = random_source if random_source is not None else RandomSource()
        self.brain = make_fsm_brain(constructor, self)

    @property
    def position(self) -> Vector2:
        """The guard's current position."""
        return Vector2(self.x, self.y)

    # Frame update

    def update(self, dt: float) -> None:
        """Think and act for one frame, then track arrival and energy."""
        self.dt = dt
        super().update(dt)

        if self.state is MovementState.MOVING and self.move_point >= 1:
            self.edit_bb_value("ReachedDesintation", 1)
            self.has_move_target = False
            self.state = MovementState.STATIONARY
            if self.is_raising_alarm:
                self.edit_bb_value("HasRaisedAlarm", 1)
                self.is_raising_alarm = False

        self._update_energy_level(dt)

    def pre_transition(self) -> None:
        """Forget the current movement before the state machine changes state."""
        self.has_move_target = False
        self.chase_counter = 0.0

    # Initialisation

    def spawn(self, x: float, y: float) -> None:
        """Place the guard at a screen position."""
        self.x = x
        self.y = y

    def set_patrol_bounds(self, x: int, y: int) -> None:
        """Limit random patrol points to the first ``x`` by ``y`` grid cells."""
        self.patrol_max_x = x
        self.patrol_max_y = y

    # Movement

    def _random_patrol_point(self) -> Vector2:
        grid_x = self._random.random_int(self.patrol_max_x)
        grid_y = self._random.random_int(self.patrol_max_y)
        return Vector2(grid_to_screen(grid_x), grid_to_screen(grid_y))

    def _move_to_point(self, target: Vector2, sprint: bool) -> None:
        self.move_target = target
        self.move_origin = Vector2(self.x, self.y)
        speed = self.MOVE_SPEED * self.SPRINT_MULTIPLIER if sprint else self.MOVE_SPEED
        self.move_time = distance(self.move_origin, self.move_target) / speed
        self.move_point = 0.0
        self.rotation = rotation_of(self.move_target - self.move_origin)
        self.edit_bb_value("ReachedDesintation", 0)

    def _move(self, dt: float) -> None:
        self.x = _lerp(self.move_origin.x, self.move_target.x, self.move_point)
        self.y = _lerp(self.move_origin.y, self.move_target.y, self.move_point)
        if self.move_time > 0:
            self.move_point += dt / self.move_time
        elif dt > 0:
            # Already at the target: arrival is immediate.
            self.move_point = 1.0

    def _update_energy_level(self, dt: float) -> None:
        energy = self.get_bb_value("Energy")
        if self.state is MovementState.STATIONARY:
            energy += self.REST_ENERGY_GAIN * dt
        elif self.state is MovementState.MOVING:
            energy -= self.WALK_ENERGY_USE * dt
        elif self.state is MovementState.RUNNING:
            energy -= self.RUN_ENERGY_USE * dt
        energy = min(max(energy, 0.0), self.ENERGY_CAP)
        self.edit_bb_value("Energy", energy)

    # Behaviours, called each frame to progress them

    def rest(self) -> None:
        """Stand still and recover energy."""
        self.state = MovementState.STATIONARY

    def patrol(self) -> None:
        """Walk towards a random patrol point, choosing one when needed."""
        if not self.has_move_target:
            self._move_to_point(self._random_patrol_point(), sprint=False)
            self.has_move_target = True
        self.state = MovementState.MOVING
        self._move(self.dt)

    def investigate(self) -> None:
        """Walk to where the player was last heard."""
        if not self.has_move_target:
            noise = Vector2(
                self.get_bb_value("PlayerHeardX"), self.get_bb_value("PlayerHeardY")
            )
            # Don't investigate the same noise again once finished.
            self.edit_bb_value("CanHearPlayer", 0)
            self._move_to_point(noise, sprint=False)
            self.has_move_target = True
        self.state = MovementState.MOVING
        self._move(self.dt)

    def raise_alarm(self) -> None:
        """Walk to the alarm point to raise the alarm."""
        if not self.has_move_target:
            self._move_to_point(self.ALARM_POINT, sprint=False)
            self.has_move_target = True
            self.is_raising_alarm = True
        self.state = MovementState.MOVING
        self._move(self.dt)

    def _pursue(self, sprint: bool) -> None:
        if self.chase_counter <= 0:
            self.chase_counter = self.CHASE_REFRESH
            seen = Vector2(
                self.get_bb_value("PlayerSeenX"), self.get_bb_value("PlayerSeenY")
            )
            self._move_to_point(seen, sprint=sprint)
            self.has_move_target = True
        self.chase_counter -= self.dt
        self.state = MovementState.RUNNING if sprint else MovementState.MOVING
        self._move(self.dt)

    def chase(self) -> None:
        """Walk towards where the player was seen, re-aiming periodically."""
        self._pursue(sprint=False)

    def sprint(self) -> None:
        """Run towards where the player was seen, re-aiming periodically."""
        self._pursue(sprint=True)

    # Status

    def is_player_seen(self) -> bool:
        """Whether the blackboard says the player is in sight."""
        return self.get_bb_value("CanSeePlayer") == 1

    def is_player_heard(self) -> bool:
        """Whether the blackboard says the player has been heard."""
        return self.get_bb_value("CanHearPlayer") == 1

    def update_can_see_player(self, x: float, y: float) -> None:
        """Record that the player is seen at ``(x, y)``."""
        self.edit_bb_value("CanSeePlayer", 1)
        self.add_bb_value("PlayerSeenX", x)
        self.add_bb_value("PlayerSeenY", y)

    def update_cannot_see_player(self) -> None:
        """Record that the player is out of sight."""
        self.edit_bb_value("CanSeePlayer", 0)
        self.delete_bb_value("PlayerSeenX")
        self.delete_bb_value("PlayerSeenY")

    def update_can_hear_player(self, x: float, y: float) -> None:
        """Record that the player is heard at ``(x, y)``."""
        self.edit_bb_value("CanHearPlayer", 1)
        self.add_bb_value("PlayerHeardX", x)
        self.add_bb_value("PlayerHeardY", y)

    def update_cannot_hear_player(self) -> None:
        """Record that the player can no longer be heard."""
        self.edit_bb_value("CanHearPlayer", 0)
        self.delete_bb_value("PlayerHeardX")
        self.delete_bb_value("PlayerHeardY")

    def can_see_point(self, point: Vector2) -> bool:
        """Whether ``point`` lies within the guard's sight triangle."""
        offset = Vector2(self.x, self.y)
        corners = [rotate_point(p, self.rotation) + offset for p in self._SIGHT_TRIANGLE]
        return point_in_triangle(corners[0], corners[1], corners[2], point)

    def can_hear_point(self, point: Vector2) -> bool:
        """Whether ``point`` is within hearing range."""
        return distance(point, Vector2(self.x, self.y)) <= self.HEAR_RANGE
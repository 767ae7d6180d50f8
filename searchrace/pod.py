"""The racing pod and its per-turn physics."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence, Tuple

from searchrace.action import Action
from searchrace.checkpoint import CheckPoint
from searchrace.point import Point

MAX_TURN = 600
FRICTION = 0.85
CHECKPOINT_SCORE = 50_000.0
_AIM_DISTANCE = 100_000.0


def _trunc(value: float) -> float:
    """Truncate toward zero, keeping a float."""
    return float(math.trunc(value))


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return float(whole)


def _wrap_degrees(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into [0, 360)."""
    if angle >= 360.0:
        return angle - 360.0
    if angle < 0.0:
        return angle + 360.0
    return angle


@dataclass
class Pod:
    """A pod's position, speed, heading and race progress."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    angle: float = 0.0
    next_checkpoint_id: int = 0
    done: bool = False
    turn: int = 0
    max_turn: int = MAX_TURN
    last_score: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.vx = float(self.vx)
        self.vy = float(self.vy)
        self.angle = float(self.angle)

    @property
    def position(self) -> Point:
        """Current position as a point."""
        return Point(self.x, self.y)

    def speed(self) -> float:
        """Magnitude of the velocity."""
        return math.sqrt(self.vx * self.vx + self.vy * self.vy)

    def copy(self) -> Pod:
        """Return an independent copy of this pod."""
        return replace(self)

    def apply_moves(
        self, actions: Iterable[Action], checkpoints: Sequence[CheckPoint]
    ) -> None:
        """Play every action in order."""
        for action in actions:
            self.apply_move(action, checkpoints)

    def apply_move(self, action: Action, checkpoints: Sequence[CheckPoint]) -> None:
        """Play one turn: rotate, thrust, detect a crossing, move and settle."""
        self._rotate(float(action.angle))
        self._boost(float(action.thrust))
        self._check_cross_checkpoint(checkpoints)
        self._move()
        self._end()
        self.turn += 1
        if self.turn >= self.max_turn:
            self.done = True

    def output(self, action: Action) -> Tuple[float, float, int]:
        """Target point and thrust that make the game perform ``action``."""
        next_angle = _wrap_degrees(self.angle + action.angle)
        radians = next_angle * math.pi / 180.0
        px = self.x + math.cos(radians) * _AIM_DISTANCE
        py = self.y + math.sin(radians) * _AIM_DISTANCE
        return px, py, action.thrust

    def describe(self) -> None:
        """Print the pod's state to standard error."""
        print(f"\nPod Position       : ({self.x}, {self.y})", file=sys.stderr)
        print(f"Pod Speed          : ({self.vx}, {self.vy})", file=sys.stderr)
        print(f"Pod Angle          : {self.angle}", file=sys.stderr)
        print(f"Pod NextCheckPoint : {self.next_checkpoint_id}", file=sys.stderr)

    def get_angle(self, p: Point) -> float:
        """Angle in degrees from the X axis to the direction of ``p``."""
        d = self.distance(p)
        if d == 0.0:
            return math.nan
        dx = (p.x - self.x) / d
        dy = (p.y - self.y) / d
        a = math.degrees(math.acos(dx))
        return 360.0 - a if dy < 0.0 else a

    def diff_angle(self, p: Point) -> float:
        """Smallest signed rotation towards ``p``; negative means turn left."""
        a = self.get_angle(p)
        right = a - self.angle if self.angle <= a else 360.0 - self.angle + a
        left = self.angle - a if self.angle >= a else self.angle + 360.0 - a
        return right if right < left else -left

    def fitness(self, checkpoints: Sequence[CheckPoint]) -> float:
        """Score rewarding checkpoints passed and closeness to the next one."""
        target = checkpoints[self.next_checkpoint_id]
        dist = self.distance(target.position)
        return CHECKPOINT_SCORE * (self.next_checkpoint_id + 1) - dist

    def distance(self, other: Point) -> float:
        """Distance from the pod to ``other``."""
        return math.sqrt(self.distance_sq(other))

    def distance_sq(self, other: Point) -> float:
        """Squared distance from the pod to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def _rotate(self, angle: float) -> None:
        self.angle = _wrap_degrees(self.angle + angle)

    def _boost(self, thrust: float) -> None:
        radians = self.angle * math.pi / 180.0
        self.vx += math.cos(radians) * thrust
        self.vy += math.sin(radians) * thrust

    def _check_cross_checkpoint(self, checkpoints: Sequence[CheckPoint]) -> None:
        t = self._collision_time(checkpoints[self.next_checkpoint_id])
        if t is None:
            return
        self.next_checkpoint_id += 1
        if self.next_checkpoint_id == len(checkpoints) - 1:
            self.done = True
        self.last_score = self.turn + t

    def _collision_time(self, checkpoint: CheckPoint) -> Optional[float]:
        """Fraction of this turn's move at which the checkpoint is entered, if any."""
        curr_pos = Point(self.x, self.y)
        next_pos = Point(self.x + self.vx, self.y + self.vy)
        if curr_pos == next_pos:
            return None

        p = checkpoint.closest(curr_pos, next_pos)
        b_sq = checkpoint.distance_sq(p)
        if b_sq > checkpoint.r2:
            return None

        # The closest point must lie ahead of the pod, not behind it.
        if (p.x - curr_pos.x) * self.vx + (p.y - curr_pos.y) * self.vy < 0.0:
            return None

        a_sq = curr_pos.distance_sq(p)
        f = math.sqrt(checkpoint.r2 - b_sq)
        t = (math.sqrt(a_sq) - f) / math.sqrt(self.vx * self.vx + self.vy * self.vy)
        if not 0.0 <= t <= 1.0:
            return None
        return t

    def _move(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def _end(self) -> None:
        self.x = _trunc(self.x)
        self.y = _trunc(self.y)
        self.vx = _trunc(self.vx * FRICTION)
        self.vy = _trunc(self.vy * FRICTION)
        self.angle = _round_half_away(self.angle)
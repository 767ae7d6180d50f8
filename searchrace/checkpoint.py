"""Circular checkpoints the pod must cross."""

from __future__ import annotations

from dataclasses import dataclass

from searchrace.point import Point

CHECKPOINT_RADIUS = 600.0


@dataclass(frozen=True, eq=False)
class CheckPoint:
    """A checkpoint centred on ``(x, y)`` with radius ``r``; ``r2`` is ``r`` squared."""

    x: float
    y: float
    r: float = CHECKPOINT_RADIUS
    r2: float = CHECKPOINT_RADIUS * CHECKPOINT_RADIUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def position(self) -> Point:
        """The centre of the checkpoint."""
        return Point(self.x, self.y)

    def distance(self, other: Point) -> float:
        """Distance from the centre to ``other``."""
        return self.position.distance(other)

    def distance_sq(self, other: Point) -> float:
        """Squared distance from the centre to ``other``."""
        return self.position.distance_sq(other)

    def closest(self, a: Point, b: Point) -> Point:
        """Point on the line through ``a`` and ``b`` nearest to the centre."""
        return self.position.closest(a, b)

    def norm_sq(self) -> float:
        """Squared distance of the centre from the origin."""
        return self.position.norm_sq()

    def norm(self) -> float:
        """Distance of the centre from the origin."""
        return self.position.norm()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CheckPoint):
            return (self.x, self.y, self.r, self.r2) == (
                other.x,
                other.y,
                other.r,
                other.r2,
            )
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))
"""Two-dimensional points with float coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position or vector in the race plane."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return self.distance_sq(other) ** 0.5

    def distance_sq(self, other: Point) -> float:
        """Squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def closest(self, a: Point, b: Point) -> Point:
        """Return the point on the line through ``a`` and ``b`` nearest to this one.

        If ``a`` and ``b`` coincide, the line is undefined and this point is
        returned unchanged.
        """
        da = b.y - a.y
        db = a.x - b.x
        c1 = da * a.x + db * a.y
        c2 = -db * self.x + da * self.y
        det = da * da + db * db
        if det == 0.0:
            return Point(self.x, self.y)
        return Point((da * c1 - db * c2) / det, (da * c2 + db * c1) / det)

    def norm_sq(self) -> float:
        """Squared length of the vector from the origin."""
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        """Length of the vector from the origin."""
        return self.norm_sq() ** 0.5

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Point:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__
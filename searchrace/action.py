"""A single turn's command: thrust and rotation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Parse a signed 32-bit integer, yielding 0 for anything invalid."""
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        return 0
    return value


@dataclass(frozen=True)
class Action:
    """Thrust to apply and angle (degrees) to rotate by in one turn."""

    thrust: int
    angle: int

    @classmethod
    def parse(cls, text: str) -> Action:
        """Build an action from ``"thrust,angle"``; missing or bad parts become 0."""
        parts = text.split(",")
        thrust = _parse_int(parts[0]) if parts else 0
        angle = _parse_int(parts[1]) if len(parts) > 1 else 0
        return cls(thrust, angle)

    def __str__(self) -> str:
        return f"{self.thrust},{self.angle}"
"""Loading a race, placing the pod at the start and searching for moves."""

from __future__ import annotations

import argparse
import json
import math
import re
import time
from pathlib import Path
from typing import List, Optional, Sequence

from searchrace.action import Action
from searchrace.checkpoint import CheckPoint
from searchrace.pod import Pod
from searchrace.point import Point

LAPS = 3
FINISH_LINE_DISTANCE = 50_000.0
DEFAULT_TESTCASE = "testcases/test1.json"
MAX_THRUST = 200
MAX_ROTATION = 18

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _parse_i32(token: str) -> Optional[int]:
    """Parse a signed 32-bit integer, or return None if the token is not one."""
    if not _INT_RE.fullmatch(token):
        return None
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return float(whole)


def parse_checkpoints(test_in: str) -> List[CheckPoint]:
    """Build the full race course from a ``"x y;x y;..."`` description.

    The first point is the start; the course runs through the others and
    back to the start, three laps over, and ends on a point far beyond the
    start along the direction of the last leg.
    """
    points: List[CheckPoint] = []
    for chunk in test_in.split(";"):
        coords = [v for v in (_parse_i32(t) for t in chunk.split(" ")) if v is not None]
        if len(coords) >= 2:
            points.append(CheckPoint(coords[0], coords[1]))

    if not points:
        raise ValueError("the race description holds no checkpoint")

    start, *rest = points
    checkpoints: List[CheckPoint] = []
    for _ in range(LAPS):
        checkpoints.extend(rest)
        checkpoints.append(start)

    before = checkpoints[-2].position
    last = checkpoints[-1].position
    dist = before.distance(last)
    if dist == 0.0:
        raise ValueError("the last leg of the race has no length")
    factor = FINISH_LINE_DISTANCE / dist

    beyond = last * (factor + 1.0) - before * factor
    checkpoints.append(CheckPoint(float(math.trunc(beyond.x)), float(math.trunc(beyond.y))))
    return checkpoints


def load_testcase(path: str | Path) -> List[CheckPoint]:
    """Read a JSON test case holding a ``testIn`` field and build its course.

    A file holding JSON ``null`` yields an empty course.
    """
    data = json.loads(Path(path).read_text())
    if data is None:
        return []
    if not isinstance(data, dict) or "testIn" not in data:
        raise ValueError("test case has no 'testIn' field")
    test_in = data["testIn"]
    if not isinstance(test_in, str):
        raise ValueError("'testIn' must be a string")
    return parse_checkpoints(test_in)


def get_initial_pod(checkpoints: Sequence[CheckPoint]) -> Pod:
    """Place a pod on the start, at rest, facing the first checkpoint."""
    start = checkpoints[-2]
    pod = Pod(start.x, start.y, 0.0, 0.0, 0.0, 0)
    pod.angle = _round_half_away(pod.get_angle(checkpoints[0].position))
    pod.done = False
    pod.turn = 0
    return pod


def all_possible_actions() -> List[Action]:
    """Every thrust from 0 to 200 combined with every rotation from -18 to 18."""
    return [
        Action(thrust, angle)
        for thrust in range(MAX_THRUST + 1)
        for angle in range(-MAX_ROTATION, MAX_ROTATION + 1)
    ]


def greedy_search(
    pod: Pod, checkpoints: Sequence[CheckPoint], actions: Sequence[Action]
) -> List[Action]:
    """Play the race turn by turn, each time taking the action with the best fitness.

    ``pod`` is advanced in place until it is done; the chosen actions are returned.
    """
    if not actions:
        raise ValueError("no actions to choose from")
    chosen: List[Action] = []
    while not pod.done:
        best_score = 0.0
        best_action = actions[0]
        for action in actions:
            trial = pod.copy()
            trial.apply_move(action, checkpoints)
            score = trial.fitness(checkpoints)
            if score > best_score:
                best_score = score
                best_action = action
        pod.apply_move(best_action, checkpoints)
        chosen.append(best_action)
    return chosen


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the greedy search on a test case and print the score and moves."""
    parser = argparse.ArgumentParser(description="Greedy search for a pod race.")
    parser.add_argument("testcase", nargs="?", default=DEFAULT_TESTCASE)
    args = parser.parse_args(argv)

    checkpoints = load_testcase(args.testcase)
    pod = get_initial_pod(checkpoints)
    actions = all_possible_actions()

    start = time.perf_counter()
    chosen = greedy_search(pod, checkpoints, actions)
    elapsed = time.perf_counter() - start

    print(f"Final Score: {pod.last_score}")
    print(f"Time elapsed: {elapsed:.3f}s")
    print(";".join(str(action) for action in chosen))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
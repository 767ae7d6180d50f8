# searchrace

A simulator for a single racing pod that steers through a course of circular
checkpoints, plus a greedy search that picks a thrust and a rotation for every
turn.

Each turn the pod rotates by the given number of degrees, accelerates along its
heading by the thrust, moves, and then has its position truncated toward zero,
its velocity multiplied by 0.85 and truncated, and its heading rounded to a
whole degree. A checkpoint counts as crossed when the path travelled during the
turn enters its 600-unit radius. A race ends when the last checkpoint of the
course is reached or after 600 turns.

## Installation

```
pip install .
```

No dependencies outside the standard library. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
searchrace path/to/testcase.json
```

Without an argument the command reads `testcases/test1.json` relative to the
current directory. The test case is a JSON object whose `testIn` field holds
the checkpoint coordinates as `"x y;x y;..."`.

The command runs the greedy search turn by turn until the race ends, then
prints three lines: the final score (the turn, with a fractional part for the
moment within the turn, at which the pod last crossed a checkpoint), the
elapsed time of the search in seconds, and the chosen actions as
`thrust,angle` pairs separated by `;`.

## Library use

```python
from searchrace.action import Action
from searchrace.race import load_testcase, get_initial_pod

checkpoints = load_testcase("testcase.json")
pod = get_initial_pod(checkpoints)

pod.apply_move(Action(200, -14), checkpoints)
pod.apply_moves([Action.parse("200,-1"), Action.parse("200,14")], checkpoints)

print(pod.x, pod.y, pod.vx, pod.vy, pod.angle)
print(pod.next_checkpoint_id, pod.done, pod.last_score)
```

The main pieces:

- `searchrace.point.Point` – an immutable 2D point with `distance`,
  `distance_sq`, `norm`, `norm_sq`, `+`, `-`, multiplication by a number, and
  `closest`, the projection of a point onto the line through two points.
- `searchrace.checkpoint.CheckPoint` – a checkpoint with radius `r` of 600 and
  `r2` its square; it compares equal to a `Point` at its centre.
- `searchrace.action.Action` – one turn's command; `Action.parse("200,-14")`
  reads it (missing or malformed parts become 0) and `str(action)` writes it
  back.
- `searchrace.pod.Pod` – the pod state and its physics: `apply_move`,
  `apply_moves`, `fitness`, `get_angle`, `diff_angle`, `output` (the target
  point and thrust that produce an action), `speed`, `describe` (prints the
  state to standard error) and `copy`.
- `searchrace.race` – `parse_checkpoints`, `load_testcase`,
  `get_initial_pod`, `all_possible_actions`, `greedy_search` and `main`.

`parse_checkpoints` repeats the course three laps, starting from the second
point and finishing at the first, then appends one extra point 50,000 units
beyond the finish along the last leg, so there is always a next target. It
raises `ValueError` if the description holds no checkpoint or the last leg has
no length. `load_testcase` raises `ValueError` when `testIn` is missing or not
a string, and returns an empty list for a file holding JSON `null`.

`get_initial_pod` places the pod at rest on the finishing checkpoint, facing
the first one. `greedy_search` advances the pod in place, each turn trying
every given action on a copy and keeping the one with the highest fitness, and
returns the actions it chose.

## What it does not do

The package simulates and searches offline only. It does not speak the game's
turn-by-turn input and output protocol, and it has no opponents, collisions
between pods or rendering.
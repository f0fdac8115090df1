# starhaul

starhaul finds the cheapest way for a single cargo hauler to deliver a set of
items between locations. You describe the locations, the distances between
them, the hauler's capacity and the delivery tasks in a JSON file. starhaul
then searches the possible sequences of actions and prints the cheapest plan
it finds.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## The input file

```json
{
  "HaulerCapacity": 10,
  "Locations": ["Depot", "Mine", "Port"],
  "HaulerStartLocation": "Depot",
  "Distances": {
    "Depot": {"Mine": 4, "Port": 7},
    "Mine": {"Port": 3}
  },
  "Tasks": [
    {"From": "Mine", "To": "Port", "Items": [{"Volume": 6}, {"Volume": 3}]}
  ]
}
```

- `HaulerCapacity` is the total volume the hauler can carry at once.
- `Locations` names every location. Locations are numbered in this order,
  starting at 0.
- `HaulerStartLocation` is the name of the location the hauler starts at.
- `Distances` gives the distance between pairs of locations. Distances go both
  ways, so each pair needs to be given only once. Pairs that are not given
  have distance 0.
- Each task moves its items from `From` to `To`. Every item becomes its own
  delivery, and items are numbered in the order they appear in the file.

Field names are matched exactly first and then without regard to case. Missing
fields count as 0, empty or absent. A location name that is not listed under
`Locations` is taken to be location 0. Malformed JSON or a field of the wrong
type (for example a string where a number belongs) is an error.

## Running

```
starhaul problem.json
```

The same command is available as `python -m starhaul.cli problem.json`.

The output lists the actions to take, numbered from 1, followed by the
estimated and the actual cost of the plan:

```
Actions to take: 
  1. move to location <n>
  2. take item <n>
  ...
  k. put item <n>
---
Lowest estimated cost: <cost>
Actual cost          : <cost>
```

The actual cost is found by carrying out the plan step by step. If no plan can
complete every task, no actions are listed and the estimated cost is `+Inf`.

Run without an argument, `starhaul` prints a usage line and exits with status
0. If the file cannot be read or parsed, it prints the error to standard error
and exits with status 2.

## How the cost is counted

- Moving to another location costs the distance travelled plus one.
- Taking an item into the hauler or putting one down costs nothing by itself.
- Every action in the plan adds one more, so among plans of equal distance the
  one with fewer steps is preferred.

An item can only be taken if it is at the hauler's location and fits in the
remaining capacity. When an item is put down at the destination of its task,
the task is complete and the item leaves the simulation.

## Using it from Python

```python
from starhaul.config import load_config
from starhaul.simulation import Simulation
from starhaul.solver import solve

config = load_config("problem.json")
simulation = Simulation.from_config(config)
plan = solve(simulation)

print(plan.cost, plan.feasible)
for action in plan.actions:
    action.apply(simulation)
    print(action.description())
```

- `starhaul.config` has `parse_config(data)` for a JSON string or bytes and
  `load_config(path)` for a file; both return a `SimulationConfig`.
- `starhaul.simulation` has `Simulation`, its `State` (with `copy()` and
  `fingerprint()`), `Task`, and the actions `MoveAction`, `TakeAction` and
  `PutAction`. `action.apply(simulation)` carries an action out and returns
  its cost, or raises `InvalidActionError` if it cannot be done.
  `Simulation.gen_actions()` lists the actions worth trying from the current
  state.
- `starhaul.solver` has `solve(simulation)` and the `Solver` class whose
  `search(simulation)` returns a `Plan` with `cost`, `actions` and `feasible`.
  The search leaves the simulation in the state it started in. A `Solver`
  remembers results by state, so use a fresh one (or `solve`) for each
  scenario.
- `starhaul.matrix` has `SymmetricMatrix`, which stores only the upper
  triangle of a symmetric matrix and is indexed as `matrix[i, j]`.

## Limits

The search is exhaustive: it tries every sequence of moves, pickups and
drop-offs, so running time grows very quickly with the number of locations
and items. It is meant for small scenarios. There is a single hauler, and the
plan is printed as text only; there is no other output format.
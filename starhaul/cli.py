"""Command line entry point: solve a scenario file and print the plan."""

from __future__ import annotations

import math
import sys
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

from .config import load_config
from .simulation import Simulation
from .solver import Plan, solve


def _format_number(value: float) -> str:
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def run(path: Union[str, PathLike[str]], out: TextIO) -> Plan:
    """Solve the scenario at ``path``, write the plan to ``out`` and return it."""
    simulation = Simulation.from_config(load_config(path))
    plan = solve(simulation)

    print("Actions to take: ", file=out)
    actual = 0.0
    for step, action in enumerate(plan.actions, start=1):
        actual += action.apply(simulation) + 1.0
        print(f"  {step}. {action.description()}", file=out)

    print("---", file=out)
    print(f"Lowest estimated cost: {_format_number(plan.cost)}", file=out)
    print(f"Actual cost          : {_format_number(actual)}", file=out)
    return plan


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver on the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: starhaul <filename>")
        return 0
    try:
        run(args[0], sys.stdout)
    except (OSError, ValueError, IndexError) as exc:
        print(f"starhaul: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Exhaustive lowest-cost search for a plan that completes every task."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .simulation import Action, InvalidActionError, Simulation, State


@dataclass(frozen=True)
class Plan:
    """A sequence of actions and its estimated cost (each step adds 1)."""

    cost: float
    actions: tuple[Action, ...] = ()

    @property
    def feasible(self) -> bool:
        return math.isfinite(self.cost)


_UNREACHABLE = Plan(math.inf, ())


@dataclass
class _Frame:
    key: str
    pending: Iterator[Action]
    best: Plan = _UNREACHABLE
    saved: Optional[State] = None
    action: Optional[Action] = None
    step_cost: float = 0.0


class Solver:
    """Depth-first search over simulation states with memoised results.

    Results are remembered by state fingerprint for the lifetime of the
    solver, so one solver should be used for one scenario.
    """

    def __init__(self) -> None:
        self._memo: dict[str, Plan] = {}

    def _enter(
        self, simulation: Simulation, visited: set[str], stack: list[_Frame]
    ) -> Optional[Plan]:
        state = simulation.state
        if not state.tasks:
            return Plan(0.0, ())
        key = state.fingerprint()
        if key in self._memo:
            return self._memo[key]
        if key in visited:
            return _UNREACHABLE
        visited.add(key)
        stack.append(_Frame(key=key, pending=iter(simulation.gen_actions())))
        return None

    def search(self, simulation: Simulation) -> Plan:
        """Find the cheapest plan from the simulation's current state.

        The simulation is left in the state it started in.
        """
        visited: set[str] = set()
        stack: list[_Frame] = []
        outcome = self._enter(simulation, visited, stack)

        while stack:
            frame = stack[-1]
            if outcome is not None:
                assert frame.saved is not None and frame.action is not None
                simulation.state = frame.saved
                total = frame.step_cost + outcome.cost + 1.0
                if total < frame.best.cost:
                    frame.best = Plan(total, (frame.action, *outcome.actions))
                outcome = None

            descended = False
            for action in frame.pending:
                saved = simulation.state.copy()
                try:
                    cost = action.apply(simulation)
                except InvalidActionError:
                    simulation.state = saved
                    continue
                frame.saved, frame.action, frame.step_cost = saved, action, cost
                outcome = self._enter(simulation, visited, stack)
                descended = True
                break

            if not descended:
                stack.pop()
                visited.discard(frame.key)
                self._memo[frame.key] = frame.best
                outcome = frame.best

        assert outcome is not None
        return outcome


def solve(simulation: Simulation) -> Plan:
    """Find the cheapest plan with a fresh solver."""
    return Solver().search(simulation)
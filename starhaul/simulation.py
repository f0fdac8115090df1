"""A hauler that moves items between locations to complete delivery tasks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .matrix import SymmetricMatrix


class SimulationError(Exception):
    """Raised when the simulation is asked about something that does not exist."""


class InvalidActionError(SimulationError):
    """Raised when an action cannot be carried out in the current state."""


@dataclass(frozen=True)
class Task:
    """Deliver one item from one location to another."""

    from_location: int
    to_location: int


def _sorted_list(items: set[int]) -> str:
    return "[" + " ".join(str(i) for i in sorted(items)) + "]"


@dataclass
class State:
    """Everything in the simulation that actions can change."""

    hauler_location: int
    hauler_items: set[int] = field(default_factory=set)
    items_in_locations: list[set[int]] = field(default_factory=list)
    tasks: dict[int, Task] = field(default_factory=dict)

    def copy(self) -> "State":
        """Return an independent deep copy of this state."""
        return State(
            hauler_location=self.hauler_location,
            hauler_items=set(self.hauler_items),
            items_in_locations=[set(items) for items in self.items_in_locations],
            tasks=dict(self.tasks),
        )

    def fingerprint(self) -> str:
        """A string that identifies the item placement and hauler position."""
        locations = "".join(_sorted_list(items) + ";" for items in self.items_in_locations)
        return f"{self.hauler_location}|{_sorted_list(self.hauler_items)}|{locations}"


class Simulation:
    """The hauler world: fixed constants plus a mutable state."""

    def __init__(
        self,
        hauler_capacity: int,
        distances: SymmetricMatrix[int],
        items: Sequence[int],
        hauler_start_location: int,
        tasks: Mapping[int, Task],
    ) -> None:
        self._capacity = hauler_capacity
        self._distances = distances
        self._items = list(items)
        self._state = State(
            hauler_location=hauler_start_location,
            items_in_locations=[set() for _ in range(distances.order())],
            tasks=dict(tasks),
        )
        for item, task in self._state.tasks.items():
            self.location_items(task.from_location).add(item)

    @classmethod
    def from_config(cls, config: Any) -> "Simulation":
        """Build a simulation from a parsed configuration."""
        return cls(
            config.hauler_capacity,
            config.distances,
            config.items,
            config.hauler_start_location,
            config.tasks,
        )

    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, state: State) -> None:
        self._state = state

    def gen_actions(self) -> list["Action"]:
        """All actions worth trying from the current state."""
        here = self.hauler_location
        actions: list[Action] = [
            MoveAction(loc) for loc in range(self.number_of_locations) if loc != here
        ]
        load = self.hauler_load()
        actions.extend(
            TakeAction(item)
            for item in sorted(self.current_location_items())
            if load + self._items[item] <= self._capacity
        )
        actions.extend(PutAction(item) for item in sorted(self.hauler_items()))
        return actions

    @property
    def hauler_location(self) -> int:
        return self._state.hauler_location

    @property
    def number_of_locations(self) -> int:
        return len(self._state.items_in_locations)

    @property
    def number_of_total_items(self) -> int:
        return len(self._items)

    @property
    def hauler_capacity(self) -> int:
        return self._capacity

    def _check_location(self, location: int) -> bool:
        return 0 <= location < self.number_of_locations

    def move_hauler(self, location: int) -> None:
        """Place the hauler at ``location``."""
        if not self._check_location(location):
            raise InvalidActionError(f"invalid location index {location}")
        self._state.hauler_location = location

    def distance(self, a: int, b: int) -> int:
        """Distance between two locations."""
        if not (self._check_location(a) and self._check_location(b)):
            raise SimulationError("invalid location index")
        return self._distances[a, b]

    def volume_of_item(self, item: int) -> int:
        if not 0 <= item < len(self._items):
            raise IndexError(f"invalid item index {item}")
        return self._items[item]

    def current_location_items(self) -> set[int]:
        return self._state.items_in_locations[self._state.hauler_location]

    def location_items(self, location: int) -> set[int]:
        if not self._check_location(location):
            raise SimulationError(f"invalid location index {location}")
        return self._state.items_in_locations[location]

    def hauler_items(self) -> set[int]:
        return self._state.hauler_items

    def hauler_load(self) -> int:
        """Total volume of the items in the hauler."""
        return sum(self._items[item] for item in self._state.hauler_items)

    def take_item(self, item: int) -> None:
        """Move an item from the current location into the hauler."""
        if not 0 <= item < len(self._items):
            raise InvalidActionError(f"invalid item index {item}")
        if self.hauler_load() + self._items[item] > self._capacity:
            raise InvalidActionError(f"item {item} does not fit in the hauler")
        here = self.current_location_items()
        if item not in here:
            raise InvalidActionError(f"item {item} is not at the current location")
        here.discard(item)
        self._state.hauler_items.add(item)

    def put_item(self, item: int) -> None:
        """Unload an item at the current location and settle finished tasks."""
        if not 0 <= item < len(self._items):
            raise InvalidActionError(f"invalid item index {item}")
        if item not in self._state.hauler_items:
            raise InvalidActionError(f"item {item} is not in the hauler")
        self._state.hauler_items.discard(item)
        self.current_location_items().add(item)
        self.remove_completed_tasks()

    def remove_completed_tasks(self) -> int:
        """Drop tasks whose item sits at its destination; return how many."""
        done = []
        for item, task in self._state.tasks.items():
            try:
                destination = self.location_items(task.to_location)
            except SimulationError as exc:
                raise SimulationError("invalid state") from exc
            if item in destination:
                destination.discard(item)
                done.append(item)
        for item in done:
            del self._state.tasks[item]
        return len(done)


class Action(ABC):
    """Something the hauler can do, with a cost."""

    @abstractmethod
    def apply(self, simulation: Simulation) -> float:
        """Carry out the action and return its cost; raise InvalidActionError if impossible."""

    @abstractmethod
    def description(self) -> str:
        """Human-readable text for the action."""


@dataclass(frozen=True)
class MoveAction(Action):
    to_location: int

    def apply(self, simulation: Simulation) -> float:
        start = simulation.hauler_location
        simulation.move_hauler(self.to_location)
        return float(simulation.distance(start, self.to_location)) + 1.0

    def description(self) -> str:
        return f"move to location {self.to_location}"


@dataclass(frozen=True)
class TakeAction(Action):
    item: int

    def apply(self, simulation: Simulation) -> float:
        simulation.take_item(self.item)
        return 0.0

    def description(self) -> str:
        return f"take item {self.item}"


@dataclass(frozen=True)
class PutAction(Action):
    item: int

    def apply(self, simulation: Simulation) -> float:
        simulation.put_item(self.item)
        return 0.0

    def description(self) -> str:
        return f"put item {self.item}"
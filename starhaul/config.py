"""Reading hauler scenarios from JSON documents."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

from .matrix import SymmetricMatrix
from .simulation import Task


@dataclass
class SimulationConfig:
    """Everything needed to build a simulation, with locations as indices."""

    hauler_capacity: int = 0
    hauler_start_location: int = 0
    distances: SymmetricMatrix[int] = field(
        default_factory=lambda: SymmetricMatrix.with_order(0)
    )
    items: list[int] = field(default_factory=list)
    tasks: dict[int, Task] = field(default_factory=dict)


def _lookup(obj: dict[str, Any], name: str) -> Any:
    """Find a JSON field by name, falling back to a case-insensitive match."""
    if name in obj:
        return obj[name]
    lowered = name.lower()
    for key, value in obj.items():
        if key.lower() == lowered:
            return value
    return None


def _as_int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _as_str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def _as_list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be an array, got {value!r}")
    return value


def _as_dict(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object, got {value!r}")
    return value


def parse_config(data: Union[str, bytes]) -> SimulationConfig:
    """Parse a JSON scenario into a :class:`SimulationConfig`.

    Location names that are not listed under ``Locations`` resolve to
    location 0. Raises ``ValueError`` for malformed JSON or mistyped fields.
    """
    document = _as_dict(json.loads(data), "configuration")

    locations = [
        _as_str(name, "location name")
        for name in _as_list(_lookup(document, "Locations"), "Locations")
    ]
    index = {name: position for position, name in enumerate(locations)}

    distances = SymmetricMatrix.with_order(len(locations), 0)
    for origin, row in _as_dict(_lookup(document, "Distances"), "Distances").items():
        for target, distance in _as_dict(row, f"distances from {origin!r}").items():
            distances[index.get(origin, 0), index.get(target, 0)] = _as_int(
                distance, f"distance from {origin!r} to {target!r}"
            )

    items: list[int] = []
    tasks: dict[int, Task] = {}
    for raw_task in _as_list(_lookup(document, "Tasks"), "Tasks"):
        task_doc = _as_dict(raw_task, "task")
        task = Task(
            from_location=index.get(_as_str(_lookup(task_doc, "From"), "From"), 0),
            to_location=index.get(_as_str(_lookup(task_doc, "To"), "To"), 0),
        )
        for raw_item in _as_list(_lookup(task_doc, "Items"), "Items"):
            item_doc = _as_dict(raw_item, "item")
            items.append(_as_int(_lookup(item_doc, "Volume"), "Volume"))
            tasks[len(items) - 1] = task

    start = _as_str(_lookup(document, "HaulerStartLocation"), "HaulerStartLocation")
    return SimulationConfig(
        hauler_capacity=_as_int(_lookup(document, "HaulerCapacity"), "HaulerCapacity"),
        hauler_start_location=index.get(start, 0),
        distances=distances,
        items=items,
        tasks=tasks,
    )


def load_config(path: Union[str, PathLike[str]]) -> SimulationConfig:
    """Read and parse a JSON scenario file."""
    with open(path, "rb") as handle:
        return parse_config(handle.read())
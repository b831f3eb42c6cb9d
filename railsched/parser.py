"""Parsers and writers for the railway elements and schedule files."""

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .errors import ParsingError, report_error
from .timeconv import convert_to_seconds

MAX_RAIL_DISTANCE = 1_000_000
SCHEDULE_SUFFIX = ".schedule"

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
    "y": 60 * 60 * 24 * 365,
}

_LEADING_WORD = re.compile(r"\s*(\S+)(.*)", re.S)


@dataclass
class Rail:
    node1: str
    node2: str
    distance: float


@dataclass
class Event:
    name: str
    probability: float
    duration: float  # seconds
    location: str


@dataclass
class Train:
    name: str
    max_acceleration: float
    max_brake_force: float
    departure: str
    arrival: str
    hour: int  # seconds since midnight


@dataclass
class Schedule:
    name: str
    trains: List[Train] = field(default_factory=list)


@dataclass
class Elements:
    """Nodes, rails and events read from an elements file."""

    nodes: List[str] = field(default_factory=list)
    rails: List[Rail] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)


def _number(text: str) -> float:
    """Parse a plain finite decimal number."""
    if "_" in text:
        raise ValueError(f"not a number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def _field(words: Sequence[str], index: int) -> Optional[str]:
    return words[index] if index < len(words) else None


def _number_field(words: Sequence[str], index: int) -> Optional[float]:
    text = _field(words, index)
    if text is None:
        return None
    try:
        return _number(text)
    except ValueError:
        return None


def normalize_duration(duration: float, unit: str) -> float:
    """Convert ``duration`` given in ``unit`` (s, m, h, d, y) to seconds."""
    try:
        return duration * _UNIT_SECONDS[unit]
    except KeyError:
        raise ValueError(f"Unknown time unit: {unit!r}") from None


def _parse_rail(rest: str, filename: str, number: int, column: int, line: str) -> Rail:
    words = rest.split()
    try:
        node1, node2, distance = words[0], words[1], _number(words[2])
    except (IndexError, ValueError):
        report_error(filename, number, column, "Failed to read rail data", line)
    if distance < 0:
        report_error(filename, number, column, "Distance cannot be negative", line)
    if distance > MAX_RAIL_DISTANCE:
        report_error(filename, number, column, "Distance must be < 1,000,000", line)
    return Rail(node1, node2, distance)


def _parse_event(rest: str, filename: str, number: int, column: int, line: str) -> Event:
    rest = rest.lstrip()
    if not rest.startswith('"'):
        report_error(filename, number, column, "Failed to read event name", line)
    closing = rest.find('"', 1)
    if closing == -1:
        name, remainder = rest[1:], ""
    else:
        name, remainder = rest[1:closing], rest[closing + 1:]
    column = line.find(name) + len(name) + 3
    words = remainder.split()
    try:
        probability = _number(words[0])
        duration = _number(words[1])
        unit, location = words[2], words[3]
    except (IndexError, ValueError):
        report_error(filename, number, column, "Failed to read event data", line)
    if not 0 <= probability <= 1:
        report_error(
            filename, number, column, "Probability must be between 0 and 1", line
        )
    column += len(f"{probability:f}")
    try:
        seconds = normalize_duration(duration, unit)
    except ValueError:
        report_error(filename, number, column, "Failed to read time format", line)
    return Event(name, probability, seconds, location)


def parse_elements(lines: Iterable[str], filename: str = "") -> Elements:
    """Parse ``Node``, ``Rail`` and ``Event`` lines; raise ParsingError on bad input."""
    elements = Elements()
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if not line:
            continue
        match = _LEADING_WORD.fullmatch(line)
        if match is None:
            report_error(filename, number, 0, "Failed to read element type", line)
        kind, rest = match.groups()
        column = len(kind) + 1
        if kind == "Node":
            words = rest.split()
            if not words:
                report_error(filename, number, column, "Failed to read node name", line)
            elements.nodes.append(words[0])
        elif kind == "Rail":
            elements.rails.append(_parse_rail(rest, filename, number, column, line))
        elif kind == "Event":
            elements.events.append(_parse_event(rest, filename, number, column, line))
        else:
            report_error(
                filename, number, column, f"Unknown element type: {kind}", line
            )
    return elements


def parse_elements_file(filename: Union[str, Path]) -> Elements:
    """Read and parse an elements file."""
    name = str(filename)
    try:
        with open(name, encoding="utf-8", newline="") as handle:
            return parse_elements(handle, name)
    except OSError:
        report_error(name, 0, 0, "Failed to open file", "")


def _parse_train(line: str, filename: str, number: int) -> Train:
    words = line.split()
    column = 0

    name = _field(words, 0)
    if name is None:
        report_error(filename, number, column, "Failed to read train name", line)
    column += len(name) + 1

    acceleration = _number_field(words, 1)
    if acceleration is None:
        report_error(filename, number, column, "Failed to read max acceleration", line)
    column += len(f"{acceleration:f}") + 1

    brake_force = _number_field(words, 2)
    if brake_force is None:
        report_error(filename, number, column, "Failed to read max brake force", line)
    column += len(f"{brake_force:f}") + 1

    departure = _field(words, 3)
    if departure is None:
        report_error(filename, number, column, "Failed to read departure", line)
    column += len(departure) + 1

    arrival = _field(words, 4)
    if arrival is None:
        report_error(filename, number, column, "Failed to read arrival", line)
    column += len(arrival) + 1

    hour = _field(words, 5)
    if hour is None:
        report_error(filename, number, column, "Failed to read hour", line)
    column += len(hour) + 1

    if acceleration < 0:
        report_error(
            filename, number, column, "MaxAcceleration must be non-negative", line
        )
    if brake_force < 0:
        report_error(
            filename, number, column, "MaxBrakeForce must be non-negative", line
        )
    try:
        seconds = convert_to_seconds(hour)
    except ValueError as exc:
        raise ParsingError(str(exc), filename, number, column, line) from exc
    return Train(name, acceleration, brake_force, departure, arrival, seconds)


def parse_train_lines(lines: Iterable[str], filename: str = "", name: str = "") -> Schedule:
    """Parse train lines into a schedule called ``name``.

    Empty lines are skipped and are not counted in reported line numbers.
    """
    schedule = Schedule(name)
    number = 0
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue
        number += 1
        schedule.trains.append(_parse_train(line, filename, number))
    return schedule


def parse_train_file(filename: Union[str, Path], name: Optional[str] = None) -> Schedule:
    """Read a schedule file; the schedule is named after the file stem by default."""
    path = Path(filename)
    schedule_name = path.stem if name is None else name
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return parse_train_lines(handle, str(path), schedule_name)
    except OSError:
        report_error(str(path), 0, 0, "Failed to open file", "")


def parse_schedule_files(directory: Union[str, Path]) -> List[Schedule]:
    """Parse every ``*.schedule`` file in ``directory``, in name order."""
    entries = sorted(Path(directory).iterdir())
    return [
        parse_train_file(entry, entry.stem)
        for entry in entries
        if entry.suffix == SCHEDULE_SUFFIX
    ]


def write_data_file(filename: Union[str, Path], elements: Elements) -> None:
    """Write ``elements`` in the elements file format, durations in seconds."""
    with open(filename, "w", encoding="utf-8") as handle:
        for node in elements.nodes:
            handle.write(f"Node {node}\n")
        for rail in elements.rails:
            handle.write(f"Rail {rail.node1} {rail.node2} {rail.distance:g}\n")
        for event in elements.events:
            handle.write(
                f'Event "{event.name}" {event.probability:g} '
                f"{event.duration:g}s {event.location}\n"
            )
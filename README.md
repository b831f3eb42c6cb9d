# railsched

Reading and writing the files that describe a railway network and its train
schedules, with the time helpers and settings a rail simulation needs.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Files it reads

An elements file describes the network, one element per line. Empty lines
are skipped.

    Node CityA
    Node CityB
    Rail CityA CityB 12.5
    Event "Signal failure" 0.05 10 m CityA

- `Rail` distances must lie between 0 and 1,000,000.
- An `Event` has a quoted name, a probability between 0 and 1, a duration
  with a unit (`s`, `m`, `h`, `d` or `y`), and a location. Durations are
  stored in seconds.

A schedule directory holds `*.schedule` files. Each one is a schedule named
after the file stem, with one train per line:

    Express1 0.8 1.2 CityA CityB 14h30

The fields are the train name, maximum acceleration, maximum brake force
(both non-negative), departure node, arrival node and departure time (`HhM`,
hours 0–23, minutes 0–59, stored as seconds since midnight). Schedule files
are read in file-name order.

A node-positions file stores the map position of each node as `name x y`
lines.

## Command line

    railsched [-e ELEMENTS_FILE] [-d SCHEDULE_DIRECTORY]

The defaults are `-e data.txt -d Schedules` (long forms `--elements` and
`--directory`). The command reads the elements file and every schedule in
the directory, then prints how many nodes, rails, events, schedules and
trains it loaded. It exits with status 0 on success and 1 otherwise.

`-h` or `--help` prints the usage text. An unknown option or a missing value
prints an error message and the usage text. A file that cannot be read or
parsed prints the error.

## Library use

```python
from railsched.parser import parse_elements_file, parse_schedule_files, write_data_file
from railsched.timeconv import convert_to_seconds, to_time_string, to_hhmmss
from railsched.settings import Settings

elements = parse_elements_file("data.txt")     # Elements(nodes, rails, events)
schedules = parse_schedule_files("Schedules")  # list of Schedule(name, trains)

convert_to_seconds("14h30")   # 52200
to_time_string(52200)         # "14h30"
to_hhmmss(3725)               # "01:02:05"

settings = Settings.instance()
settings.toggle_show_node_names()

write_data_file("data_out.txt", elements)      # event durations written in seconds
```

Modules:

- `railsched.parser` — `parse_elements`, `parse_elements_file`,
  `parse_train_lines`, `parse_train_file`, `parse_schedule_files`,
  `write_data_file`, `normalize_duration`, and the dataclasses `Rail`,
  `Event`, `Train`, `Schedule` and `Elements`.
- `railsched.timeconv` — `convert_to_seconds`, `to_time_string`,
  `to_hhmmss` and `current_time_string` (`HHMM_DD-MM-YYYY`).
- `railsched.positions` — `read_node_positions` and
  `write_node_positions` (sorted by node name, six decimals).
- `railsched.settings` — the shared `Settings` (`instance()`, `reset()`).
  Simulation FPS is kept within (0, 42], node size within [0.1, 42], and the
  map position only changes when a background is set.
  `save_node_positions` merges the given positions into the existing
  `node_positions_file` (default `node_positions.txt`) and rewrites it; the
  file must already exist.
- `railsched.logger` — `Logger` and `FileLogger`, which truncates its file,
  creates the parent directory and can be used as a context manager.
- `railsched.cli` — `parse_program_options`, `ProgramOptions`,
  `UsageError` and `main`.

## Errors

Malformed input raises `railsched.errors.ParsingError`, whose message is
`Parsing Error: <reason>`; the file, line, column and line text are kept as
attributes. When both line and column are known, the error and the line are
also printed to standard error, with a caret under the column.

## What it does not do

This package only loads, checks and writes the input files and keeps the
settings. It does not run train simulations, compute travel times or
collisions, write simulation logs, or show a map or any other graphical
view.
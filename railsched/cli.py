"""Command-line entry point: load the elements file and schedules."""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from .errors import ParsingError, print_usage
from .parser import parse_elements_file, parse_schedule_files
from .settings import Settings

DEFAULT_ELEMENTS_FILE = "data.txt"
DEFAULT_SCHEDULE_DIRECTORY = "Schedules"


@dataclass
class ProgramOptions:
    elements_file: str = DEFAULT_ELEMENTS_FILE
    schedule_directory: str = DEFAULT_SCHEDULE_DIRECTORY


class UsageError(Exception):
    """Bad command line; an empty message means help was asked for."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def parse_program_options(
    argv: Sequence[str], settings: Optional[Settings] = None
) -> ProgramOptions:
    """Parse arguments (without the program name) and record them in settings."""
    options = ProgramOptions()
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            raise UsageError()
        if arg in ("-e", "--elements"):
            value = next(args, None)
            if value is None:
                raise UsageError("No elements file specified")
            options.elements_file = value
        elif arg in ("-d", "--directory"):
            value = next(args, None)
            if value is None:
                raise UsageError("No schedule directory specified")
            options.schedule_directory = value
        else:
            raise UsageError(f"Unknown option: {arg}")
    if not options.elements_file:
        raise UsageError("Elements file is required")
    if not options.schedule_directory:
        raise UsageError("Schedule directory is required")

    target = settings if settings is not None else Settings.instance()
    target.schedule_directory = options.schedule_directory
    target.data_file_name = options.elements_file
    target.output_directory = "SimulationsLog_" + datetime.now().strftime("%d%m%y")
    return options


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_program_options(args)
    except UsageError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        print_usage()
        return 1
    try:
        elements = parse_elements_file(options.elements_file)
        schedules = parse_schedule_files(options.schedule_directory)
    except (ParsingError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    trains = sum(len(schedule.trains) for schedule in schedules)
    print(
        f"Loaded {len(elements.nodes)} nodes, {len(elements.rails)} rails, "
        f"{len(elements.events)} events and {len(schedules)} schedules "
        f"({trains} trains)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
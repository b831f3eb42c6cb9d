"""Reading and writing the node positions file."""

from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

from .errors import report_error
from .logger import FileLogger

Position = Tuple[float, float]


def read_node_positions(filename: Union[str, Path]) -> Dict[str, Position]:
    """Read ``name x y`` lines; raise ParsingError on a missing file or bad line."""
    name = str(filename)
    try:
        text = Path(name).read_text(encoding="utf-8")
    except OSError:
        report_error(name, 0, 0, "Failed to open file", "")
    positions: Dict[str, Position] = {}
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        try:
            node, x, y = fields[0], float(fields[1]), float(fields[2])
        except (IndexError, ValueError):
            report_error(name, number, 0, "Malformed line", line)
        positions[node] = (x, y)
    return positions


def write_node_positions(
    filename: Union[str, Path], positions: Mapping[str, Position]
) -> None:
    """Write positions sorted by node name, six decimals per coordinate."""
    with FileLogger(filename) as logger:
        for node in sorted(positions):
            x, y = positions[node]
            logger.write(f"{node} {x:.6f} {y:.6f}")
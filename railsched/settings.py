"""Process-wide simulation settings."""

import threading
from typing import Mapping, Optional, Tuple

from .positions import Position, read_node_positions, write_node_positions


class Settings:
    """Shared settings; use ``Settings.instance()`` to get the single copy."""

    _instance: Optional["Settings"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self.data_file_name = ""
        self.schedule_directory = ""
        self.output_directory = ""
        self.node_positions_file = "node_positions.txt"
        self.rail_two_way = False
        self.show_node_names = False
        self.prefer_meters = False
        self.background: Optional[str] = None
        self._max_speed = 25.0
        self._simulation_fps = 10.0
        self._node_size = 4.2
        self._map_position: Tuple[float, float] = (0.0, 0.0)

    @classmethod
    def instance(cls) -> "Settings":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next call starts from defaults."""
        with cls._lock:
            cls._instance = None

    def toggle_show_node_names(self) -> None:
        self.show_node_names = not self.show_node_names

    @property
    def simulation_fps(self) -> float:
        return self._simulation_fps

    @simulation_fps.setter
    def simulation_fps(self, fps: float) -> None:
        if 0 < fps <= 42:
            self._simulation_fps = float(fps)

    @property
    def node_size(self) -> float:
        return self._node_size

    @node_size.setter
    def node_size(self, size: float) -> None:
        if 0.1 <= size <= 42.0:
            self._node_size = float(size)

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @max_speed.setter
    def max_speed(self, speed: float) -> None:
        # Guarded by the current value: once non-positive it stays put.
        if self._max_speed > 0:
            self._max_speed = float(speed)

    @property
    def map_position(self) -> Tuple[float, float]:
        return self._map_position

    @map_position.setter
    def map_position(self, pos: Tuple[float, float]) -> None:
        if self.background:
            self._map_position = (float(pos[0]), float(pos[1]))

    def save_node_positions(self, positions: Mapping[str, Position]) -> None:
        """Merge ``positions`` into the positions file and rewrite it."""
        merged = read_node_positions(self.node_positions_file)
        merged.update(positions)
        write_node_positions(self.node_positions_file, merged)
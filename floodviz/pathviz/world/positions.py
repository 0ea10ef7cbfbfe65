# pathviz/world/positions.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathviz.world.coords import Coord
from pathviz.world.grid import Grid

@dataclass(slots=True)
class Positions:
    start: Coord
    target: Coord
    selected: Coord
    # target-adjacent .. start-adjacent; start and target themselves excluded
    path: list[Coord] = field(default_factory=list)

    @classmethod
    def default_for(cls, grid: Grid) -> "Positions":
        """Start top-left, target bottom-right, cursor in the middle."""
        return cls(
            start=(0, 0),
            target=(grid.cols - 1, grid.rows - 1),
            selected=(grid.cols // 2, grid.rows // 2),
        )

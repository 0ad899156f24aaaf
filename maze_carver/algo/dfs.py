import logging
from typing import List, Tuple
from maze_carver.core.grid import Grid
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first search, advanced one transition per step() call.

    The stack holds the path from the start cell to the active cell. Each
    step either carves into a random unvisited neighbor of the active cell
    or, at a dead end, pops back one cell. An empty stack means the maze is
    finished and further steps do nothing.
    """

    START = (0, 0)

    def __init__(self, grid: Grid, rng=None, seed: int = None):
        super().__init__(grid, rng=rng, seed=seed)

        start_x, start_y = self.START
        self.grid.set_visited(start_x, start_y)

        # Stack of (x, y)
        self._stack: List[Tuple[int, int]] = [self.START]
        self._current: Tuple[int, int] = self.START

        logger.debug(f"DFS generator ready on {grid.width}x{grid.height} grid")

    @classmethod
    def create(cls, width: int, height: int, rng=None, seed: int = None) -> "RecursiveBacktracker":
        return cls(Grid(width, height), rng=rng, seed=seed)

    @property
    def stack(self) -> List[Tuple[int, int]]:
        return list(self._stack)

    @property
    def current(self) -> Tuple[int, int]:
        # Once complete this still holds the last top of stack (the start cell)
        return self._current

    @property
    def is_complete(self) -> bool:
        return not self._stack

    def unvisited_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        return [
            (nx, ny)
            for nx, ny, _ in self.grid.get_neighbors(x, y)
            if not self.grid.is_visited(nx, ny)
        ]

    def step(self) -> bool:
        if not self._stack:
            return False

        cx, cy = self._current
        neighbors = self.unvisited_neighbors(cx, cy)
        self.step_count += 1

        if neighbors:
            nx, ny = self.rng.choice(neighbors)

            # Carve
            self.grid.remove_wall(cx, cy, nx, ny)
            self.grid.set_visited(nx, ny)

            self._stack.append((nx, ny))
            self._current = (nx, ny)
            return True

        # Backtrack
        self._stack.pop()
        if self._stack:
            self._current = self._stack[-1]
        else:
            logger.debug(f"DFS complete after {self.step_count} steps")
        return False

    def status(self) -> str:
        return f"Carving... Stack: {len(self._stack)}"
